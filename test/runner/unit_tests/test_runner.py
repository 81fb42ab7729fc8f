"""Test end-to-end runs from configuration."""
import pytest

from motifminer.model.itemset import Itemset
from motifminer.configuration.itemset_miner import ItemsetMinerConfiguration
from motifminer.metrics.registry import create_metrics
from motifminer.metrics.consensus import ConsensusMetric
from motifminer.mapping.rules import ExcludeLabelMappingRule
from motifminer.mining.exceptions import ConfigurationError
from motifminer.result_sink import MemoryResultSink
from motifminer.runner import ItemsetMinerRunner
from motifminer.runner import SUMMARY_COLUMNS
from motifminer.runner import summarize


def _configuration(**values):
    return ItemsetMinerConfiguration.from_dict({
        'simple_metrics': [{'metric': 'support', 'minimal_support': 0.6}],
        'extraction_metrics': [{'metric': 'cohesion', 'level_of_parallelism': 2}],
        **values,
    })


def test_run(two_data_points):
    sink = MemoryResultSink()
    report = ItemsetMinerRunner(two_data_points, _configuration(), result_sink=sink).run()
    assert [i.to_simple_string() for i in report.total_itemsets] == ['{B-C}', '{B-D}', '{B-C-D}', '{C-D}']
    assert report.significant_itemsets is None
    assert list(report.summary.columns) == SUMMARY_COLUMNS
    assert list(report.summary['itemset']) == ['{B-C}', '{B-D}', '{B-C-D}', '{C-D}']
    assert report.summary['p_value'].isna().all()
    assert report.summary['support'].eq(1.0).all()
    assert set(sink.extracted_itemsets) == set(report.total_itemsets)
    assert list(report.timing['to']) == ['metrics created', 'mined', 'results written']
    assert report.elapsed_seconds >= 0


def test_run_with_mapping_and_significance(two_data_points):
    configuration = _configuration(significance_estimator={'sample_size': 10, 'seed': 5, 'level_of_parallelism': 1})
    runner = ItemsetMinerRunner(
        two_data_points,
        configuration,
        mapping_rules=[ExcludeLabelMappingRule(['D'])],
    )
    report = runner.run()
    assert report.total_itemsets == [Itemset.of('B', 'C')]
    assert report.significant_itemsets is not None
    assert len(report.summary) == len(report.significant_itemsets)
    assert runner.significance_estimator is not None
    assert len(runner.significance_estimator.background_distributions[Itemset.of('B', 'C')]) == 10
    assert 'significance estimated' in list(report.timing['to'])


def test_alignment_metrics_need_collaborator(two_data_points, collaborator):
    configuration = _configuration(extraction_dependent_metrics=[{'metric': 'consensus'}])
    with pytest.raises(ConfigurationError):
        create_metrics(configuration, two_data_points)
    metrics = create_metrics(configuration, two_data_points, collaborator)
    assert [str(m).split('(')[0] for m in metrics] == ['SupportMetric', 'CohesionMetric', 'ConsensusMetric']
    assert isinstance(metrics[2], ConsensusMetric)


def test_run_with_consensus(two_data_points, collaborator):
    configuration = _configuration(extraction_dependent_metrics=[{'metric': 'consensus', 'level_of_parallelism': 1}])
    sink = MemoryResultSink()
    report = ItemsetMinerRunner(two_data_points, configuration, collaborator=collaborator, result_sink=sink).run()
    assert len(report.total_itemsets) == 4
    assert all(itemset.consensus == pytest.approx(0.2) for itemset in report.total_itemsets)
    assert set(sink.clustered_itemsets) == set(report.total_itemsets)


def test_summarize_empty():
    summary = summarize([])
    assert summary.empty
    assert list(summary.columns) == SUMMARY_COLUMNS
