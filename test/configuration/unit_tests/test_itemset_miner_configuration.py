"""Test validation of run configuration."""
import pytest
from pydantic import ValidationError

from motifminer.model.itemset import ItemsetComparatorType
from motifminer.geometry.vertex import AnchorOrdering
from motifminer.configuration.metrics import CohesionMetricConfiguration
from motifminer.configuration.metrics import AdherenceMetricConfiguration
from motifminer.configuration.metrics import SeparationMetricConfiguration
from motifminer.configuration.itemset_miner import ItemsetMinerConfiguration
from motifminer.analysis.statistics.significance_estimator_type import SignificanceEstimatorType
from motifminer.mining.exceptions import ConfigurationError


def test_from_dict():
    configuration = ItemsetMinerConfiguration.from_dict({
        'simple_metrics': [{'metric': 'support', 'minimal_support': 0.5}],
        'extraction_metrics': [
            {'metric': 'adherence', 'desired_extent': 6.0, 'vertex_one': True},
            {'metric': 'cohesion', 'maximal_cohesion': 4.0},
        ],
        'extraction_dependent_metrics': [{'metric': 'separation', 'maximal_separation': -10.0}],
        'maximal_epochs': 3,
        'itemset_comparator_type': 'adherence',
        'anchor_ordering': 'support descending',
        'significance_estimator': {'sample_size': 10, 'seed': 1},
    })
    assert isinstance(configuration.extraction_metrics[0], AdherenceMetricConfiguration)
    assert configuration.extraction_metrics[0].vertex_one
    assert isinstance(configuration.extraction_dependent_metrics[0], SeparationMetricConfiguration)
    assert configuration.itemset_comparator_type is ItemsetComparatorType.ADHERENCE
    assert configuration.anchor_ordering is AnchorOrdering.SUPPORT_DESCENDING
    assert configuration.significance_estimator.significance_type is SignificanceEstimatorType.COHESION
    assert isinstance(configuration.extraction_metrics[1], CohesionMetricConfiguration)
    assert len(configuration.metric_configurations()) == 4
    assert ItemsetMinerConfiguration.from_dict(configuration.to_dict()) == configuration


def test_defaults():
    configuration = ItemsetMinerConfiguration(extraction_metrics=[CohesionMetricConfiguration()])
    assert configuration.maximal_epochs == -1
    assert configuration.itemset_comparator_type is ItemsetComparatorType.COHESION
    cohesion = configuration.extraction_metrics[0]
    assert cohesion.maximal_cohesion == 10.0
    assert cohesion.level_of_parallelism == -1
    assert not cohesion.vertex_one


@pytest.mark.parametrize('values', [
    {},
    {'extraction_metrics': [{'metric': 'cohesion'}], 'maximal_epochs': 0},
    {'simple_metrics': [{'metric': 'support', 'minimal_support': 1.5}]},
    {'extraction_metrics': [{'metric': 'cohesion', 'level_of_parallelism': 0}]},
    {'extraction_metrics': [{'metric': 'cohesion'}, {'metric': 'cohesion', 'maximal_cohesion': 2.0}]},
    {'simple_metrics': [{'metric': 'support'}], 'extraction_dependent_metrics': [{'metric': 'separation'}]},
    {
        'extraction_metrics': [{'metric': 'cohesion'}],
        'extraction_dependent_metrics': [{'metric': 'consensus'}, {'metric': 'affinity'}],
    },
    {'simple_metrics': [{'metric': 'support'}], 'significance_estimator': {}},
    {'extraction_metrics': [{'metric': 'adherence'}], 'significance_estimator': {}},
    {
        'extraction_metrics': [{'metric': 'cohesion'}],
        'significance_estimator': {'significance_type': 'consensus'},
    },
    {'extraction_metrics': [{'metric': 'cohesion'}], 'significance_estimator': {'sample_size': 1}},
])
def test_invalid_configurations(values):
    with pytest.raises(ConfigurationError):
        ItemsetMinerConfiguration.from_dict(values)


def test_direct_construction_raises_validation_error():
    with pytest.raises(ValidationError):
        ItemsetMinerConfiguration()
