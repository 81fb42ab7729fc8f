"""End-to-end mining runs: mapping, mining, significance estimation and hand-off of results."""
from typing import Iterable

import pandas as pd
from attrs import define

from motifminer.model.itemset import Itemset
from motifminer.model.itemset import SCORE_NAMES
from motifminer.model.data_point import DataPoint
from motifminer.alignment.collaborator import AlignmentCollaborator
from motifminer.configuration.itemset_miner import ItemsetMinerConfiguration
from motifminer.metrics.registry import create_metrics
from motifminer.mining.itemset_miner import ItemsetMiner
from motifminer.mapping.rules import MappingRule
from motifminer.mapping.rules import DataPointLabelMapper
from motifminer.analysis.statistics.significance_estimator import SignificanceEstimator
from motifminer.result_sink import ResultSink
from motifminer.result_sink import MemoryResultSink
from motifminer.standalone_utilities.performance_timer import PerformanceTimer
from motifminer.standalone_utilities.log_formats import colorized_logger

logger = colorized_logger(__name__)

SUMMARY_COLUMNS = ['itemset', 'p_value', 'ks', *SCORE_NAMES]


def summarize(itemsets: Iterable[Itemset]) -> pd.DataFrame:
    """One row per itemset with its scores. Unassessed p-values and KS values are NaN."""
    rows = []
    for itemset in itemsets:
        row = {'itemset': itemset.to_simple_string(), 'p_value': itemset.p_value, 'ks': itemset.ks}
        row.update(itemset.scores())
        rows.append(row)
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS).astype({'p_value': float, 'ks': float})


@define
class MiningReport:
    """Outcome of one run."""
    configuration: ItemsetMinerConfiguration
    total_itemsets: list[Itemset]
    significant_itemsets: list[Itemset] | None
    summary: pd.DataFrame
    timing: pd.DataFrame
    elapsed_seconds: float


class ItemsetMinerRunner:
    """Builds metrics from configuration and runs the mining pipeline over given data points."""
    data_points: list[DataPoint]
    configuration: ItemsetMinerConfiguration
    result_sink: ResultSink

    def __init__(
        self,
        data_points: list[DataPoint],
        configuration: ItemsetMinerConfiguration,
        collaborator: AlignmentCollaborator | None = None,
        mapping_rules: Iterable[MappingRule] = (),
        result_sink: ResultSink | None = None,
    ):
        self.data_points = data_points
        self.configuration = configuration
        self.collaborator = collaborator
        self.mapping_rules = list(mapping_rules)
        self.result_sink = MemoryResultSink() if result_sink is None else result_sink
        self.itemset_miner: ItemsetMiner | None = None
        self.significance_estimator: SignificanceEstimator | None = None

    def map_data_points(self) -> list[DataPoint]:
        data_points = self.data_points
        for rule in self.mapping_rules:
            logger.info('Applying mapping rule %s.', rule.__class__.__name__)
            data_points = DataPointLabelMapper(rule).map_data_points(data_points)
        return data_points

    def run(self) -> MiningReport:
        timer = PerformanceTimer()
        timer.record_timepoint('start')
        data_points = self.map_data_points()
        metrics = create_metrics(self.configuration, data_points, self.collaborator)
        timer.record_timepoint('metrics created')

        self.itemset_miner = ItemsetMiner(data_points, metrics, self.configuration)
        total_itemsets = self.itemset_miner.mine()
        timer.record_timepoint('mined')

        significant_itemsets = None
        if self.configuration.significance_estimator is not None:
            self.significance_estimator = SignificanceEstimator(
                self.itemset_miner,
                self.configuration.significance_estimator,
            )
            significant_itemsets = self.significance_estimator.estimate()
            timer.record_timepoint('significance estimated')

        self.result_sink.write_extracted_itemsets(self.itemset_miner.total_extracted_itemsets)
        self.result_sink.write_clustering_results(self.itemset_miner.total_clustered_itemsets)
        timer.record_timepoint('results written')

        summary = summarize(significant_itemsets if significant_itemsets is not None else total_itemsets)
        if not summary.empty:
            logger.info('Summary:\n%s', summary.head(20).to_string(index=False))
        timing = timer.report()
        logger.info('Timing:\n%s', timing.to_string(index=False))
        return MiningReport(
            configuration=self.configuration,
            total_itemsets=total_itemsets,
            significant_itemsets=significant_itemsets,
            summary=summary,
            timing=timing,
            elapsed_seconds=timer.elapsed(),
        )
