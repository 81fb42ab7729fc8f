"""Background distributions of itemset scores under random permutation of labels."""
from math import sqrt

from numpy.random import default_rng

from motifminer.model.itemset import Itemset
from motifminer.model.distribution import Distribution
from motifminer.alignment.collaborator import PointFilterType
from motifminer.metrics.base import ExtractionMetric
from motifminer.metrics.cohesion import CohesionMetric
from motifminer.metrics.consensus import ConsensusMetric
from motifminer.metrics.consensus import observed_motifs
from motifminer.metrics.affinity import AffinityMetric
from motifminer.metrics.affinity import calculate_affinity
from motifminer.metrics.parallel import evaluate_partitioned
from motifminer.mining.itemset_miner import ItemsetMiner
from motifminer.mining.exceptions import DistributionSamplerError
from motifminer.mining.exceptions import MetricEvaluationError
from motifminer.analysis.statistics.significance_estimator_type import SignificanceEstimatorType
from motifminer.standalone_utilities.log_formats import colorized_logger

logger = colorized_logger(__name__)


class DistributionSampler:
    """Samples, for every mined itemset, the values a metric takes when the labels of each data
    point are shuffled. Per-data-point label frequencies are preserved, and positions are
    those of the original data, since only labels move.

    Works on copies of the data points, so the miner's data is left unchanged.
    """
    significance_type: SignificanceEstimatorType
    sample_size: int
    level_of_parallelism: int
    extraction_metric: ExtractionMetric
    background_distributions: dict[Itemset, Distribution]

    def __init__(
        self,
        itemset_miner: ItemsetMiner,
        significance_type: SignificanceEstimatorType,
        sample_size: int,
        level_of_parallelism: int,
        seed: int | None = None,
    ):
        self.significance_type = significance_type
        self.sample_size = sample_size
        self.level_of_parallelism = level_of_parallelism
        self.itemsets = list(itemset_miner.total_itemsets)
        self.data_points = [data_point.copy() for data_point in itemset_miner.data_points]
        self.random_generator = default_rng(seed)
        self.background_distributions = {}

        if significance_type is SignificanceEstimatorType.COHESION:
            extraction_metrics = itemset_miner.metrics_of_type(CohesionMetric)
        else:
            extraction_metrics = itemset_miner.metrics_of_type(ExtractionMetric)
        if len(extraction_metrics) == 0:
            raise DistributionSamplerError('Failed to determine the extraction metric used for mining.')
        self.extraction_metric = extraction_metrics[0]

        self.clustering_metric: ConsensusMetric | AffinityMetric | None = None
        if significance_type is SignificanceEstimatorType.CONSENSUS:
            self.clustering_metric = self._single(itemset_miner, ConsensusMetric)
        if significance_type is SignificanceEstimatorType.AFFINITY:
            self.clustering_metric = self._single(itemset_miner, AffinityMetric)
        logger.info('Distribution sampler initialized for %s.', significance_type.value)

    @staticmethod
    def _single(itemset_miner: ItemsetMiner, metric_type: type):
        metrics = itemset_miner.metrics_of_type(metric_type)
        if len(metrics) == 0:
            raise DistributionSamplerError(f'No {metric_type.__name__} found to sample from.')
        return metrics[0]

    def sample(self) -> dict[Itemset, Distribution]:
        for i in range(self.sample_size):
            if i % max(1, self.sample_size // 10) == 0:
                logger.info('Background sampling round %s of %s.', i + 1, self.sample_size)
            self.randomize_data_points()
            phase = f'background sampling round {i + 1}'
            try:
                values = evaluate_partitioned(self.itemsets, self.background_value, self.level_of_parallelism, phase)
            except MetricEvaluationError as error:
                raise DistributionSamplerError(error.message) from error
            for itemset in self.itemsets:
                value = values[itemset]
                if value is not None:
                    self._add_sample_value(itemset, value)
        return self.background_distributions

    def randomize_data_points(self) -> None:
        for data_point in self.data_points:
            labels = [item.label for item in data_point.items]
            self.random_generator.shuffle(labels)
            for item, label in zip(data_point.items, labels):
                item.label = label

    def _add_sample_value(self, itemset: Itemset, value: float) -> None:
        distribution = self.background_distributions.get(itemset)
        if distribution is None:
            distribution = Distribution(self.significance_type.value)
            self.background_distributions[itemset] = distribution
        distribution.add_observation_value(value)

    def background_value(self, itemset: Itemset) -> float | None:
        """The metric value of the itemset on the current permutation, if it is observed."""
        background_itemset = itemset.copy()
        selected = []
        for data_point in self.data_points:
            candidates = self.extraction_metric.generate_candidates(background_itemset, data_point)
            selected.extend(self.extraction_metric.select_observations(candidates))
        if len(selected) == 0:
            return None
        if self.significance_type is SignificanceEstimatorType.COHESION:
            return sqrt(sum(extent for _, extent in selected) / len(selected))
        motifs = observed_motifs([observation for observation, _ in selected])
        if len(motifs) == 0:
            return None
        configuration = self.clustering_metric.configuration
        collaborator = self.clustering_metric.collaborator
        if isinstance(self.clustering_metric, ConsensusMetric):
            result = collaborator.consensus(
                motifs,
                PointFilterType.BACKBONE,
                self.clustering_metric.cluster_cutoff,
                align_within_clusters=False,
                representation_scheme=configuration.representation_scheme,
            )
            return result.normalized_score
        result = collaborator.affinity(
            motifs,
            PointFilterType.BACKBONE,
            align_within_clusters=False,
            representation_scheme=configuration.representation_scheme,
        )
        return calculate_affinity(result)
