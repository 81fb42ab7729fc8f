"""Level-wise (Apriori-style) mining of spatially coherent itemsets."""
from enum import Enum

from motifminer.model.itemset import Itemset
from motifminer.model.itemset import ItemsetComparatorType
from motifminer.model.data_point import DataPoint
from motifminer.alignment.collaborator import ClusteringResult
from motifminer.metrics.base import EvaluationMetric
from motifminer.metrics.base import SimpleMetric
from motifminer.metrics.base import ExtractionMetric
from motifminer.metrics.base import ExtractionDependentMetric
from motifminer.metrics.base import ClusteringMetric
from motifminer.configuration.itemset_miner import ItemsetMinerConfiguration
from motifminer.mining.exceptions import ItemsetMinerError
from motifminer.standalone_utilities.log_formats import colorized_logger

logger = colorized_logger(__name__)


class MiningState(Enum):
    SEEDING = 'seeding'
    GENERATING = 'generating'
    EVALUATING = 'evaluating'
    PRUNING = 'pruning'
    TERMINATED = 'terminated'


def _simple_strings(itemsets) -> str:
    return ' '.join(itemset.to_simple_string() for itemset in itemsets)


class ItemsetMiner:
    """Drives epochs of candidate generation, metric evaluation and pruning.

    In each epoch, candidates one item larger than the previous candidates are generated, the
    previous candidates are evaluated by every metric whose minimal itemset size they reach, and
    new candidates containing any rejected itemset are pruned. Itemsets of size two or more
    that pass every metric are accumulated in ``total_itemsets``.
    """
    data_points: list[DataPoint]
    evaluation_metrics: list[EvaluationMetric]
    maximal_epochs: int
    comparator_type: ItemsetComparatorType
    state: MiningState
    epoch: int
    previous_candidates: list[Itemset]
    candidates: list[Itemset]
    removed_candidates: set[Itemset]
    previous_itemset_size: int
    total_itemsets: list[Itemset]
    total_extracted_itemsets: dict[Itemset, list[Itemset]]
    total_clustered_itemsets: dict[Itemset, ClusteringResult]

    def __init__(
        self,
        data_points: list[DataPoint],
        evaluation_metrics: list[EvaluationMetric],
        configuration: ItemsetMinerConfiguration | None = None,
        maximal_epochs: int | None = None,
        comparator_type: ItemsetComparatorType | None = None,
    ):
        self.data_points = data_points
        self.evaluation_metrics = evaluation_metrics
        self.configuration = configuration
        if maximal_epochs is None:
            maximal_epochs = -1 if configuration is None else configuration.maximal_epochs
        if comparator_type is None:
            comparator_type = ItemsetComparatorType.COHESION if configuration is None \
                else configuration.itemset_comparator_type
        self.maximal_epochs = maximal_epochs
        self.comparator_type = comparator_type
        self.epoch = 0
        self.candidates = []
        self.removed_candidates = set()
        self.total_itemsets = []
        self.total_extracted_itemsets = {}
        self.total_clustered_itemsets = {}
        logger.info('Initialized with %s data points.', len(data_points))
        self._seed()

    def _seed(self) -> None:
        self.state = MiningState.SEEDING
        seeds: dict[Itemset, None] = {}
        for data_point in self.data_points:
            for item in data_point.items:
                seeds.setdefault(Itemset([item]).copy(), None)
        self.previous_candidates = sorted(seeds, key=lambda itemset: itemset.items[0])
        self.previous_itemset_size = 0
        logger.info('Created %s initial 1-itemsets.', len(self.previous_candidates))
        logger.debug('1-itemsets: %s', _simple_strings(self.previous_candidates))

    def metrics_of_type(self, metric_type: type) -> list:
        return [m for m in self.evaluation_metrics if isinstance(m, metric_type)]

    def mine(self) -> list[Itemset]:
        """Runs epochs until convergence or the epoch limit, and returns the sorted results."""
        logger.info('Starting mining process.')
        self.epoch = 1
        self.candidates = []
        self.removed_candidates = set()
        while len(self.candidates) > 0 or self.previous_itemset_size == 0:
            logger.info('Mining epoch %s.', self.epoch)
            self.generate_candidates()
            self.evaluate_metrics()
            self.prune_candidates()
            if self.epoch == self.maximal_epochs:
                logger.info('Mining terminated, epoch limit %s reached.', self.maximal_epochs)
                break
            if len(self.candidates) == 0:
                logger.info('Mining terminated, converged after %s epochs.', self.epoch)
            self.previous_candidates = self.candidates
            self.epoch += 1
        self.state = MiningState.TERMINATED
        self.total_itemsets = self.comparator_type.sorted(self.total_itemsets)
        logger.info('Found %s itemsets.', len(self.total_itemsets))
        return self.total_itemsets

    def generate_candidates(self) -> None:
        """Joins each pair of previous candidates whose union is exactly one item larger."""
        self.state = MiningState.GENERATING
        sizes = {len(itemset) for itemset in self.previous_candidates}
        if len(sizes) != 1:
            raise ItemsetMinerError(f'Could not determine size of previous candidates, sizes found: {sorted(sizes)}')
        self.previous_itemset_size = sizes.pop()
        target_size = self.previous_itemset_size + 1
        candidates: dict[Itemset, None] = {}
        for i, itemset1 in enumerate(self.previous_candidates):
            for itemset2 in self.previous_candidates[i + 1:]:
                union = itemset1.union(itemset2)
                if len(union) == target_size:
                    candidates.setdefault(union, None)
        self.candidates = list(candidates)
        logger.info('Generated %s candidates of size %s.', len(self.candidates), target_size)

    def evaluate_metrics(self) -> None:
        """Filters previous candidates by simple, extraction and extraction-dependent metrics,
        in that order, each seeing only the survivors of the ones before it.
        """
        self.state = MiningState.EVALUATING
        for metric in self._qualifying(SimpleMetric):
            logger.info('Evaluating simple metric %s.', metric)
            self._retain(metric, metric.filter_itemsets(self.previous_candidates))

        extracted_itemsets: dict[Itemset, list[Itemset]] = {}
        for metric in self._qualifying(ExtractionMetric):
            logger.info('Evaluating extraction metric %s.', metric)
            self._retain(metric, metric.filter_itemsets(self.previous_candidates))
            extracted_itemsets.update(metric.extracted_itemsets)

        clustered_itemsets: dict[Itemset, ClusteringResult] = {}
        for metric in self._qualifying(ExtractionDependentMetric):
            logger.info('Evaluating extraction-dependent metric %s.', metric)
            self._retain(metric, metric.filter_itemsets(self.previous_candidates, extracted_itemsets))
            metric.filter_extracted_itemsets()
            if isinstance(metric, ClusteringMetric):
                clustered_itemsets.update(metric.clustered_itemsets)

        survivors = set(self.previous_candidates)
        extracted_itemsets = {
            itemset: observations for itemset, observations in extracted_itemsets.items()
            if itemset in survivors
        }
        clustered_itemsets = {
            itemset: result for itemset, result in clustered_itemsets.items()
            if itemset in extracted_itemsets
        }
        if self.previous_itemset_size > 1:
            self.total_itemsets.extend(self.previous_candidates)
            self.total_extracted_itemsets.update(extracted_itemsets)
            self.total_clustered_itemsets.update(clustered_itemsets)
        logger.info('%s previous candidates passed all metrics.', len(self.previous_candidates))

    def _qualifying(self, metric_type: type) -> list:
        return [
            metric for metric in self.metrics_of_type(metric_type)
            if metric.minimal_itemset_size <= self.previous_itemset_size
        ]

    def _retain(self, metric: EvaluationMetric, survivors: list[Itemset]) -> None:
        passed = set(survivors)
        removed = [itemset for itemset in self.previous_candidates if itemset not in passed]
        self.removed_candidates.update(removed)
        self.previous_candidates = [itemset for itemset in self.previous_candidates if itemset in passed]
        logger.info('%s removed %s candidates, %s remain.', metric, len(removed), len(self.previous_candidates))
        logger.debug('Remaining: %s', _simple_strings(self.previous_candidates))

    def prune_candidates(self) -> None:
        """Removes candidates containing any itemset rejected in this epoch."""
        self.state = MiningState.PRUNING
        if self.previous_itemset_size == 0:
            return
        removed = [frozenset(itemset.labels) for itemset in self.removed_candidates]
        self.candidates = [
            candidate for candidate in self.candidates
            if not any(labels <= frozenset(candidate.labels) for labels in removed)
        ]
        if len(self.previous_candidates) == 0:
            self.candidates = []
        self.removed_candidates = set()
        logger.info('%s candidates remain after pruning.', len(self.candidates))
