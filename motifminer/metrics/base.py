"""Capability interfaces of evaluation metrics, queried by the mining engine."""
from abc import ABC
from abc import abstractmethod
from math import sqrt

from attrs import define
from attrs import field

from motifminer.model.itemset import Itemset
from motifminer.model.data_point import DataPoint
from motifminer.model.distribution import Distribution
from motifminer.geometry.distance_cache import DataPointCache
from motifminer.geometry.vertex import AnchorOrdering
from motifminer.geometry.vertex import VertexCandidateGenerator
from motifminer.geometry.vertex import label_supports
from motifminer.geometry.vertex import order_items
from motifminer.alignment.collaborator import ClusteringResult
from motifminer.metrics.parallel import evaluate_partitioned


class EvaluationMetric(ABC):
    """Scores itemsets and retains those passing a threshold."""
    score_name: str
    minimal_itemset_size: int = 1

    @abstractmethod
    def passes(self, score: float) -> bool:
        pass

    def __str__(self) -> str:
        return self.__class__.__name__


class SimpleMetric(EvaluationMetric):
    """Metric computed from labels alone."""

    @abstractmethod
    def filter_itemsets(self, itemsets: list[Itemset]) -> list[Itemset]:
        pass


class DistributionMetric(ABC):
    """Metric that records per-itemset value distributions while it evaluates."""
    distributions: dict[Itemset, Distribution]

    def add_observation_value(self, itemset: Itemset, value: float) -> None:
        distribution = self.distributions.get(itemset)
        if distribution is None:
            distribution = Distribution(self.score_name)  # type: ignore[attr-defined]
            self.distributions[itemset] = distribution
        distribution.add_observation_value(value)


class ClusteringMetric(ABC):
    """Metric that keeps the clustering result obtained for each itemset."""
    clustered_itemsets: dict[Itemset, ClusteringResult]


@define
class ExtractionResult:
    """Partition-local outcome for one itemset."""
    score: float
    observations: list[Itemset] = field(factory=list)
    values: list[float] = field(factory=list)


class ExtractionMetric(EvaluationMetric):
    """Metric that matches itemsets to observations in every data point.

    Observations retained by ``select_observations`` are collected per symbolic itemset in
    ``extracted_itemsets``, which later metrics of the same epoch consume.
    """
    minimal_itemset_size = 2
    data_points: list[DataPoint]
    vertex_one: bool
    level_of_parallelism: int
    anchor_ordering: AnchorOrdering
    cache: DataPointCache
    extracted_itemsets: dict[Itemset, list[Itemset]]

    def __init__(
        self,
        data_points: list[DataPoint],
        vertex_one: bool,
        level_of_parallelism: int,
        representation_scheme: str | None = None,
        anchor_ordering: AnchorOrdering = AnchorOrdering.LABEL,
    ):
        self.data_points = data_points
        self.vertex_one = vertex_one
        self.level_of_parallelism = level_of_parallelism
        self.anchor_ordering = anchor_ordering
        self.cache = DataPointCache(representation_scheme)
        self.label_supports = label_supports(data_points)
        self.extracted_itemsets = {}

    @property
    def representation_scheme(self) -> str | None:
        return self.cache.representation_scheme

    def generate_candidates(
        self,
        itemset: Itemset,
        data_point: DataPoint,
        cache: DataPointCache | None = None,
    ) -> list[Itemset]:
        cache = self.cache if cache is None else cache
        generator = VertexCandidateGenerator(
            itemset,
            data_point,
            cache.squared_distance_matrix(data_point),
            self.vertex_one,
            item_order=order_items(itemset, self.anchor_ordering, self.label_supports),
        )
        return generator.generate_candidates()

    @abstractmethod
    def select_observations(self, candidates: list[Itemset]) -> list[tuple[Itemset, float]]:
        """Observations to retain from the candidates of one data point, with squared extents."""

    @abstractmethod
    def score(self, squared_extents: list[float]) -> float:
        pass

    def evaluate_itemset(self, itemset: Itemset) -> ExtractionResult:
        observations = []
        squared_extents = []
        for data_point in self.data_points:
            candidates = self.generate_candidates(itemset, data_point)
            for observation, squared_extent in self.select_observations(candidates):
                observations.append(observation)
                squared_extents.append(squared_extent)
        values = [sqrt(x) for x in squared_extents]
        return ExtractionResult(self.score(squared_extents), observations, values)

    def filter_itemsets(self, itemsets: list[Itemset]) -> list[Itemset]:
        results = evaluate_partitioned(itemsets, self.evaluate_itemset, self.level_of_parallelism, str(self))
        self.extracted_itemsets = {}
        for itemset in itemsets:
            result = results[itemset]
            setattr(itemset, self.score_name, result.score)
            if len(result.observations) > 0:
                self.extracted_itemsets[itemset] = result.observations
            if isinstance(self, DistributionMetric):
                for value in result.values:
                    self.add_observation_value(itemset, value)
        self.filter_extracted_itemsets()
        return [itemset for itemset in itemsets if self.passes(getattr(itemset, self.score_name))]

    def filter_extracted_itemsets(self) -> None:
        self.extracted_itemsets = {
            itemset: observations
            for itemset, observations in self.extracted_itemsets.items()
            if self.passes(getattr(itemset, self.score_name))
        }


class ExtractionDependentMetric(EvaluationMetric):
    """Metric computed from the observations an extraction metric collected."""
    minimal_itemset_size = 2
    extracted_itemsets: dict[Itemset, list[Itemset]]

    def __init__(self):
        self.extracted_itemsets = {}

    @abstractmethod
    def filter_itemsets(
        self,
        itemsets: list[Itemset],
        extracted_itemsets: dict[Itemset, list[Itemset]],
    ) -> list[Itemset]:
        pass

    def keeps_extracted(self, score: float) -> bool:
        return self.passes(score)

    def filter_extracted_itemsets(self) -> None:
        """Removes, in place, extracted observations of itemsets that did not pass."""
        failing = [
            itemset for itemset in self.extracted_itemsets
            if not self.keeps_extracted(getattr(itemset, self.score_name))
        ]
        for itemset in failing:
            del self.extracted_itemsets[itemset]
