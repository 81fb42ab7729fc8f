"""Cohesion: root-mean-square extent of the tightest observation in each data point."""
from math import sqrt

from motifminer.model.itemset import Itemset
from motifminer.model.itemset import SCORE_UNDEFINED
from motifminer.model.data_point import DataPoint
from motifminer.model.distribution import Distribution
from motifminer.geometry.extent import maximal_squared_extent
from motifminer.geometry.vertex import AnchorOrdering
from motifminer.metrics.base import ExtractionMetric
from motifminer.metrics.base import DistributionMetric
from motifminer.configuration.metrics import CohesionMetricConfiguration


class CohesionMetric(ExtractionMetric, DistributionMetric):
    score_name = 'cohesion'
    maximal_cohesion: float

    def __init__(
        self,
        data_points: list[DataPoint],
        configuration: CohesionMetricConfiguration,
        anchor_ordering: AnchorOrdering = AnchorOrdering.LABEL,
    ):
        super().__init__(
            data_points,
            configuration.vertex_one,
            configuration.level_of_parallelism,
            representation_scheme=configuration.representation_scheme,
            anchor_ordering=anchor_ordering,
        )
        self.maximal_cohesion = configuration.maximal_cohesion
        self.distributions: dict[Itemset, Distribution] = {}

    def select_observations(self, candidates: list[Itemset]) -> list[tuple[Itemset, float]]:
        if len(candidates) == 0:
            return []
        extents = [maximal_squared_extent(c, self.representation_scheme) for c in candidates]
        best = min(range(len(candidates)), key=lambda i: extents[i])
        return [(candidates[best], extents[best])]

    def score(self, squared_extents: list[float]) -> float:
        if len(squared_extents) == 0:
            return SCORE_UNDEFINED
        return sqrt(sum(squared_extents) / len(squared_extents))

    def passes(self, score: float) -> bool:
        return score <= self.maximal_cohesion

    def __str__(self) -> str:
        return f'CohesionMetric(maximal_cohesion={self.maximal_cohesion})'
