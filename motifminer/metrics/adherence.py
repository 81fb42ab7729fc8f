"""Adherence: variability of observation extents close to a desired extent."""
from math import sqrt

from numpy import std

from motifminer.model.itemset import Itemset
from motifminer.model.itemset import SCORE_UNDEFINED
from motifminer.model.data_point import DataPoint
from motifminer.geometry.extent import maximal_squared_extent
from motifminer.geometry.vertex import AnchorOrdering
from motifminer.metrics.base import ExtractionMetric
from motifminer.configuration.metrics import AdherenceMetricConfiguration


class AdherenceMetric(ExtractionMetric):
    """Observations are retained when their squared extent lies strictly between
    ``desired² - delta²`` and ``desired² + delta²``.
    """
    score_name = 'adherence'
    maximal_adherence: float
    minimal_observations: int

    def __init__(
        self,
        data_points: list[DataPoint],
        configuration: AdherenceMetricConfiguration,
        anchor_ordering: AnchorOrdering = AnchorOrdering.LABEL,
    ):
        super().__init__(
            data_points,
            configuration.vertex_one,
            configuration.level_of_parallelism,
            representation_scheme=configuration.representation_scheme,
            anchor_ordering=anchor_ordering,
        )
        desired_squared_extent = configuration.desired_extent ** 2
        squared_delta = configuration.desired_extent_delta ** 2
        self.lower_squared_extent = desired_squared_extent - squared_delta
        self.upper_squared_extent = desired_squared_extent + squared_delta
        self.maximal_adherence = configuration.maximal_adherence
        self.minimal_observations = configuration.minimal_observations

    def select_observations(self, candidates: list[Itemset]) -> list[tuple[Itemset, float]]:
        selected = []
        for candidate in candidates:
            squared_extent = maximal_squared_extent(candidate, self.representation_scheme)
            if self.lower_squared_extent < squared_extent < self.upper_squared_extent:
                selected.append((candidate, squared_extent))
        return selected

    def score(self, squared_extents: list[float]) -> float:
        if len(squared_extents) < self.minimal_observations:
            return SCORE_UNDEFINED
        return float(std([sqrt(x) for x in squared_extents]))

    def passes(self, score: float) -> bool:
        return score <= self.maximal_adherence

    def __str__(self) -> str:
        return f'AdherenceMetric(maximal_adherence={self.maximal_adherence})'
