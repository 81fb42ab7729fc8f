"""Separation: Morse-potential penalty of sequence gaps between the items of observations."""
from math import exp

from motifminer.model.itemset import Itemset
from motifminer.model.itemset import SCORE_UNDEFINED
from motifminer.metrics.base import ExtractionDependentMetric
from motifminer.configuration.metrics import SeparationMetricConfiguration

MORSE_POTENTIAL_DISCRETE_RANGE = 10000


def morse_potential(well_depth: float, shape: float, optimal: float, r: float) -> float:
    """D (1 - exp(-a (r - r0)))^2 - D"""
    term = 1 - exp(-shape * (r - optimal))
    return well_depth * term * term - well_depth


class SeparationMetric(ExtractionDependentMetric):
    score_name = 'separation'

    def __init__(self, configuration: SeparationMetricConfiguration):
        super().__init__()
        self.maximal_separation = configuration.maximal_separation
        self.well_depth = configuration.morse_well_depth
        self.shape = configuration.morse_shape
        self.optimal_separation = configuration.optimal_separation
        self.lookup = [
            morse_potential(self.well_depth, self.shape, self.optimal_separation, gap)
            for gap in range(MORSE_POTENTIAL_DISCRETE_RANGE)
        ]

    def gap_penalty(self, gap: int) -> float:
        if gap < MORSE_POTENTIAL_DISCRETE_RANGE:
            return self.lookup[gap]
        return morse_potential(self.well_depth, self.shape, self.optimal_separation, gap)

    def observation_separation(self, observation: Itemset, item_count: int) -> float:
        bearing = [
            item for item in observation.items
            if item.structure is not None and item.structure.sequence_bearing
        ]
        bearing.sort(key=lambda item: item.sequence_position)
        total = 0.0
        for previous, following in zip(bearing, bearing[1:]):
            total += self.gap_penalty(following.sequence_position - previous.sequence_position)
        return total / item_count

    def calculate_separation(self, itemset: Itemset) -> float:
        observations = self.extracted_itemsets.get(itemset, [])
        if len(observations) == 0:
            return SCORE_UNDEFINED
        total = sum(self.observation_separation(o, len(itemset)) for o in observations)
        return total / len(observations)

    def filter_itemsets(
        self,
        itemsets: list[Itemset],
        extracted_itemsets: dict[Itemset, list[Itemset]],
    ) -> list[Itemset]:
        self.extracted_itemsets = extracted_itemsets
        for itemset in itemsets:
            itemset.separation = self.calculate_separation(itemset)
        return [itemset for itemset in itemsets if self.passes(itemset.separation)]

    def passes(self, score: float) -> bool:
        return score <= self.maximal_separation

    def __str__(self) -> str:
        return f'SeparationMetric(maximal_separation={self.maximal_separation})'
