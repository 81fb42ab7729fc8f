"""Support: the fraction of data points containing all labels of an itemset."""
from motifminer.model.itemset import Itemset
from motifminer.model.data_point import DataPoint
from motifminer.metrics.base import SimpleMetric
from motifminer.configuration.metrics import SupportMetricConfiguration


class SupportMetric(SimpleMetric):
    score_name = 'support'
    data_points: list[DataPoint]
    minimal_support: float

    def __init__(self, data_points: list[DataPoint], configuration: SupportMetricConfiguration):
        self.data_points = data_points
        self.minimal_support = configuration.minimal_support
        self._label_sets = [data_point.labels for data_point in data_points]

    def calculate_support(self, itemset: Itemset) -> float:
        if len(self._label_sets) == 0:
            return 0.0
        labels = set(itemset.labels)
        count = sum(1 for label_set in self._label_sets if labels <= label_set)
        return count / len(self._label_sets)

    def passes(self, score: float) -> bool:
        return score >= self.minimal_support

    def filter_itemsets(self, itemsets: list[Itemset]) -> list[Itemset]:
        for itemset in itemsets:
            itemset.support = self.calculate_support(itemset)
        return [itemset for itemset in itemsets if self.passes(itemset.support)]

    def __str__(self) -> str:
        return f'SupportMetric(minimal_support={self.minimal_support})'
