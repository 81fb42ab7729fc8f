"""Destinations for extracted observations and clustering results."""
from abc import ABC
from abc import abstractmethod

from motifminer.model.itemset import Itemset
from motifminer.alignment.collaborator import ClusteringResult


class ResultSink(ABC):
    """Receives the in-memory results of a run, for persistence elsewhere."""

    @abstractmethod
    def write_extracted_itemsets(self, extracted_itemsets: dict[Itemset, list[Itemset]]) -> None:
        pass

    @abstractmethod
    def write_clustering_results(self, clustered_itemsets: dict[Itemset, ClusteringResult]) -> None:
        pass


class MemoryResultSink(ResultSink):
    """Keeps the handed-over results."""
    def __init__(self):
        self.extracted_itemsets: dict[Itemset, list[Itemset]] = {}
        self.clustered_itemsets: dict[Itemset, ClusteringResult] = {}

    def write_extracted_itemsets(self, extracted_itemsets: dict[Itemset, list[Itemset]]) -> None:
        self.extracted_itemsets.update(extracted_itemsets)

    def write_clustering_results(self, clustered_itemsets: dict[Itemset, ClusteringResult]) -> None:
        self.clustered_itemsets.update(clustered_itemsets)
