"""Affinity: self-dissimilarity per cluster of the affinity clustering of observations."""
from motifminer.model.itemset import Itemset
from motifminer.model.itemset import SCORE_UNDEFINED
from motifminer.alignment.collaborator import AlignmentCollaborator
from motifminer.alignment.collaborator import ClusteringResult
from motifminer.metrics.base import ExtractionDependentMetric
from motifminer.metrics.base import ClusteringMetric
from motifminer.metrics.consensus import AlignmentOutcome
from motifminer.metrics.consensus import observed_motifs
from motifminer.metrics.parallel import evaluate_partitioned
from motifminer.configuration.metrics import AffinityMetricConfiguration


def calculate_affinity(result: ClusteringResult) -> float:
    cluster_count = len(result.clusters)
    if cluster_count == 0:
        return SCORE_UNDEFINED
    return result.self_dissimilarity / cluster_count


class AffinityMetric(ExtractionDependentMetric, ClusteringMetric):
    score_name = 'affinity'
    collaborator: AlignmentCollaborator
    configuration: AffinityMetricConfiguration

    def __init__(self, configuration: AffinityMetricConfiguration, collaborator: AlignmentCollaborator):
        super().__init__()
        self.configuration = configuration
        self.collaborator = collaborator
        self.maximal_affinity = configuration.maximal_affinity
        self.clustered_itemsets = {}

    def align(self, itemset: Itemset) -> AlignmentOutcome:
        motifs = observed_motifs(self.extracted_itemsets.get(itemset, []))
        if len(motifs) == 0:
            return AlignmentOutcome(SCORE_UNDEFINED, None, [])
        result = self.collaborator.affinity(
            motifs,
            self.configuration.point_filter,
            align_within_clusters=self.configuration.align_within_clusters,
            representation_scheme=self.configuration.representation_scheme,
        )
        return AlignmentOutcome(calculate_affinity(result), result, [])

    def filter_itemsets(
        self,
        itemsets: list[Itemset],
        extracted_itemsets: dict[Itemset, list[Itemset]],
    ) -> list[Itemset]:
        self.extracted_itemsets = extracted_itemsets
        outcomes = evaluate_partitioned(itemsets, self.align, self.configuration.level_of_parallelism, str(self))
        self.clustered_itemsets = {}
        for itemset in itemsets:
            outcome = outcomes[itemset]
            itemset.affinity = outcome.score
            if outcome.result is not None:
                self.clustered_itemsets[itemset] = outcome.result
        return [itemset for itemset in itemsets if self.passes(itemset.affinity)]

    def passes(self, score: float) -> bool:
        return score <= self.maximal_affinity

    def keeps_extracted(self, score: float) -> bool:
        return score < self.maximal_affinity

    def __str__(self) -> str:
        return f'AffinityMetric(maximal_affinity={self.maximal_affinity})'
