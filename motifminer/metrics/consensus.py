"""Consensus: tightness of the consensus clustering of an itemset's observations."""
from attrs import define

from motifminer.model.itemset import Itemset
from motifminer.model.itemset import SCORE_UNDEFINED
from motifminer.model.distribution import Distribution
from motifminer.model.structure import StructuralMotif
from motifminer.alignment.collaborator import AlignmentCollaborator
from motifminer.alignment.collaborator import ClusteringResult
from motifminer.metrics.base import ExtractionDependentMetric
from motifminer.metrics.base import DistributionMetric
from motifminer.metrics.base import ClusteringMetric
from motifminer.metrics.parallel import evaluate_partitioned
from motifminer.configuration.metrics import ConsensusMetricConfiguration


@define
class AlignmentOutcome:
    score: float
    result: ClusteringResult | None
    trace: list[float]


def observed_motifs(observations: list[Itemset]) -> list[StructuralMotif]:
    motifs = [observation.structural_motif for observation in observations]
    return [motif for motif in motifs if motif is not None]


class ConsensusMetric(ExtractionDependentMetric, DistributionMetric, ClusteringMetric):
    score_name = 'consensus'
    collaborator: AlignmentCollaborator
    configuration: ConsensusMetricConfiguration

    def __init__(self, configuration: ConsensusMetricConfiguration, collaborator: AlignmentCollaborator):
        super().__init__()
        self.configuration = configuration
        self.collaborator = collaborator
        self.maximal_consensus = configuration.maximal_consensus
        self.cluster_cutoff = configuration.cluster_cutoff_value
        self.distributions: dict[Itemset, Distribution] = {}
        self.clustered_itemsets = {}

    def align(self, itemset: Itemset) -> AlignmentOutcome:
        motifs = observed_motifs(self.extracted_itemsets.get(itemset, []))
        if len(motifs) == 0:
            return AlignmentOutcome(SCORE_UNDEFINED, None, [])
        result = self.collaborator.consensus(
            motifs,
            self.configuration.point_filter,
            self.cluster_cutoff,
            align_within_clusters=self.configuration.align_within_clusters,
            representation_scheme=self.configuration.representation_scheme,
        )
        return AlignmentOutcome(result.normalized_score, result, list(result.alignment_trace))

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
            itemset.consensus = outcome.score
            for value in outcome.trace:
                self.add_observation_value(itemset, value)
            if outcome.result is not None:
                self.clustered_itemsets[itemset] = outcome.result
        return [itemset for itemset in itemsets if self.passes(itemset.consensus)]

    def passes(self, score: float) -> bool:
        return score <= self.maximal_consensus

    def __str__(self) -> str:
        return f'ConsensusMetric(maximal_consensus={self.maximal_consensus})'
