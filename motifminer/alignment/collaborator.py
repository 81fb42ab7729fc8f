"""Contracts for the alignment/clustering collaborator consumed by consensus and affinity scoring.

Superposition itself is performed elsewhere; implementations adapt a structural alignment
library to these interfaces.
"""
from abc import ABC
from abc import abstractmethod
from enum import Enum
from typing import Any

from motifminer.model.structure import StructuralMotif


class PointFilterType(Enum):
    """Which points of each leaf take part in superposition."""
    ALL = 'all'
    BACKBONE = 'backbone'
    SIDE_CHAIN = 'side chain'


class ClusteringResult(ABC):
    """Outcome of aligning and clustering a list of observations."""

    @property
    @abstractmethod
    def normalized_score(self) -> float:
        """Normalized dissimilarity in ``[0, ~1]``, lower is tighter."""

    @property
    @abstractmethod
    def self_dissimilarity(self) -> float:
        """Summed dissimilarity of members to their cluster representatives."""

    @property
    @abstractmethod
    def clusters(self) -> list[list[StructuralMotif]]:
        """Cluster membership, largest cluster first."""

    @property
    @abstractmethod
    def alignment_trace(self) -> list[float]:
        """Dissimilarities recorded while the clustering was built."""

    @abstractmethod
    def write_clusters(self, destination: Any) -> None:
        """Export clusters to an opaque destination."""


class AlignmentCollaborator(ABC):
    """Performs superposition-based clustering of structural motifs."""

    @abstractmethod
    def consensus(
        self,
        motifs: list[StructuralMotif],
        point_filter: PointFilterType,
        cluster_cutoff: float,
        align_within_clusters: bool = False,
        representation_scheme: str | None = None,
    ) -> ClusteringResult:
        pass

    @abstractmethod
    def affinity(
        self,
        motifs: list[StructuralMotif],
        point_filter: PointFilterType,
        align_within_clusters: bool = False,
        representation_scheme: str | None = None,
    ) -> ClusteringResult:
        pass
