"""Synthetic data points and a stand-in alignment collaborator shared by the unit tests."""
import pytest

from motifminer.model.item import Item
from motifminer.model.structure import LeafStructure
from motifminer.model.data_point import DataPoint
from motifminer.model.data_point import DataPointIdentifier
from motifminer.alignment.collaborator import AlignmentCollaborator
from motifminer.alignment.collaborator import ClusteringResult


def build_data_point(identifier: str, entries) -> DataPoint:
    """Entries are (label, position, sequence position); a position of None leaves the item
    without structure.
    """
    items = []
    for label, position, sequence_position in entries:
        structure = None
        if position is not None:
            structure = LeafStructure(f'{identifier}-{sequence_position}', label, center=position)
        items.append(Item(label, sequence_position, structure))
    return DataPoint(DataPointIdentifier(identifier, 'A'), items)


@pytest.fixture
def data_point_builder():
    return build_data_point


@pytest.fixture
def two_data_points() -> list[DataPoint]:
    return [
        build_data_point('1abc', [
            ('A', (0.0, 0.0, 0.0), 5),
            ('B', (1.0, 0.0, 0.0), 10),
            ('C', (0.0, 1.0, 0.0), 15),
            ('D', (0.0, 0.0, 1.0), 20),
        ]),
        build_data_point('2def', [
            ('B', (0.0, 0.0, 0.0), 5),
            ('C', (1.0, 0.0, 0.0), 10),
            ('D', (0.0, 1.0, 0.0), 15),
        ]),
    ]


class StubClusteringResult(ClusteringResult):
    def __init__(self, motifs, normalized_score, self_dissimilarity, cluster_count):
        self.motifs = motifs
        self._normalized_score = normalized_score
        self._self_dissimilarity = self_dissimilarity
        self._clusters = [list(motifs) for _ in range(cluster_count)]
        self.destinations = []

    @property
    def normalized_score(self) -> float:
        return self._normalized_score

    @property
    def self_dissimilarity(self) -> float:
        return self._self_dissimilarity

    @property
    def clusters(self):
        return self._clusters

    @property
    def alignment_trace(self) -> list[float]:
        return [0.1 * i for i in range(len(self.motifs))]

    def write_clusters(self, destination) -> None:
        self.destinations.append(destination)


class StubCollaborator(AlignmentCollaborator):
    """Consensus score 0.1 per motif; affinity with two clusters and self-dissimilarity 0.5."""
    def __init__(self):
        self.calls = []

    def consensus(self, motifs, point_filter, cluster_cutoff, align_within_clusters=False, representation_scheme=None):
        self.calls.append(('consensus', len(motifs), point_filter))
        return StubClusteringResult(motifs, 0.1 * len(motifs), 0.0, 1)

    def affinity(self, motifs, point_filter, align_within_clusters=False, representation_scheme=None):
        self.calls.append(('affinity', len(motifs), point_filter))
        return StubClusteringResult(motifs, 0.0, 0.5, 2)


@pytest.fixture
def collaborator() -> StubCollaborator:
    return StubCollaborator()
