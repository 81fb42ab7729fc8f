"""Geometric backing of items: leaf structures (e.g. residues) and motifs assembled from them."""
from attrs import define
from attrs import field
from attrs import evolve
from numpy import array
from numpy import float64
from numpy.typing import NDArray

Position = tuple[float, float, float]


@define(frozen=True)
class LeafStructure:
    """One leaf of a structure (a residue, nucleotide or ligand), identified within its data
    point. Positions are not part of the identity.
    """
    identifier: str
    family: str
    center: Position | None = field(default=None, eq=False)
    representations: dict[str, Position] = field(factory=dict, eq=False)
    sequence_bearing: bool = field(default=True, eq=False)

    def position(self, representation_scheme: str | None = None) -> NDArray[float64] | None:
        """The representative point, the center unless a named scheme is requested."""
        if representation_scheme is None:
            point = self.center
        else:
            point = self.representations.get(representation_scheme)
        if point is None:
            return None
        return array(point, dtype=float64)

    def copy(self) -> 'LeafStructure':
        return evolve(self, representations=dict(self.representations))


@define(frozen=True)
class StructuralMotif:
    """The merged geometric representation of an itemset instance."""
    leaves: tuple[LeafStructure, ...]

    def positions(self, representation_scheme: str | None = None) -> NDArray[float64]:
        points = [leaf.position(representation_scheme) for leaf in self.leaves]
        return array([p for p in points if p is not None], dtype=float64).reshape(-1, 3)

    def copy(self) -> 'StructuralMotif':
        return StructuralMotif(tuple(leaf.copy() for leaf in self.leaves))

    def __len__(self) -> int:
        return len(self.leaves)
