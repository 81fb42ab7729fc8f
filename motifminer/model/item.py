"""A single labeled entity."""
from typing import Any

from attrs import define
from attrs import field
from numpy import float64
from numpy.typing import NDArray

from motifminer.model.structure import LeafStructure

NO_SEQUENCE_POSITION = -1


@define(unsafe_hash=True, order=True)
class Item:
    """A labeled entity, optionally backed by a leaf structure.

    Equality, hashing and ordering consider the label only, so that itemsets are sets of labels.
    The label is mutable only to allow permutation of labels on copied data points.
    """
    label: Any
    sequence_position: int = field(default=NO_SEQUENCE_POSITION, eq=False)
    structure: LeafStructure | None = field(default=None, eq=False)

    def position(self, representation_scheme: str | None = None) -> NDArray[float64] | None:
        if self.structure is None:
            return None
        return self.structure.position(representation_scheme)

    def copy(self) -> 'Item':
        """Geometry-stripped copy."""
        return Item(self.label)

    def deep_copy(self) -> 'Item':
        structure = None if self.structure is None else self.structure.copy()
        return Item(self.label, self.sequence_position, structure)

    def __str__(self) -> str:
        return str(self.label)
