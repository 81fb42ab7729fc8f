"""Sets of uniquely-labeled items, with their evaluation scores."""
from enum import Enum
from math import inf
from math import isinf
from typing import Any
from typing import Iterable

from motifminer.model.item import Item
from motifminer.model.structure import StructuralMotif
from motifminer.model.data_point import DataPointIdentifier

SCORE_UNDEFINED = inf

SCORE_NAMES = ('support', 'cohesion', 'adherence', 'consensus', 'affinity', 'separation')


def _format_score(value: float) -> str:
    return '?' if isinf(value) else f'{value:.4f}'


class Itemset:
    """A set of items with distinct labels.

    Identity is given by the item labels only; scores, geometry and origin are carried along
    without taking part in equality or hashing. The natural order is by cardinality.
    """
    items: tuple[Item, ...]
    support: float
    cohesion: float
    adherence: float
    consensus: float
    affinity: float
    separation: float
    p_value: float | None
    ks: float | None
    data_point_identifier: DataPointIdentifier | None

    def __init__(
        self,
        items: Iterable[Item],
        structural_motif: StructuralMotif | None = None,
        data_point_identifier: DataPointIdentifier | None = None,
    ):
        unique: dict[Item, None] = {}
        for item in items:
            unique.setdefault(item, None)
        self.items = tuple(sorted(unique))
        self._structural_motif = structural_motif
        self.data_point_identifier = data_point_identifier
        for name in SCORE_NAMES:
            setattr(self, name, SCORE_UNDEFINED)
        self.p_value = None
        self.ks = None

    @classmethod
    def of(cls, *labels: Any) -> 'Itemset':
        return cls(Item(label) for label in labels)

    @property
    def labels(self) -> tuple[Any, ...]:
        return tuple(item.label for item in self.items)

    @property
    def structural_motif(self) -> StructuralMotif | None:
        """The merged geometry of the items, built on first access when items carry structure."""
        if self._structural_motif is None:
            leaves = [item.structure for item in self.items if item.structure is not None]
            if leaves:
                leaves.sort(key=lambda leaf: (leaf.family, leaf.identifier))
                self._structural_motif = StructuralMotif(tuple(leaves))
        return self._structural_motif

    def union(self, other: 'Itemset') -> 'Itemset':
        return Itemset(self.items + other.items)

    def contains_all(self, other: 'Itemset') -> bool:
        return set(other.labels) <= set(self.labels)

    def copy(self) -> 'Itemset':
        """Shallow copy: same labels, no geometry."""
        return Itemset(item.copy() for item in self.items)

    def deep_copy(self) -> 'Itemset':
        motif = self.structural_motif
        return Itemset(
            (item.deep_copy() for item in self.items),
            structural_motif=None if motif is None else motif.copy(),
            data_point_identifier=self.data_point_identifier,
        )

    def to_simple_string(self) -> str:
        return '{' + '-'.join(str(item) for item in self.items) + '}'

    def to_observation_string(self) -> str:
        positions = '-'.join(f'{item}{item.sequence_position}' for item in self.items)
        return f'{self.data_point_identifier}:{positions}'

    def scores(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in SCORE_NAMES}

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Itemset):
            return NotImplemented
        return set(self.labels) == set(other.labels)

    def __hash__(self) -> int:
        return hash(frozenset(self.labels))

    def __lt__(self, other: 'Itemset') -> bool:
        return len(self.items) < len(other.items)

    def __str__(self) -> str:
        scores = ','.join(f'{name}={_format_score(getattr(self, name))}' for name in SCORE_NAMES)
        return f'{self.to_simple_string()}[{scores}]'

    def __repr__(self) -> str:
        return f'Itemset({self.to_simple_string()})'


class ItemsetComparatorType(Enum):
    """Orderings of mined itemsets by one of their scores."""
    SUPPORT = 'support'
    COHESION = 'cohesion'
    ADHERENCE = 'adherence'
    CONSENSUS = 'consensus'
    AFFINITY = 'affinity'
    SEPARATION = 'separation'
    P_VALUE = 'p_value'

    def sort_key(self, itemset: Itemset) -> tuple:
        value = getattr(itemset, self.value)
        if value is None:
            value = SCORE_UNDEFINED
        if self is ItemsetComparatorType.SUPPORT:
            value = -value
        return (value, tuple(str(label) for label in itemset.labels))

    def sorted(self, itemsets: Iterable[Itemset]) -> list[Itemset]:
        return sorted(itemsets, key=self.sort_key)
