"""Nearest-neighbor chaining match of a symbolic itemset to concrete observations in one data
point (the VertexOne and VertexAll heuristics)."""
from collections import Counter
from enum import Enum
from typing import Iterable

from motifminer.model.item import Item
from motifminer.model.itemset import Itemset
from motifminer.model.data_point import DataPoint
from motifminer.model.structure import StructuralMotif
from motifminer.geometry.distance_cache import SquaredDistanceMatrix


class AnchorOrdering(Enum):
    """Order in which the label groups of an itemset are used as anchors."""
    LABEL = 'label'
    SUPPORT_DESCENDING = 'support descending'
    SUPPORT_ASCENDING = 'support ascending'


def label_supports(data_points: Iterable[DataPoint]) -> Counter:
    """Number of data points in which each label occurs."""
    counts: Counter = Counter()
    for data_point in data_points:
        counts.update(data_point.labels)
    return counts


def order_items(itemset: Itemset, ordering: AnchorOrdering, supports: Counter | None = None) -> list[Item]:
    items = list(itemset.items)
    if ordering is AnchorOrdering.LABEL or supports is None:
        return items
    sign = -1 if ordering is AnchorOrdering.SUPPORT_DESCENDING else 1
    return sorted(items, key=lambda item: sign * supports[item.label])


class VertexCandidateGenerator:
    """Generates observations of an itemset in a data point.

    Each occurrence of an anchor label is a seed; for every other label the occurrence closest to
    the seed is chosen. With ``vertex_one`` only the first label group anchors, otherwise every
    group anchors in turn.
    """
    items: list[Item]
    data_point: DataPoint
    squared_distance_matrix: SquaredDistanceMatrix
    vertex_one: bool

    def __init__(
        self,
        itemset: Itemset,
        data_point: DataPoint,
        squared_distance_matrix: SquaredDistanceMatrix,
        vertex_one: bool,
        item_order: list[Item] | None = None,
    ):
        self.items = list(itemset.items) if item_order is None else item_order
        self.data_point = data_point
        self.squared_distance_matrix = squared_distance_matrix
        self.vertex_one = vertex_one

    def generate_candidates(self) -> list[Itemset]:
        groups = self._group_occurrences()
        if any(len(group) == 0 for group in groups):
            return []
        candidates: list[Itemset] = []
        seen: set[StructuralMotif] = set()
        for anchor, group in enumerate(groups):
            for seed in group:
                chosen = self._chain(seed, anchor, groups)
                if chosen is None:
                    continue
                candidate = self._assemble(chosen)
                if candidate.structural_motif in seen:
                    continue
                seen.add(candidate.structural_motif)
                candidates.append(candidate)
            if self.vertex_one:
                break
        return candidates

    def _group_occurrences(self) -> list[list[int]]:
        groups: list[list[int]] = [[] for _ in self.items]
        index_of_label = {item.label: i for i, item in enumerate(self.items)}
        for occurrence, data_point_item in enumerate(self.data_point.items):
            i = index_of_label.get(data_point_item.label)
            if i is None or occurrence not in self.squared_distance_matrix:
                continue
            groups[i].append(occurrence)
        return groups

    def _chain(self, seed: int, anchor: int, groups: list[list[int]]) -> list[int] | None:
        chosen = [seed]
        for j in range(len(groups) - 1):
            pointer = (j + anchor + 1) % len(groups)
            closest = self._find_closest(seed, groups[pointer])
            if closest is None:
                return None
            chosen.append(closest)
        return chosen

    def _find_closest(self, seed: int, occurrences: list[int]) -> int | None:
        closest = None
        closest_squared_distance = None
        for occurrence in occurrences:
            squared_distance = self.squared_distance_matrix.squared_distance(seed, occurrence)
            if closest_squared_distance is None or squared_distance < closest_squared_distance:
                closest_squared_distance = squared_distance
                closest = occurrence
        return closest

    def _assemble(self, chosen: list[int]) -> Itemset:
        items = [self.data_point.items[occurrence] for occurrence in chosen]
        ordered = sorted(items, key=lambda item: item.label)
        leaves = tuple(item.structure for item in ordered if item.structure is not None)
        return Itemset(
            items,
            structural_motif=StructuralMotif(leaves),
            data_point_identifier=self.data_point.identifier,
        )
