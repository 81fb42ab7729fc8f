"""Label mapping rules applied to data points before mining."""
from abc import ABC
from abc import abstractmethod
from typing import Any
from typing import Iterable

from motifminer.model.item import Item
from motifminer.model.data_point import DataPoint


class MappingRule(ABC):
    """Maps one item to a new item, or to None to drop it."""

    @abstractmethod
    def apply(self, item: Item) -> Item | None:
        pass


class ExcludeLabelMappingRule(MappingRule):
    def __init__(self, labels: Iterable[Any]):
        self.labels = set(labels)

    def apply(self, item: Item) -> Item | None:
        if item.label in self.labels:
            return None
        return Item(item.label, item.sequence_position, item.structure)


class ExcludeFamilyMappingRule(MappingRule):
    """Drops items whose structure belongs to one of the given families."""
    def __init__(self, families: Iterable[str]):
        self.families = set(families)

    def apply(self, item: Item) -> Item | None:
        if item.structure is not None and item.structure.family in self.families:
            return None
        return Item(item.label, item.sequence_position, item.structure)


class LabelMappingRule(MappingRule):
    """Relabels items, e.g. residue types to chemical groups. Unmapped labels are kept."""
    def __init__(self, mapping: dict[Any, Any]):
        self.mapping = dict(mapping)

    def apply(self, item: Item) -> Item | None:
        return Item(self.mapping.get(item.label, item.label), item.sequence_position, item.structure)


class DataPointLabelMapper:
    def __init__(self, rule: MappingRule):
        self.rule = rule

    def map_data_point(self, data_point: DataPoint) -> DataPoint:
        items = [self.rule.apply(item) for item in data_point.items]
        return DataPoint(data_point.identifier, [item for item in items if item is not None])

    def map_data_points(self, data_points: Iterable[DataPoint]) -> list[DataPoint]:
        return [self.map_data_point(data_point) for data_point in data_points]
