"""Labeled point sets."""
from attrs import define
from attrs import field

from motifminer.model.item import Item


@define(frozen=True)
class DataPointIdentifier:
    """Stable key of a data point, e.g. a structure identifier and a chain identifier."""
    source_identifier: str
    sub_identifier: str | None = None

    def __str__(self) -> str:
        if self.sub_identifier is None:
            return self.source_identifier
        return f'{self.source_identifier}_{self.sub_identifier}'


@define
class DataPoint:
    """An identified, ordered sequence of items. Labels may repeat."""
    identifier: DataPointIdentifier
    items: list[Item] = field(factory=list)

    @property
    def labels(self) -> set:
        return {item.label for item in self.items}

    def copy(self) -> 'DataPoint':
        """Copy with fresh items sharing the same structures, so labels can be changed freely."""
        items = [Item(item.label, item.sequence_position, item.structure) for item in self.items]
        return DataPoint(self.identifier, items)

    def __str__(self) -> str:
        return f'{self.identifier}{{' + '-'.join(str(item) for item in self.items) + '}'
