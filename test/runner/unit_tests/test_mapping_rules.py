"""Test label mapping rules."""
from motifminer.model.structure import LeafStructure
from motifminer.model.item import Item
from motifminer.model.data_point import DataPoint
from motifminer.model.data_point import DataPointIdentifier
from motifminer.mapping.rules import DataPointLabelMapper
from motifminer.mapping.rules import ExcludeFamilyMappingRule
from motifminer.mapping.rules import ExcludeLabelMappingRule
from motifminer.mapping.rules import LabelMappingRule


def _data_point():
    water = LeafStructure('w1', 'HOH', center=(0.0, 0.0, 0.0), sequence_bearing=False)
    serine = LeafStructure('s2', 'SER', center=(1.0, 0.0, 0.0))
    threonine = LeafStructure('t3', 'THR', center=(2.0, 0.0, 0.0))
    items = [Item('HOH', 1, water), Item('SER', 2, serine), Item('THR', 3, threonine)]
    return DataPoint(DataPointIdentifier('1abc', 'A'), items)


def test_exclusion_rules():
    data_point = _data_point()
    mapped = DataPointLabelMapper(ExcludeLabelMappingRule(['THR'])).map_data_point(data_point)
    assert [item.label for item in mapped.items] == ['HOH', 'SER']
    assert mapped.identifier == data_point.identifier
    assert len(data_point.items) == 3

    mapped = DataPointLabelMapper(ExcludeFamilyMappingRule(['HOH'])).map_data_point(data_point)
    assert [item.label for item in mapped.items] == ['SER', 'THR']
    assert mapped.items[0].structure is data_point.items[1].structure


def test_relabeling():
    rule = LabelMappingRule({'SER': 'hydroxyl', 'THR': 'hydroxyl'})
    mapped = DataPointLabelMapper(rule).map_data_points([_data_point()])
    assert [item.label for item in mapped[0].items] == ['HOH', 'hydroxyl', 'hydroxyl']
    assert mapped[0].labels == {'HOH', 'hydroxyl'}
    assert [item.sequence_position for item in mapped[0].items] == [1, 2, 3]
