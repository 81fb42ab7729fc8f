"""Test itemset identity, copies and orderings."""
from math import inf

from motifminer.model.item import Item
from motifminer.model.itemset import Itemset
from motifminer.model.itemset import ItemsetComparatorType
from motifminer.model.structure import LeafStructure
from motifminer.model.data_point import DataPointIdentifier


def test_identity_by_labels():
    structure = LeafStructure('1abc-5', 'A', center=(0.0, 0.0, 0.0))
    located = Itemset([Item('A', 5, structure), Item('B', 10)])
    plain = Itemset.of('B', 'A')
    assert located == plain
    assert hash(located) == hash(plain)
    assert len({located, plain}) == 1
    assert located.labels == ('A', 'B')


def test_duplicate_labels_collapse():
    itemset = Itemset([Item('A', 1), Item('A', 2), Item('B', 3)])
    assert len(itemset) == 2
    assert itemset.to_simple_string() == '{A-B}'


def test_scores_default_to_undefined():
    itemset = Itemset.of('A', 'B')
    assert all(value == inf for value in itemset.scores().values())
    assert itemset.p_value is None
    assert itemset.ks is None
    assert '?' in str(itemset)


def test_union_and_containment():
    union = Itemset.of('A', 'B').union(Itemset.of('A', 'C'))
    assert union == Itemset.of('A', 'B', 'C')
    assert union.contains_all(Itemset.of('C', 'A'))
    assert not Itemset.of('A', 'B').contains_all(union)
    assert Itemset.of('A') < Itemset.of('A', 'B')


def test_copies():
    structure = LeafStructure('1abc-5', 'A', center=(1.0, 2.0, 3.0))
    identifier = DataPointIdentifier('1abc', 'A')
    itemset = Itemset([Item('A', 5, structure), Item('B', 10)], data_point_identifier=identifier)

    shallow = itemset.copy()
    assert shallow == itemset
    assert shallow.structural_motif is None
    assert all(item.structure is None for item in shallow)

    deep = itemset.deep_copy()
    assert deep.data_point_identifier == identifier
    assert deep.items[0].structure == structure
    assert deep.items[0].structure is not structure
    assert list(deep.structural_motif.positions()[0]) == [1.0, 2.0, 3.0]
    assert itemset.to_observation_string() == '1abc_A:A5-B10'


def test_comparators():
    first = Itemset.of('A', 'B')
    second = Itemset.of('A', 'C')
    third = Itemset.of('B', 'C')
    first.support, second.support, third.support = 0.5, 1.0, 0.5
    first.cohesion, second.cohesion = 2.0, 1.0
    first.p_value = 0.01

    by_support = ItemsetComparatorType.SUPPORT.sorted([first, second, third])
    assert by_support == [second, first, third]
    by_cohesion = ItemsetComparatorType.COHESION.sorted([third, first, second])
    assert by_cohesion == [second, first, third]
    by_p_value = ItemsetComparatorType.P_VALUE.sorted([second, first])
    assert by_p_value[0] is first


if __name__=='__main__':
    test_identity_by_labels()
    test_duplicate_labels_collapse()
    test_scores_default_to_undefined()
    test_union_and_containment()
    test_copies()
    test_comparators()
