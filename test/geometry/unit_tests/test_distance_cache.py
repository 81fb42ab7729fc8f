"""Test squared distance matrices and their cache."""
from concurrent.futures import ThreadPoolExecutor

import pytest

from motifminer.model.item import Item
from motifminer.model.itemset import Itemset
from motifminer.model.structure import LeafStructure
from motifminer.model.data_point import DataPoint
from motifminer.model.data_point import DataPointIdentifier
from motifminer.geometry.distance_cache import DataPointCache
from motifminer.geometry.distance_cache import compute_squared_distance_matrix
from motifminer.geometry.extent import maximal_squared_extent
from motifminer.mining.exceptions import CandidateGenerationError


def test_squared_distances(data_point_builder):
    data_point = data_point_builder('1abc', [
        ('A', (0.0, 0.0, 0.0), 1),
        ('B', (3.0, 4.0, 0.0), 2),
        ('C', None, 3),
    ])
    matrix = compute_squared_distance_matrix(data_point)
    assert len(matrix) == 2
    assert matrix.squared_distance(0, 1) == 25.0
    assert matrix.squared_distance(1, 0) == 25.0
    assert matrix.squared_distance(1, 1) == 0.0
    assert 2 not in matrix
    with pytest.raises(CandidateGenerationError):
        matrix.squared_distance(0, 2)


def test_empty_data_point():
    matrix = compute_squared_distance_matrix(DataPoint(DataPointIdentifier('empty')))
    assert len(matrix) == 0
    assert matrix.values.shape == (0, 0)


def test_representation_scheme():
    structures = [
        LeafStructure('r1', 'A', center=(0.0, 0.0, 0.0), representations={'CB': (0.0, 0.0, 2.0)}),
        LeafStructure('r2', 'B', center=(1.0, 0.0, 0.0), representations={'CB': (0.0, 0.0, 0.0)}),
        LeafStructure('r3', 'C', center=(2.0, 0.0, 0.0)),
    ]
    items = [Item(s.family, i, s) for i, s in enumerate(structures)]
    data_point = DataPoint(DataPointIdentifier('1abc'), items)
    matrix = compute_squared_distance_matrix(data_point, 'CB')
    assert len(matrix) == 2
    assert matrix.squared_distance(0, 1) == 4.0
    assert compute_squared_distance_matrix(data_point).squared_distance(0, 2) == 4.0


def test_cache_computes_once(two_data_points):
    cache = DataPointCache()
    first = cache.squared_distance_matrix(two_data_points[0])
    assert cache.squared_distance_matrix(two_data_points[0]) is first
    assert len(cache) == 1

    with ThreadPoolExecutor(max_workers=4) as executor:
        matrices = list(executor.map(cache.squared_distance_matrix, two_data_points * 8))
    assert len(cache) == 2
    assert all(m is first for m in matrices[0::2])
    assert len({id(m) for m in matrices}) == 2


def test_maximal_squared_extent(two_data_points):
    items = two_data_points[0].items
    assert maximal_squared_extent(Itemset(items[:2])) == 1.0
    assert maximal_squared_extent(Itemset(items[1:3])) == 2.0
    assert maximal_squared_extent(Itemset(items[:1])) == 0.0
    with pytest.raises(ValueError):
        maximal_squared_extent(Itemset.of('A', 'B'))


if __name__=='__main__':
    test_empty_data_point()
    test_representation_scheme()
