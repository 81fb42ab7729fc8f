"""Test support, cohesion and adherence on two small data points."""
from math import inf
from math import sqrt

import pytest

from motifminer.model.itemset import Itemset
from motifminer.metrics.support import SupportMetric
from motifminer.metrics.cohesion import CohesionMetric
from motifminer.metrics.adherence import AdherenceMetric
from motifminer.configuration.metrics import SupportMetricConfiguration
from motifminer.configuration.metrics import CohesionMetricConfiguration
from motifminer.configuration.metrics import AdherenceMetricConfiguration


def test_support(two_data_points):
    metric = SupportMetric(two_data_points, SupportMetricConfiguration(minimal_support=1.0))
    assert metric.calculate_support(Itemset.of('B', 'C')) == 1.0
    assert metric.calculate_support(Itemset.of('A', 'B')) == 0.5
    assert metric.calculate_support(Itemset.of('Z')) == 0.0
    itemsets = [Itemset.of('A', 'B'), Itemset.of('B', 'D')]
    passing = metric.filter_itemsets(itemsets)
    assert passing == [Itemset.of('B', 'D')]
    assert itemsets[0].support == 0.5
    assert SupportMetric([], SupportMetricConfiguration()).calculate_support(Itemset.of('A')) == 0.0


def test_cohesion(two_data_points):
    configuration = CohesionMetricConfiguration(maximal_cohesion=1.3, level_of_parallelism=2)
    metric = CohesionMetric(two_data_points, configuration)
    bc = Itemset.of('B', 'C')
    ab = Itemset.of('A', 'B')
    az = Itemset.of('A', 'Z')
    passing = metric.filter_itemsets([bc, ab, az])

    assert bc.cohesion == pytest.approx(sqrt(1.5))
    assert ab.cohesion == pytest.approx(1.0)
    assert az.cohesion == inf
    assert passing == [bc, ab]
    assert len(metric.extracted_itemsets[bc]) == 2
    assert len(metric.extracted_itemsets[ab]) == 1
    assert az not in metric.extracted_itemsets
    assert sorted(metric.distributions[bc].observations) == pytest.approx([1.0, sqrt(2.0)])


def test_cohesion_rejection_drops_extracted(two_data_points):
    metric = CohesionMetric(two_data_points, CohesionMetricConfiguration(maximal_cohesion=1.1, level_of_parallelism=1))
    bc = Itemset.of('B', 'C')
    assert metric.filter_itemsets([bc]) == []
    assert metric.extracted_itemsets == {}


def test_adherence(two_data_points):
    configuration = AdherenceMetricConfiguration(
        desired_extent=1.2,
        desired_extent_delta=1.0,
        maximal_adherence=0.3,
        minimal_observations=2,
        level_of_parallelism=1,
    )
    metric = AdherenceMetric(two_data_points, configuration)
    bc = Itemset.of('B', 'C')
    ab = Itemset.of('A', 'B')
    passing = metric.filter_itemsets([bc, ab])
    assert bc.adherence == pytest.approx(0.20710678)
    assert ab.adherence == inf
    assert passing == [bc]
    assert list(metric.extracted_itemsets) == [bc]


def test_adherence_window_is_strict(two_data_points):
    configuration = AdherenceMetricConfiguration(
        desired_extent=1.0,
        desired_extent_delta=1.0,
        minimal_observations=1,
        level_of_parallelism=1,
    )
    metric = AdherenceMetric(two_data_points, configuration)
    bc = Itemset.of('B', 'C')
    metric.filter_itemsets([bc])
    observations = metric.extracted_itemsets[bc]
    assert len(observations) == 1
    assert observations[0].data_point_identifier == two_data_points[1].identifier
    assert bc.adherence == 0.0
