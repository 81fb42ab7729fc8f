"""Spatial itemset mining: level-wise discovery of geometrically coherent label groups across
labeled point sets, with permutation-based significance estimation."""
from motifminer.standalone_utilities.configuration_settings import get_version

__version__ = get_version()
