"""Spatial extent of observations."""
from numpy import array
from numpy import float64
from scipy.spatial.distance import pdist  # type: ignore

from motifminer.model.itemset import Itemset


def maximal_squared_extent(itemset: Itemset, representation_scheme: str | None = None) -> float:
    """The largest squared pairwise distance among the positioned items of an observation."""
    positions = [item.position(representation_scheme) for item in itemset.items]
    positions = [p for p in positions if p is not None]
    if len(positions) == 0:
        raise ValueError(f'Could not determine extent of itemset {itemset.to_simple_string()}.')
    if len(positions) == 1:
        return 0.0
    return float(pdist(array(positions, dtype=float64), metric='sqeuclidean').max())
