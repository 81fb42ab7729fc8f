"""Lazily computed per-data-point squared distance matrices."""
from threading import Lock

from attrs import define
from numpy import array
from numpy import zeros
from numpy import float64
from numpy.typing import NDArray
from scipy.spatial.distance import pdist  # type: ignore
from scipy.spatial.distance import squareform  # type: ignore

from motifminer.model.data_point import DataPoint
from motifminer.model.data_point import DataPointIdentifier
from motifminer.mining.exceptions import CandidateGenerationError
from motifminer.standalone_utilities.log_formats import colorized_logger

logger = colorized_logger(__name__)


@define
class SquaredDistanceMatrix:
    """Symmetric squared distances between the item occurrences of one data point.

    Rows are keyed by the index of the occurrence in the data point's item list, so repeated
    labels remain distinguishable. Occurrences without a resolvable position have no row.
    """
    row_indices: dict[int, int]
    values: NDArray[float64]

    def __contains__(self, occurrence: int) -> bool:
        return occurrence in self.row_indices

    def squared_distance(self, occurrence1: int, occurrence2: int) -> float:
        try:
            row1 = self.row_indices[occurrence1]
            row2 = self.row_indices[occurrence2]
        except KeyError as error:
            message = f'No position for occurrence {error.args[0]} in squared distance matrix.'
            raise CandidateGenerationError(message) from error
        return float(self.values[row1, row2])

    def __len__(self) -> int:
        return len(self.row_indices)


def compute_squared_distance_matrix(
    data_point: DataPoint,
    representation_scheme: str | None = None,
) -> SquaredDistanceMatrix:
    row_indices: dict[int, int] = {}
    positions = []
    for occurrence, item in enumerate(data_point.items):
        position = item.position(representation_scheme)
        if position is None:
            continue
        row_indices[occurrence] = len(positions)
        positions.append(position)
    if len(positions) == 0:
        return SquaredDistanceMatrix(row_indices, zeros((0, 0), dtype=float64))
    values = squareform(pdist(array(positions, dtype=float64), metric='sqeuclidean'))
    return SquaredDistanceMatrix(row_indices, values.reshape(len(positions), len(positions)))


class DataPointCache:
    """Memoizes squared distance matrices by data point identifier.

    The compute-and-store step is serialized per data point; different data points may be
    computed concurrently.
    """
    representation_scheme: str | None
    _matrices: dict[DataPointIdentifier, SquaredDistanceMatrix]
    _locks: dict[DataPointIdentifier, Lock]

    def __init__(self, representation_scheme: str | None = None):
        self.representation_scheme = representation_scheme
        self._matrices = {}
        self._locks = {}
        self._locks_lock = Lock()

    def squared_distance_matrix(self, data_point: DataPoint) -> SquaredDistanceMatrix:
        key = data_point.identifier
        with self._locks_lock:
            lock = self._locks.setdefault(key, Lock())
        with lock:
            matrix = self._matrices.get(key)
            if matrix is None:
                matrix = compute_squared_distance_matrix(data_point, self.representation_scheme)
                self._matrices[key] = matrix
                logger.debug('Computed squared distance matrix for %s (%s positions).', key, len(matrix))
        return matrix

    def __len__(self) -> int:
        return len(self._matrices)
