"""Configuration of evaluation metrics."""
from typing import Literal

from pydantic import BaseModel  # pylint: disable=no-name-in-module
from pydantic import Field
from pydantic import field_validator

from motifminer.alignment.collaborator import PointFilterType
from motifminer.standalone_utilities.configuration_settings import DEFAULT_LEVEL_OF_PARALLELISM


def _check_level_of_parallelism(value: int) -> int:
    if value == -1 or value >= 1:
        return value
    raise ValueError(f'Level of parallelism must be -1 (all processors) or positive, not {value}.')


class SupportMetricConfiguration(BaseModel):
    """Minimal fraction of data points that must contain an itemset."""
    metric: Literal['support'] = 'support'
    minimal_support: float = Field(default=0.8, ge=0.0, le=1.0)


class ExtractionMetricConfiguration(BaseModel):
    """Settings shared by metrics that extract observations from data points."""
    vertex_one: bool = False
    level_of_parallelism: int = DEFAULT_LEVEL_OF_PARALLELISM
    representation_scheme: str | None = None

    @field_validator('level_of_parallelism')
    @classmethod
    def check_level_of_parallelism(cls, value: int) -> int:
        return _check_level_of_parallelism(value)


class CohesionMetricConfiguration(ExtractionMetricConfiguration):
    """Maximal root-mean-square extent of the tightest observation per data point."""
    metric: Literal['cohesion'] = 'cohesion'
    maximal_cohesion: float = Field(default=10.0, gt=0.0)
    model_config = {
        'json_schema_extra': {
            'examples': [
                {'metric': 'cohesion', 'maximal_cohesion': 6.0, 'vertex_one': True},
            ]
        }
    }


class AdherenceMetricConfiguration(ExtractionMetricConfiguration):
    """Maximal standard deviation of observation extents close to a desired extent."""
    metric: Literal['adherence'] = 'adherence'
    desired_extent: float = Field(default=8.0, gt=0.0)
    desired_extent_delta: float = Field(default=1.0, ge=0.0)
    maximal_adherence: float = Field(default=0.3, ge=0.0)
    minimal_observations: int = Field(default=3, ge=1)


class ConsensusMetricConfiguration(BaseModel):
    """Maximal normalized consensus score of the aligned observations."""
    metric: Literal['consensus'] = 'consensus'
    maximal_consensus: float = Field(default=0.5, ge=0.0)
    cluster_cutoff_value: float = Field(default=0.5, gt=0.0)
    point_filter: PointFilterType = PointFilterType.ALL
    align_within_clusters: bool = False
    representation_scheme: str | None = None
    level_of_parallelism: int = DEFAULT_LEVEL_OF_PARALLELISM

    @field_validator('level_of_parallelism')
    @classmethod
    def check_level_of_parallelism(cls, value: int) -> int:
        return _check_level_of_parallelism(value)


class AffinityMetricConfiguration(BaseModel):
    """Maximal self-dissimilarity per cluster of the aligned observations."""
    metric: Literal['affinity'] = 'affinity'
    maximal_affinity: float = Field(default=1.0, ge=0.0)
    point_filter: PointFilterType = PointFilterType.ALL
    align_within_clusters: bool = False
    representation_scheme: str | None = None
    level_of_parallelism: int = DEFAULT_LEVEL_OF_PARALLELISM

    @field_validator('level_of_parallelism')
    @classmethod
    def check_level_of_parallelism(cls, value: int) -> int:
        return _check_level_of_parallelism(value)


class SeparationMetricConfiguration(BaseModel):
    """Maximal mean Morse-potential penalty of sequence gaps within observations."""
    metric: Literal['separation'] = 'separation'
    maximal_separation: float = 0.0
    morse_well_depth: float = Field(default=500.0, gt=0.0)
    morse_shape: float = Field(default=0.2, gt=0.0)
    optimal_separation: float = Field(default=5.0, ge=0.0)
