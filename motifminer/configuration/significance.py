"""Configuration of significance estimation."""
from pydantic import BaseModel  # pylint: disable=no-name-in-module
from pydantic import Field
from pydantic import field_validator

from motifminer.analysis.statistics.significance_estimator_type import SignificanceEstimatorType
from motifminer.standalone_utilities.configuration_settings import DEFAULT_LEVEL_OF_PARALLELISM


class SignificanceEstimatorConfiguration(BaseModel):
    """Permutation sampling of background distributions and the cutoffs applied to them."""
    significance_type: SignificanceEstimatorType = SignificanceEstimatorType.COHESION
    sample_size: int = Field(default=30, ge=2)
    significance_cutoff: float = Field(default=1e-3, gt=0.0, le=1.0)
    ks_cutoff: float = Field(default=0.1, ge=0.0, le=1.0)
    level_of_parallelism: int = DEFAULT_LEVEL_OF_PARALLELISM
    seed: int | None = None
    model_config = {
        'json_schema_extra': {
            'examples': [
                {'significance_type': 'cohesion', 'sample_size': 100, 'significance_cutoff': 0.001},
            ]
        }
    }

    @field_validator('level_of_parallelism')
    @classmethod
    def check_level_of_parallelism(cls, value: int) -> int:
        if value == -1 or value >= 1:
            return value
        raise ValueError(f'Level of parallelism must be -1 (all processors) or positive, not {value}.')
