"""Configuration of a mining run."""
from typing import Any
from typing import Union

from pydantic import BaseModel  # pylint: disable=no-name-in-module
from pydantic import ValidationError
from pydantic import field_validator
from pydantic import model_validator

from motifminer.model.itemset import ItemsetComparatorType
from motifminer.geometry.vertex import AnchorOrdering
from motifminer.mining.exceptions import ConfigurationError
from motifminer.configuration.metrics import SupportMetricConfiguration
from motifminer.configuration.metrics import CohesionMetricConfiguration
from motifminer.configuration.metrics import AdherenceMetricConfiguration
from motifminer.configuration.metrics import ConsensusMetricConfiguration
from motifminer.configuration.metrics import AffinityMetricConfiguration
from motifminer.configuration.metrics import SeparationMetricConfiguration
from motifminer.configuration.significance import SignificanceEstimatorConfiguration

ExtractionMetricConfigurations = Union[CohesionMetricConfiguration, AdherenceMetricConfiguration]
ExtractionDependentMetricConfigurations = Union[
    ConsensusMetricConfiguration,
    AffinityMetricConfiguration,
    SeparationMetricConfiguration,
]


class ItemsetMinerConfiguration(BaseModel):
    """Metrics to evaluate, epoch limit, result ordering and optional significance estimation."""
    simple_metrics: list[SupportMetricConfiguration] = []
    extraction_metrics: list[ExtractionMetricConfigurations] = []
    extraction_dependent_metrics: list[ExtractionDependentMetricConfigurations] = []
    maximal_epochs: int = -1
    itemset_comparator_type: ItemsetComparatorType = ItemsetComparatorType.COHESION
    anchor_ordering: AnchorOrdering = AnchorOrdering.LABEL
    significance_estimator: SignificanceEstimatorConfiguration | None = None

    @field_validator('maximal_epochs')
    @classmethod
    def check_maximal_epochs(cls, value: int) -> int:
        if value == -1 or value >= 1:
            return value
        raise ValueError(f'Maximal epochs must be -1 (unlimited) or positive, not {value}.')

    @model_validator(mode='after')
    def check_metrics(self) -> 'ItemsetMinerConfiguration':
        configurations = self.metric_configurations()
        if len(configurations) == 0:
            raise ValueError('At least one evaluation metric must be configured.')
        kinds = [c.metric for c in configurations]
        duplicates = sorted({kind for kind in kinds if kinds.count(kind) > 1})
        if duplicates:
            raise ValueError(f'Metrics configured more than once: {duplicates}')
        if self.extraction_dependent_metrics and not self.extraction_metrics:
            raise ValueError('Extraction-dependent metrics require an extraction metric.')
        if 'consensus' in kinds and 'affinity' in kinds:
            raise ValueError('Consensus and affinity metrics cannot be combined.')
        if self.significance_estimator is not None:
            if not self.extraction_metrics:
                raise ValueError('Significance estimation requires an extraction metric.')
            wanted = self.significance_estimator.significance_type.value
            if wanted not in kinds:
                raise ValueError(f'Significance of type {wanted} requires the {wanted} metric.')
        return self

    def metric_configurations(self) -> list:
        return [*self.simple_metrics, *self.extraction_metrics, *self.extraction_dependent_metrics]

    @classmethod
    def from_dict(cls, values: dict[str, Any]) -> 'ItemsetMinerConfiguration':
        try:
            return cls.model_validate(values)
        except ValidationError as error:
            raise ConfigurationError(str(error)) from error

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode='json')
