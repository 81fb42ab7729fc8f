"""Construction of metric objects from their configuration."""
from typing import Callable

from motifminer.model.data_point import DataPoint
from motifminer.alignment.collaborator import AlignmentCollaborator
from motifminer.mining.exceptions import ConfigurationError
from motifminer.metrics.base import EvaluationMetric
from motifminer.metrics.support import SupportMetric
from motifminer.metrics.cohesion import CohesionMetric
from motifminer.metrics.adherence import AdherenceMetric
from motifminer.metrics.consensus import ConsensusMetric
from motifminer.metrics.affinity import AffinityMetric
from motifminer.metrics.separation import SeparationMetric
from motifminer.configuration.metrics import SupportMetricConfiguration
from motifminer.configuration.metrics import CohesionMetricConfiguration
from motifminer.configuration.metrics import AdherenceMetricConfiguration
from motifminer.configuration.metrics import ConsensusMetricConfiguration
from motifminer.configuration.metrics import AffinityMetricConfiguration
from motifminer.configuration.metrics import SeparationMetricConfiguration
from motifminer.configuration.itemset_miner import ItemsetMinerConfiguration


def _require_collaborator(collaborator: AlignmentCollaborator | None, kind: str) -> AlignmentCollaborator:
    if collaborator is None:
        raise ConfigurationError(f'The {kind} metric requires an alignment collaborator.')
    return collaborator


MetricFactory = Callable[..., EvaluationMetric]

FACTORIES: dict[type, MetricFactory] = {
    SupportMetricConfiguration: lambda c, data_points, collaborator, ordering: SupportMetric(data_points, c),
    CohesionMetricConfiguration: lambda c, data_points, collaborator, ordering: CohesionMetric(data_points, c, ordering),
    AdherenceMetricConfiguration: lambda c, data_points, collaborator, ordering: AdherenceMetric(data_points, c, ordering),
    ConsensusMetricConfiguration: lambda c, data_points, collaborator, ordering: ConsensusMetric(
        c, _require_collaborator(collaborator, 'consensus'),
    ),
    AffinityMetricConfiguration: lambda c, data_points, collaborator, ordering: AffinityMetric(
        c, _require_collaborator(collaborator, 'affinity'),
    ),
    SeparationMetricConfiguration: lambda c, data_points, collaborator, ordering: SeparationMetric(c),
}


def create_metrics(
    configuration: ItemsetMinerConfiguration,
    data_points: list[DataPoint],
    collaborator: AlignmentCollaborator | None = None,
) -> list[EvaluationMetric]:
    """Metrics in configuration order: simple, extraction, extraction-dependent."""
    metrics = []
    for metric_configuration in configuration.metric_configurations():
        factory = FACTORIES.get(type(metric_configuration))
        if factory is None:
            raise ConfigurationError(f'Unsupported metric configuration: {metric_configuration}')
        metrics.append(factory(metric_configuration, data_points, collaborator, configuration.anchor_ordering))
    return metrics
