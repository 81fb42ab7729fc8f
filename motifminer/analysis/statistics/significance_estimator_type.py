"""The metrics for which background distributions can be sampled."""
from enum import Enum


class SignificanceEstimatorType(Enum):
    COHESION = 'cohesion'
    CONSENSUS = 'consensus'
    AFFINITY = 'affinity'
