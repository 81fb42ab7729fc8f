"""Growable lists of metric values."""
from attrs import define
from attrs import field
from numpy import array
from numpy import float64
from numpy.typing import NDArray


@define
class Distribution:
    """Observation values tagged with the metric that produced them."""
    metric_type: str
    observations: list[float] = field(factory=list)

    def add_observation_value(self, value: float) -> None:
        self.observations.append(float(value))

    def values(self) -> NDArray[float64]:
        return array(self.observations, dtype=float64)

    def __len__(self) -> int:
        return len(self.observations)

    def __str__(self) -> str:
        return f'Distribution(metric_type={self.metric_type}, observations={len(self.observations)})'
