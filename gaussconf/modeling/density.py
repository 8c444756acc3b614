from __future__ import annotations

from dataclasses import dataclass

from gaussconf.modeling.exponential import exp
from gaussconf.modeling.types import DistributionParams

ROOT_OF_2PI = 2.50662827463


def normal_density(x: float, mean: float, stdev: float) -> float:
    """Normal probability density at x. stdev must be positive."""
    power = -0.5 * (x - mean) * (x - mean) / stdev / stdev
    return (1.0 / (stdev * ROOT_OF_2PI)) * exp(power)


@dataclass(frozen=True)
class NormalDensity:
    """Density bound to fixed parameters, usable wherever a `Callable[[float], float]` is expected."""

    params: DistributionParams

    def __call__(self, x: float) -> float:
        return normal_density(x, self.params.mean, self.params.stdev)
