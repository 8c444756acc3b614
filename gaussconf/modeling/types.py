from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class DistributionParams:
    mean: float
    stdev: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.mean) and math.isfinite(self.stdev)):
            raise ValueError("Distribution parameters must be finite")
        if self.stdev <= 0:
            raise ValueError("Standard deviation must be positive")


@dataclass(frozen=True)
class IntegrationLimits:
    lower: float
    upper: float

    def __post_init__(self) -> None:
        if not self.lower < self.upper:
            raise ValueError(f"Lower limit {self.lower} must be below upper limit {self.upper}")

    @classmethod
    def around(cls, params: DistributionParams, width: float = 6.0) -> "IntegrationLimits":
        """Limits `width` standard deviations either side of the mean."""
        return cls(
            lower=params.mean - width * params.stdev,
            upper=params.mean + width * params.stdev,
        )

    @property
    def span(self) -> float:
        return self.upper - self.lower

    def contains(self, x: float) -> bool:
        """True strictly inside the limits; the endpoints count as outside."""
        return self.lower < x < self.upper
