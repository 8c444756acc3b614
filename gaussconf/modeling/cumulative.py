"""Cumulative probability lookup table built by the trapezoidal rule.

The table holds `resolution + 1` values; entry i approximates the integral of
the density from `limits.lower` to `limits.lower + i * delta`. It is built once
and stored as a read-only float32 array.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

import numpy as np

from gaussconf.core.events import log_table_built
from gaussconf.modeling.types import IntegrationLimits

logger = logging.getLogger(__name__)

Density = Callable[[float], float]


def sample_density(density: Density, limits: IntegrationLimits, resolution: int) -> np.ndarray:
    """Density at the resolution + 1 grid points, lower to upper inclusive."""
    delta = limits.span / resolution
    return np.array(
        [density(limits.lower + delta * i) for i in range(resolution + 1)],
        dtype=np.float64,
    )


def cumulative_trapezoid(samples: np.ndarray, delta: float) -> np.ndarray:
    """Direct cumulative trapezoid: out[i] = out[i-1] + delta * (f[i-1] + f[i]) / 2."""
    f = np.asarray(samples, dtype=np.float64)
    out = np.zeros_like(f)
    if f.size > 1:
        out[1:] = np.cumsum((f[:-1] + f[1:]) * 0.5) * delta
    return out


class CumulativeTable:
    def __init__(self, values: np.ndarray, limits: IntegrationLimits) -> None:
        values = np.asarray(values, dtype=np.float32)
        if values.ndim != 1 or values.size < 2:
            raise ValueError("Cumulative table needs at least two points")
        values.flags.writeable = False
        self._values = values
        self._limits = limits
        self._resolution = values.size - 1
        self._delta = limits.span / self._resolution

    @classmethod
    def build(
        cls,
        density: Density,
        limits: IntegrationLimits,
        resolution: int,
    ) -> "CumulativeTable":
        """Integrate `density` over `limits` into `resolution` steps.

        Keeps a running sum of the samples seen so far with the first one
        halved; adding half of the current sample closes each trapezoid.
        """
        if isinstance(resolution, bool) or not isinstance(resolution, int) or resolution <= 0:
            raise ValueError(f"Resolution must be a positive integer, got {resolution!r}")

        start = time.monotonic()
        lower = limits.lower
        delta = limits.span / resolution

        cdf = np.empty(resolution + 1, dtype=np.float32)
        cdf[0] = 0.0
        f_i = density(lower)
        running = f_i / 2
        for i in range(1, resolution + 1):
            f_i = density(lower + delta * i)
            cdf[i] = delta * (running + f_i / 2)
            running += f_i

        table = cls(cdf, limits)
        elapsed_ms = (time.monotonic() - start) * 1000.0
        logger.info(
            "Built cumulative table: resolution=%d limits=[%g, %g] total_mass=%.6f in %.1fms",
            resolution,
            limits.lower,
            limits.upper,
            table.total_mass,
            elapsed_ms,
        )
        log_table_built(
            resolution=resolution,
            lower=limits.lower,
            upper=limits.upper,
            total_mass=table.total_mass,
            elapsed_ms=elapsed_ms,
        )
        return table

    @property
    def limits(self) -> IntegrationLimits:
        return self._limits

    @property
    def resolution(self) -> int:
        return self._resolution

    @property
    def delta(self) -> float:
        return self._delta

    @property
    def values(self) -> np.ndarray:
        return self._values

    @property
    def total_mass(self) -> float:
        return float(self._values[-1])

    def bucket(self, x: float) -> int:
        """Index of the step containing x. Only meaningful strictly inside the limits."""
        return int((x - self._limits.lower) / self._delta)

    def __len__(self) -> int:
        return self._values.size

    def __getitem__(self, i: int) -> float:
        return float(self._values[i])
