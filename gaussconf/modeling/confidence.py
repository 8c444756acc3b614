"""Two-sided confidence score from a cumulative table.

The score at x is twice the smaller of the two tail probabilities,
2 * min(P(X < x), P(X > x)): 1 at the mean, falling toward 0 at the limits.
Values on or beyond the table limits score 0.
"""

from __future__ import annotations

import logging
import threading

import numpy as np

from gaussconf.core.events import log_evaluation, log_self_check
from gaussconf.modeling.cumulative import CumulativeTable
from gaussconf.modeling.density import NormalDensity
from gaussconf.modeling.params import LIMIT_WIDTH, REFERENCE_PARAMS, RESOLUTION
from gaussconf.modeling.types import DistributionParams, IntegrationLimits

logger = logging.getLogger(__name__)

SELF_CHECK_TOLERANCE = 0.001


class ConfidenceEvaluator:
    def __init__(self, table: CumulativeTable) -> None:
        self._table = table

    @classmethod
    def from_params(
        cls,
        params: DistributionParams,
        *,
        resolution: int = RESOLUTION,
        width: float = LIMIT_WIDTH,
    ) -> "ConfidenceEvaluator":
        limits = IntegrationLimits.around(params, width=width)
        return cls(CumulativeTable.build(NormalDensity(params), limits, resolution))

    @property
    def table(self) -> CumulativeTable:
        return self._table

    def evaluate(self, x: float) -> float:
        # NaN is never inside the limits.
        if not self._table.limits.contains(x):
            log_evaluation(x, 0.0, in_range=False)
            return 0.0

        left = self._table[self._table.bucket(x)]
        score = float(np.float32(2.0 * min(left, 1.0 - left)))
        log_evaluation(x, score, in_range=True)
        return score


def self_check(
    evaluator: ConfidenceEvaluator,
    center: float,
    *,
    tolerance: float = SELF_CHECK_TOLERANCE,
) -> float:
    """Score at the distribution center; raises ValueError unless it is within tolerance of 1."""
    score = evaluator.evaluate(center)
    passed = abs(score - 1.0) < tolerance
    log_self_check(center_score=score, passed=passed)
    if not passed:
        raise ValueError(f"Confidence at center {center} is {score}, expected 1.0 +/- {tolerance}")
    return score


# Process-wide evaluator for the reference distribution.
_evaluator: ConfidenceEvaluator | None = None
_LOCK = threading.Lock()


def get_evaluator() -> ConfidenceEvaluator:
    """Get or build the shared evaluator. The table is built at most once."""
    global _evaluator  # noqa: PLW0603
    if _evaluator is None:
        with _LOCK:
            if _evaluator is None:
                logger.debug("Building reference confidence table")
                _evaluator = ConfidenceEvaluator.from_params(REFERENCE_PARAMS)
    return _evaluator


def reset_evaluator() -> None:
    """Drop the shared evaluator (tests)."""
    global _evaluator  # noqa: PLW0603
    _evaluator = None


def evaluate(x: float) -> float:
    return get_evaluator().evaluate(x)
