"""Exponential built from basic arithmetic only.

`exp` splits its argument into integer and fractional parts: the integer part
is handled by exponentiation by squaring on `e` (or `1/e`), the fractional part
by a Taylor series truncated once a term falls below `EXP_ACCURACY`.
"""

from __future__ import annotations

import math

EXP_ACCURACY = 1e-6
E = 2.718281828459045


def int_pow(x: float, n: int) -> float:
    """x to the non-negative integer power n in O(log n) multiplications."""
    p = 1.0
    while n > 0:
        if n & 1:
            p *= x
        x *= x
        n >>= 1
    return p


def _fractional_series(r: float) -> float:
    # exp(r) for 0 <= r < 1; the i=0 term is 1.
    total = 0.0
    term = 1.0
    i = 1
    while term > EXP_ACCURACY:
        total += term
        term *= r / i
        i += 1
    return total


def exp(x: float) -> float:
    if math.isnan(x):
        return x
    if math.isinf(x):
        return x if x > 0 else 0.0

    positive = x >= 0
    x = abs(x)

    integer_part = int(x)
    series = _fractional_series(x - integer_part)
    if not positive:
        series = 1.0 / series

    base = E if positive else 1.0 / E
    return int_pow(base, integer_part) * series
