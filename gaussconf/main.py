"""Read one value from stdin and print its confidence score.

Usage:
    echo 0.05 | python -m gaussconf
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import numpy as np

from gaussconf.core.config import settings
from gaussconf.core.events import set_log_path
from gaussconf.modeling.confidence import get_evaluator, self_check
from gaussconf.modeling.params import MEAN

logger = logging.getLogger(__name__)


def read_value(stream: TextIO) -> float:
    """First whitespace-delimited token of the stream as a 32-bit float."""
    tokens = stream.read().split()
    if not tokens:
        raise ValueError("expected a number on stdin, got nothing")
    try:
        return float(np.float32(tokens[0]))
    except ValueError:
        raise ValueError(f"expected a number on stdin, got {tokens[0]!r}") from None


def format_score(score: float) -> str:
    return f"{np.float32(score):g}"


def main(stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if settings.event_log_path:
        set_log_path(settings.event_log_path)

    try:
        x = read_value(stdin)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    evaluator = get_evaluator()
    self_check(evaluator, MEAN)

    score = evaluator.evaluate(x)
    logger.debug("x=%g score=%g", x, score)
    print(format_score(score), file=stdout)
    return 0
