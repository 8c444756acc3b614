"""Check the running-sum cumulative table against a direct cumulative trapezoid.

Both tables integrate the same density samples; the report also compares the
samples with a density evaluated through `math.exp`.

Usage:
    python -m scripts.validate_cdf_table [--resolution 10000] [--width 6] [--tolerance 1e-6]
"""

from __future__ import annotations

import argparse
import json
import math
import sys
from pathlib import Path
from typing import Any

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import numpy as np  # noqa: E402

from gaussconf.modeling.confidence import ConfidenceEvaluator  # noqa: E402
from gaussconf.modeling.cumulative import cumulative_trapezoid, sample_density  # noqa: E402
from gaussconf.modeling.density import ROOT_OF_2PI, NormalDensity  # noqa: E402
from gaussconf.modeling.params import LIMIT_WIDTH, REFERENCE_PARAMS, RESOLUTION  # noqa: E402
from gaussconf.modeling.types import DistributionParams  # noqa: E402


def _math_density(x: float, params: DistributionParams) -> float:
    z = (x - params.mean) / params.stdev
    return math.exp(-0.5 * z * z) / (params.stdev * ROOT_OF_2PI)


def validate_table(
    params: DistributionParams,
    *,
    resolution: int,
    width: float,
) -> dict[str, Any]:
    evaluator = ConfidenceEvaluator.from_params(params, resolution=resolution, width=width)
    table = evaluator.table

    samples = sample_density(NormalDensity(params), table.limits, resolution)
    reference = cumulative_trapezoid(samples, table.delta)
    exact = sample_density(lambda x: _math_density(x, params), table.limits, resolution)

    built = table.values.astype(np.float64)
    return {
        "resolution": resolution,
        "lower": table.limits.lower,
        "upper": table.limits.upper,
        "max_abs_diff": float(np.max(np.abs(built - reference))),
        "max_density_rel_err": float(np.max(np.abs(samples - exact) / exact)),
        "total_mass": table.total_mass,
        "center_score": evaluator.evaluate(params.mean),
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Validate the cumulative confidence table.")
    parser.add_argument("--resolution", type=int, default=RESOLUTION)
    parser.add_argument("--width", type=float, default=LIMIT_WIDTH)
    parser.add_argument("--tolerance", type=float, default=1e-6)
    args = parser.parse_args()

    result = validate_table(REFERENCE_PARAMS, resolution=args.resolution, width=args.width)
    print(json.dumps(result, indent=2))

    if result["max_abs_diff"] > args.tolerance:
        print(
            f"WARNING: running-sum table differs from direct trapezoid by {result['max_abs_diff']:.3g}",
            file=sys.stderr,
        )
        sys.exit(1)


if __name__ == "__main__":
    main()
