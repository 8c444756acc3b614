from __future__ import annotations

from gaussconf.modeling.types import DistributionParams, IntegrationLimits

# Reference distribution. Fixed at import; not read from the environment.
MEAN = 0.043
STDEV = 0.026

# Table granularity and the half-width of the integrated range, in standard deviations.
RESOLUTION = 10000
LIMIT_WIDTH = 6.0

REFERENCE_PARAMS = DistributionParams(mean=MEAN, stdev=STDEV)
REFERENCE_LIMITS = IntegrationLimits.around(REFERENCE_PARAMS, width=LIMIT_WIDTH)
