# src/greenrun/core/sizing.py

"""
Instance sizing for request-driven compute.

The number of in-flight requests is estimated with Little's law
(arrival rate x average duration); autoscaling then provisions enough
instances to hold that load at the declared concurrency, within the
administrator-set bounds.
"""

import logging
import math
from dataclasses import dataclass

from greenrun.models.estimate import EstimateInput

logger = logging.getLogger(__name__)


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


@dataclass(frozen=True)
class SizingEstimate:
    requests_per_second: float
    concurrent_load: float
    active_instances: int
    utilization: float


def estimate_sizing(inp: EstimateInput) -> SizingEstimate:
    """Derives the active instance count and the CPU utilization fraction."""
    rps = inp.requests_per_min / 60.0
    concurrent_load = rps * (inp.avg_duration_ms / 1000.0)

    active_instances = math.ceil(concurrent_load / inp.concurrency)
    if active_instances < inp.min_instances:
        active_instances = inp.min_instances
    if active_instances > inp.max_instances:
        active_instances = inp.max_instances

    util = 0.0
    if active_instances > 0:
        util = concurrent_load / (active_instances * inp.concurrency)
    util = clamp(util, 0.0, 1.0)

    logger.debug(
        "Sizing: rps=%.3f load=%.3f active_instances=%d utilization=%.5f",
        rps,
        concurrent_load,
        active_instances,
        util,
    )
    return SizingEstimate(
        requests_per_second=rps,
        concurrent_load=concurrent_load,
        active_instances=active_instances,
        utilization=util,
    )
