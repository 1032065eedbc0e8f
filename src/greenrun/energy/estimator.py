# src/greenrun/energy/estimator.py

"""
Energy Estimation Engine (ServerlessEstimator).

Converts declared resources (vCPU, memory) and the estimated CPU
utilization into power draw, energy and pay-per-use cost. Two bases are
produced: per 1000 requests, and per hour for the whole provisioned fleet.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from greenrun.core.config import Config, config
from greenrun.core.sizing import SizingEstimate, clamp
from greenrun.models.estimate import EstimateInput

logger = logging.getLogger(__name__)

REQUESTS_PER_CHUNK = 1000.0
SECONDS_PER_HOUR = 3600.0


@dataclass(frozen=True)
class EnergyEstimate:
    seconds_per_request: float
    kwh_per_1k: float
    cost_per_1k: float
    kwh_per_hour: float
    cost_per_hour: float
    idle_instances: int


class ServerlessEstimator:
    """
    Estimates energy and cost of a request-driven container workload from
    its declared resources and sizing.
    """

    def __init__(self, settings: Optional[Config] = None):
        settings = settings or config
        self.watts_per_vcpu = settings.WATTS_PER_VCPU_AT_FULL
        self.watts_per_gb = settings.WATTS_PER_GB_MEMORY
        self.cost_per_vcpu_second = settings.COST_PER_VCPU_SECOND
        self.cost_per_gb_second = settings.COST_PER_GB_SECOND

    def estimate_power_watts(self, vcpu: float, memory_gb: float, cpu_util: float) -> float:
        """CPU power scales linearly with utilization; memory draw is constant."""
        return self.watts_per_vcpu * vcpu * clamp(cpu_util, 0.0, 1.0) + self.watts_per_gb * memory_gb

    @staticmethod
    def kwh_from_watts(watts: float, seconds: float) -> float:
        return (watts * seconds) / 1000.0 / SECONDS_PER_HOUR

    def cost_from_runtime_seconds(self, vcpu: float, memory_gb: float, seconds: float) -> float:
        return vcpu * seconds * self.cost_per_vcpu_second + memory_gb * seconds * self.cost_per_gb_second

    def estimate(self, inp: EstimateInput, sizing: SizingEstimate) -> EnergyEstimate:
        """
        Orchestrates the power, energy and cost estimation.

        Args:
            inp: The normalized input.
            sizing: Active instances and utilization derived from the traffic.

        Returns:
            An EnergyEstimate holding the per-1k and per-hour figures.
        """
        util = sizing.utilization
        active = sizing.active_instances

        seconds_per_request = inp.avg_duration_ms / 1000.0
        seconds_per_1k = seconds_per_request * REQUESTS_PER_CHUNK

        # Per 1k requests, at the estimated active utilization
        watts_active = self.estimate_power_watts(inp.vcpu, inp.memory_gb, util)
        kwh_per_1k = self.kwh_from_watts(watts_active, seconds_per_1k)
        cost_per_1k = self.cost_from_runtime_seconds(inp.vcpu, inp.memory_gb, seconds_per_1k)

        # Per hour, the active fleet plus provisioned instances left idle
        idle_util = clamp(inp.idle_utilization_pc / 100.0, 0.0, 1.0)
        idle_instances = max(0, inp.min_instances - active)
        watts_idle_one = self.estimate_power_watts(inp.vcpu, inp.memory_gb, idle_util)
        total_watts = watts_active * active + watts_idle_one * idle_instances
        kwh_per_hour = self.kwh_from_watts(total_watts, SECONDS_PER_HOUR)

        # Only busy time of the active fleet is billed
        busy_seconds = SECONDS_PER_HOUR * util
        cost_per_hour = self.cost_from_runtime_seconds(inp.vcpu * active, inp.memory_gb * active, busy_seconds)

        logger.debug(
            "Energy: watts_active=%.3f watts_idle=%.3f idle_instances=%d kwh_per_1k=%.6f kwh_per_hour=%.6f",
            watts_active,
            watts_idle_one,
            idle_instances,
            kwh_per_1k,
            kwh_per_hour,
        )
        return EnergyEstimate(
            seconds_per_request=seconds_per_request,
            kwh_per_1k=kwh_per_1k,
            cost_per_1k=cost_per_1k,
            kwh_per_hour=kwh_per_hour,
            cost_per_hour=cost_per_hour,
            idle_instances=idle_instances,
        )
