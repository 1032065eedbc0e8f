# src/greenrun/core/recommender.py

import logging
from typing import List

from greenrun.data.grid_intensity import LOW_CARBON_REGIONS
from greenrun.models.estimate import EstimateInput, Recommendation, RecommendationType

LOG = logging.getLogger(__name__)

HEALTHY_MESSAGE = "Configuration looks healthy. Keep automated checks per deploy."


class Recommender:
    """
    Turns configuration and traffic red flags into ordered, human-readable advice.

    The thresholds are tuned separately from the risk scorer's and are not
    expected to match them.
    """

    def __init__(
        self,
        min_concurrency: int = 40,
        memory_threshold_gb: float = 1.0,
        low_utilization: float = 0.35,
        low_traffic_rpm: int = 60,
        intensity_threshold: float = 400,
        latency_threshold_ms: int = 300,
        cost_threshold: float = 0.01,
    ):
        """
        Initializes the recommender with specific thresholds.

        :param min_concurrency: Concurrency below which instances are under-packed.
        :param memory_threshold_gb: Memory above which a low-utilization
                                    workload is considered oversized.
        :param low_utilization: CPU utilization fraction considered low.
        :param low_traffic_rpm: Requests per minute below which min instances are wasted.
        :param intensity_threshold: Grid intensity (gCO2e/kWh) considered high.
        :param latency_threshold_ms: Average duration considered slow.
        :param cost_threshold: Cost per 1k requests (USD) considered expensive.
        """
        self.min_concurrency = min_concurrency
        self.memory_threshold_gb = memory_threshold_gb
        self.low_utilization = low_utilization
        self.low_traffic_rpm = low_traffic_rpm
        self.intensity_threshold = intensity_threshold
        self.latency_threshold_ms = latency_threshold_ms
        self.cost_threshold = cost_threshold

    def generate_recommendations(
        self, inp: EstimateInput, util: float, intensity: float, cost_per_1k: float
    ) -> List[Recommendation]:
        """Evaluates every check in a fixed order and returns the triggered advice."""
        recommendations: List[Recommendation] = []

        def add(rec_type: RecommendationType, description: str):
            recommendations.append(Recommendation(type=rec_type, description=description))
            LOG.debug("Generated %s recommendation for region '%s'", rec_type.value, inp.region)

        if inp.concurrency < self.min_concurrency:
            add(
                RecommendationType.LOW_CONCURRENCY,
                f"Increase concurrency to ~80 (current {inp.concurrency}) to reduce instance count/idle overhead.",
            )
        if inp.memory_gb > self.memory_threshold_gb and util < self.low_utilization:
            add(
                RecommendationType.RIGHTSIZING_MEMORY,
                f"Right-size memory: {inp.memory_gb:.1f}Gi with ~{util * 100:.0f}% CPU util → try 1–1.5Gi.",
            )
        if inp.min_instances >= 1 and inp.requests_per_min < self.low_traffic_rpm:
            add(
                RecommendationType.IDLE_MIN_INSTANCES,
                "Traffic is low but min_instances>=1; use min_instances=0 with startup probe.",
            )
        if intensity > self.intensity_threshold:
            add(
                RecommendationType.HIGH_CARBON_REGION,
                f"High CO₂ grid region; prefer {' or '.join(LOW_CARBON_REGIONS)} for lower emissions.",
            )
        if inp.avg_duration_ms > self.latency_threshold_ms:
            add(
                RecommendationType.HIGH_LATENCY,
                "High latency; cache hot data, reuse connections, reduce cold I/O.",
            )
        # Compared on the value reported to the caller (4 decimals).
        reported_cost = round(cost_per_1k, 4)
        if reported_cost > self.cost_threshold:
            add(
                RecommendationType.HIGH_COST,
                f"Cost/1k ${reported_cost:.4f}; baseline CPU=1, MEM=1Gi, concurrency=80, then re-measure.",
            )

        if not recommendations:
            recommendations.append(Recommendation(type=RecommendationType.HEALTHY, description=HEALTHY_MESSAGE))
        return recommendations
