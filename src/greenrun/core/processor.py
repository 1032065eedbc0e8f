# src/greenrun/core/processor.py

"""
The estimation pipeline: normalization, sizing, energy/cost, carbon,
forecast, scoring, advice and configuration suggestion.

Every stage is a pure function of the normalized input and the sizing
values, so a pipeline instance holds no per-request state and may be
shared across concurrent callers.
"""

import logging
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from greenrun.energy.estimator import ServerlessEstimator
from greenrun.models.estimate import Assumptions, EstimateRequest, EstimateResult, Footprint

from .calculator import CarbonCalculator
from .exceptions import InvalidEstimateRequestError
from .forecaster import forecast_month
from .normalizer import normalize
from .recommender import Recommender
from .scorer import risk_score
from .sizing import estimate_sizing
from .suggester import suggest_config

logger = logging.getLogger(__name__)


def parse_request(payload: Union[EstimateRequest, Mapping[str, Any]]) -> EstimateRequest:
    """Builds an EstimateRequest from a mapping, raising InvalidEstimateRequestError on bad types."""
    if isinstance(payload, EstimateRequest):
        return payload
    try:
        return EstimateRequest.model_validate(payload)
    except ValidationError as e:
        raise InvalidEstimateRequestError(f"invalid estimate request: {e}") from e


class EstimationPipeline:
    """Runs every estimation stage for a single request."""

    def __init__(
        self,
        estimator: Optional[ServerlessEstimator] = None,
        calculator: Optional[CarbonCalculator] = None,
        recommender: Optional[Recommender] = None,
    ):
        self.estimator = estimator or ServerlessEstimator()
        self.calculator = calculator or CarbonCalculator()
        self.recommender = recommender or Recommender()

    def run(self, request: Union[EstimateRequest, Mapping[str, Any]]) -> EstimateResult:
        inp = normalize(parse_request(request))
        sizing = estimate_sizing(inp)
        util = sizing.utilization

        energy = self.estimator.estimate(inp, sizing)
        per_1k_carbon = self.calculator.calculate_emissions(energy.kwh_per_1k, inp.region)
        per_hour_carbon = self.calculator.calculate_emissions(energy.kwh_per_hour, inp.region)
        intensity = per_1k_carbon.grid_intensity

        recommendations = self.recommender.generate_recommendations(inp, util, intensity, energy.cost_per_1k)

        result = EstimateResult(
            per_1k_requests=Footprint(
                energy_kwh=round(energy.kwh_per_1k, 5),
                co2_g=round(per_1k_carbon.co2e_grams, 2),
                cost_usd=round(energy.cost_per_1k, 4),
            ),
            per_hour=Footprint(
                energy_kwh=round(energy.kwh_per_hour, 5),
                co2_g=round(per_hour_carbon.co2e_grams, 2),
                cost_usd=round(energy.cost_per_hour, 4),
            ),
            risk_score=risk_score(inp, util, intensity, energy.cost_per_1k),
            suggested_yaml=suggest_config(inp, util, intensity),
            monthly_forecast=forecast_month(inp, energy, intensity),
            assumptions=Assumptions(
                region=inp.region,
                grid_intensity_g_per_kwh=intensity,
                active_instances=sizing.active_instances,
                idle_instances=max(inp.min_instances, 0),
                cpu_utilization_est=round(util * 100, 1),
                seconds_per_request=energy.seconds_per_request,
            ),
            advice=[rec.description for rec in recommendations],
        )
        logger.info(
            "Estimated region=%s rpm=%d: %.5f kWh/1k, $%.4f/1k, risk score %d",
            inp.region,
            inp.requests_per_min,
            result.per_1k_requests.energy_kwh,
            result.per_1k_requests.cost_usd,
            result.risk_score,
        )
        return result


def estimate(request: Union[EstimateRequest, Mapping[str, Any]]) -> EstimateResult:
    """Runs the default pipeline on a single request."""
    from .factory import get_pipeline

    return get_pipeline().run(request)
