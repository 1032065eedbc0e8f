# src/greenrun/core/forecaster.py

"""
Monthly forecast: a linear scale-up of the per-1k figures assuming the
declared traffic holds steady around the clock. Diurnal variation and
bursts are not modelled; the returned assumption string says so.
"""

from typing import Optional

from greenrun.energy.estimator import REQUESTS_PER_CHUNK, EnergyEstimate
from greenrun.models.estimate import EstimateInput, MonthlyForecast

from .config import config


def forecast_month(
    inp: EstimateInput,
    energy: EnergyEstimate,
    intensity: float,
    days_per_month: Optional[int] = None,
) -> MonthlyForecast:
    days = days_per_month or config.DAYS_PER_MONTH
    monthly_requests = int(inp.requests_per_min * 60 * 24 * days)
    chunks = monthly_requests / REQUESTS_PER_CHUNK

    monthly_cost = chunks * energy.cost_per_1k
    monthly_energy = chunks * energy.kwh_per_1k
    monthly_co2_kg = (monthly_energy * intensity) / 1000.0  # g -> kg

    return MonthlyForecast(
        requests=monthly_requests,
        cost_usd=round(monthly_cost, 2),
        co2_kg=round(monthly_co2_kg, 2),
        energy_kwh=round(monthly_energy, 2),
        assumption=f"{days} days @ {inp.requests_per_min} req/min steady",
    )
