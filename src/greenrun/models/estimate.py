# src/greenrun/models/estimate.py
"""
This module defines the Pydantic data models used by the estimation pipeline.
`EstimateRequest` is the raw payload as received from a caller, `EstimateInput`
is its normalized, immutable form, and `EstimateResult` is the serialized
answer returned to the caller.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Integer fields are bounded to a signed 64-bit range.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class EstimateRequest(BaseModel):
    """
    Raw estimation payload. Every field may be missing or invalid; the
    normalizer substitutes defaults before any computation runs.
    """

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    vcpu: float = Field(0.0, description="vCPU allocated to each instance.")
    memory_gb: float = Field(0.0, description="Memory allocated to each instance, in GB.")
    concurrency: int = Field(
        0, ge=INT64_MIN, le=INT64_MAX, description="Maximum simultaneous requests served by one instance."
    )
    avg_duration_ms: int = Field(0, ge=INT64_MIN, le=INT64_MAX, description="Average request duration in milliseconds.")
    requests_per_min: int = Field(
        0, ge=INT64_MIN, le=INT64_MAX, description="Steady-state traffic in requests per minute."
    )
    region: str = Field("", description="Deployment region identifier (free-form).")
    min_instances: int = Field(0, ge=INT64_MIN, le=INT64_MAX, description="Minimum number of provisioned instances.")
    max_instances: int = Field(
        0, ge=INT64_MIN, le=INT64_MAX, description="Maximum number of instances autoscaling may reach."
    )
    idle_utilization_pc: float = Field(0.0, description="CPU utilization of an idle instance, in percent.")

    @field_validator("region", mode="before")
    @classmethod
    def _null_region_is_empty(cls, value):
        """A null region behaves like an absent one."""
        return "" if value is None else value


class EstimateInput(BaseModel):
    """Normalized estimation input. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    vcpu: float
    memory_gb: float
    concurrency: int
    avg_duration_ms: int
    requests_per_min: int
    region: str
    min_instances: int
    max_instances: int
    idle_utilization_pc: float


class Footprint(BaseModel):
    """Energy, emissions and cost over one basis (per 1k requests or per hour)."""

    energy_kwh: float = Field(0.0, description="Energy in kWh.")
    co2_g: float = Field(0.0, description="Emissions in grams of CO2 equivalent.")
    cost_usd: float = Field(0.0, description="Cost in US dollars.")


class MonthlyForecast(BaseModel):
    """Linear extrapolation of the per-1k figures to a full month of steady traffic."""

    requests: int = Field(0, description="Requests served over the month.")
    cost_usd: float = Field(0.0, description="Monthly cost in US dollars.")
    co2_kg: float = Field(0.0, description="Monthly emissions in kilograms of CO2 equivalent.")
    energy_kwh: float = Field(0.0, description="Monthly energy in kWh.")
    assumption: str = Field("", description="Traffic assumption behind the forecast.")


class Assumptions(BaseModel):
    """Intermediate values exposed for transparency."""

    region: str
    grid_intensity_g_per_kwh: float
    active_instances: int
    idle_instances: int
    cpu_utilization_est: float = Field(..., description="Estimated CPU utilization, in percent.")
    seconds_per_request: float


class RecommendationType(str, Enum):
    """Enumeration of possible recommendation types."""

    LOW_CONCURRENCY = "LOW_CONCURRENCY"
    RIGHTSIZING_MEMORY = "RIGHTSIZING_MEMORY"
    IDLE_MIN_INSTANCES = "IDLE_MIN_INSTANCES"
    HIGH_CARBON_REGION = "HIGH_CARBON_REGION"
    HIGH_LATENCY = "HIGH_LATENCY"
    HIGH_COST = "HIGH_COST"
    HEALTHY = "HEALTHY"


class Recommendation(BaseModel):
    """Represents a single actionable optimization recommendation."""

    type: RecommendationType = Field(..., description="The category of the recommendation.")
    description: str = Field(..., description="A human-readable description of the recommendation.")


class EstimateResult(BaseModel):
    """The complete answer for one estimation request."""

    per_1k_requests: Footprint
    per_hour: Footprint
    risk_score: int = Field(..., ge=0, le=100, description="0..100, where 100 means no flagged issue.")
    suggested_yaml: str = Field(..., description="Optimized configuration snippet.")
    monthly_forecast: MonthlyForecast
    assumptions: Assumptions
    advice: List[str] = Field(default_factory=list)
