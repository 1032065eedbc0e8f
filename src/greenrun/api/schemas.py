# src/greenrun/api/schemas.py
"""
Pydantic response schemas for the API.
Keeps API-specific response shapes separate from the estimation models.
"""

from typing import Dict

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str = Field(..., description="Health status of the API.")
    version: str = Field(..., description="Current application version.")


class VersionResponse(BaseModel):
    """Response schema for the version endpoint."""

    version: str = Field(..., description="Current application version.")


class ConfigResponse(BaseModel):
    """Non-sensitive configuration values."""

    default_intensity: float
    cost_per_vcpu_second: float
    cost_per_gb_second: float
    watts_per_vcpu_at_full: float
    watts_per_gb_memory: float
    days_per_month: int
    log_level: str


class RegionsResponse(BaseModel):
    """Known regions and their grid carbon intensity."""

    default_intensity: float = Field(..., description="Intensity used for unknown regions, in gCO2e/kWh.")
    regions: Dict[str, float] = Field(default_factory=dict, description="Region -> gCO2e/kWh.")
