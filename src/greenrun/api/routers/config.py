# src/greenrun/api/routers/config.py
"""
API routes for exposing non-sensitive configuration, region data and version information.
"""

import logging

from fastapi import APIRouter

from greenrun import __version__
from greenrun.api.schemas import ConfigResponse, HealthResponse, RegionsResponse, VersionResponse
from greenrun.core.config import config
from greenrun.data.grid_intensity import GRID_INTENSITY_BY_REGION

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse(status="ok", version=__version__)


@router.get("/version", response_model=VersionResponse)
async def version():
    """Return the current application version."""
    return VersionResponse(version=__version__)


@router.get("/config", response_model=ConfigResponse)
async def get_config():
    """Return the constants the estimation model runs with."""
    return ConfigResponse(
        default_intensity=config.DEFAULT_INTENSITY,
        cost_per_vcpu_second=config.COST_PER_VCPU_SECOND,
        cost_per_gb_second=config.COST_PER_GB_SECOND,
        watts_per_vcpu_at_full=config.WATTS_PER_VCPU_AT_FULL,
        watts_per_gb_memory=config.WATTS_PER_GB_MEMORY,
        days_per_month=config.DAYS_PER_MONTH,
        log_level=config.LOG_LEVEL,
    )


@router.get("/regions", response_model=RegionsResponse)
async def list_regions():
    """Return the static region -> grid intensity table."""
    return RegionsResponse(default_intensity=config.DEFAULT_INTENSITY, regions=dict(GRID_INTENSITY_BY_REGION))
