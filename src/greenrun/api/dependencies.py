# src/greenrun/api/dependencies.py
"""
FastAPI dependency injection functions.

These functions provide service instances to API route handlers via
FastAPI's Depends() mechanism, so tests can override them.
"""

import logging

from greenrun.core.processor import EstimationPipeline

logger = logging.getLogger(__name__)


async def get_estimation_pipeline() -> EstimationPipeline:
    """Provides the EstimationPipeline instance via the factory."""
    from greenrun.core.factory import get_pipeline

    return get_pipeline()
