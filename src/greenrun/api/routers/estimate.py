# src/greenrun/api/routers/estimate.py
"""
API routes for workload estimation.
"""

import logging

from fastapi import APIRouter, Depends

from greenrun.api.dependencies import get_estimation_pipeline
from greenrun.core.processor import EstimationPipeline
from greenrun.models.estimate import EstimateRequest, EstimateResult

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/estimate", response_model=EstimateResult)
async def create_estimate(
    request: EstimateRequest,
    pipeline: EstimationPipeline = Depends(get_estimation_pipeline),
):
    """Estimate energy, carbon and cost for the declared workload."""
    return pipeline.run(request)
