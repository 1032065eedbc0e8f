# src/greenrun/core/factory.py
"""
Factory functions to instantiate the estimation pipeline and its components.
"""

import logging
from functools import lru_cache

from ..energy.estimator import ServerlessEstimator
from .calculator import CarbonCalculator
from .config import config
from .processor import EstimationPipeline
from .recommender import Recommender

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_calculator() -> CarbonCalculator:
    """Shared calculator so unknown-region warnings are emitted once per process."""
    return CarbonCalculator(default_intensity=config.DEFAULT_INTENSITY)


@lru_cache(maxsize=1)
def get_pipeline() -> EstimationPipeline:
    """
    Factory function to instantiate and return a fully configured EstimationPipeline.
    Uses lru_cache to act as a singleton.
    """
    logger.debug("Initializing estimation pipeline...")
    return EstimationPipeline(
        estimator=ServerlessEstimator(config),
        calculator=get_calculator(),
        recommender=Recommender(),
    )
