# tests/core/test_factory.py

from greenrun.core.calculator import CarbonCalculator
from greenrun.core.factory import get_calculator, get_pipeline
from greenrun.core.processor import EstimationPipeline


def test_get_pipeline_returns_configured_pipeline():
    pipeline = get_pipeline()

    assert isinstance(pipeline, EstimationPipeline)
    assert pipeline.calculator is get_calculator()


def test_get_pipeline_singleton():
    """get_pipeline returns the same instance (singleton behavior)."""
    assert get_pipeline() is get_pipeline()


def test_get_calculator_singleton():
    calculator = get_calculator()

    assert isinstance(calculator, CarbonCalculator)
    assert calculator is get_calculator()
