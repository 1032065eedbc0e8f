# tests/api/conftest.py
"""
Shared fixtures for API tests.
Uses FastAPI's TestClient with dependency overrides to inject the pipeline.
"""

import pytest
from fastapi.testclient import TestClient

from greenrun.api.app import create_app
from greenrun.api.dependencies import get_estimation_pipeline
from greenrun.core.processor import EstimationPipeline


@pytest.fixture
def pipeline():
    """A fresh pipeline per test so warnings and state never leak between tests."""
    return EstimationPipeline()


@pytest.fixture
def client(pipeline):
    """Creates a TestClient with the pipeline dependency overridden."""
    app = create_app()
    app.dependency_overrides[get_estimation_pipeline] = lambda: pipeline
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def payload():
    """The web client's default form values."""
    return {
        "vcpu": 1,
        "memory_gb": 1,
        "concurrency": 80,
        "avg_duration_ms": 200,
        "requests_per_min": 600,
        "region": "asia-south1",
        "min_instances": 0,
        "max_instances": 5,
        "idle_utilization_pc": 10,
    }
