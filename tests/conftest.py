# tests/conftest.py

import pytest

from greenrun.models.estimate import EstimateRequest


@pytest.fixture(autouse=True)
def mock_settings_env_vars(monkeypatch):
    """
    Pytest fixture to mock environment variables for the config module.

    This fixture runs automatically for every test (`autouse=True`) so that
    settings resolved at access time are predictable and isolated from the
    actual environment.
    """
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "*")


@pytest.fixture
def baseline_request():
    """A small, healthy workload in the cleanest known region."""
    return EstimateRequest(
        vcpu=1,
        memory_gb=1,
        concurrency=80,
        avg_duration_ms=200,
        requests_per_min=100,
        region="europe-west4",
        min_instances=0,
        max_instances=10,
        idle_utilization_pc=10,
    )


@pytest.fixture
def dirty_region_request():
    """The web client's default payload, deployed to a high-carbon grid."""
    return EstimateRequest(
        vcpu=1,
        memory_gb=1,
        concurrency=80,
        avg_duration_ms=200,
        requests_per_min=600,
        region="asia-south1",
        min_instances=0,
        max_instances=5,
        idle_utilization_pc=10,
    )
