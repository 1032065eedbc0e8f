# tests/energy/test_estimator.py
"""
Tests for the ServerlessEstimator.

These tests verify the power, energy and cost model on both bases
(per 1000 requests and per hour for the provisioned fleet).
"""

import pytest

from greenrun.core.config import Config
from greenrun.core.normalizer import normalize
from greenrun.core.sizing import estimate_sizing
from greenrun.energy.estimator import ServerlessEstimator
from greenrun.models.estimate import EstimateRequest


@pytest.fixture
def estimator():
    """Fixture for the ServerlessEstimator with default settings."""
    return ServerlessEstimator(settings=Config())


def _run(estimator, **fields):
    inp = normalize(EstimateRequest(**fields))
    return estimator.estimate(inp, estimate_sizing(inp))


def test_power_scales_with_utilization(estimator):
    assert estimator.estimate_power_watts(1, 1, 0) == pytest.approx(0.35)
    assert estimator.estimate_power_watts(1, 1, 1) == pytest.approx(12.35)
    assert estimator.estimate_power_watts(2, 4, 0.5) == pytest.approx(12.0 + 1.4)


def test_power_clamps_utilization(estimator):
    assert estimator.estimate_power_watts(1, 0, 3.0) == pytest.approx(12.0)
    assert estimator.estimate_power_watts(1, 0, -1.0) == 0


def test_kwh_conversion():
    # 1000 W for one hour is 1 kWh
    assert ServerlessEstimator.kwh_from_watts(1000, 3600) == pytest.approx(1.0)


def test_cost_conversion(estimator):
    assert estimator.cost_from_runtime_seconds(1, 1, 1) == pytest.approx(0.000024 + 0.0000025)
    assert estimator.cost_from_runtime_seconds(2, 4, 100) == pytest.approx(100 * (2 * 0.000024 + 4 * 0.0000025))


def test_baseline_per_1k_and_per_hour(estimator, baseline_request):
    inp = normalize(baseline_request)
    energy = estimator.estimate(inp, estimate_sizing(inp))

    # util = 1/240 -> 12 * 1/240 + 0.35 = 0.4 W for 200 busy seconds
    assert energy.seconds_per_request == pytest.approx(0.2)
    assert energy.kwh_per_1k == pytest.approx(0.4 * 200 / 1000 / 3600)
    assert energy.cost_per_1k == pytest.approx(0.0053)
    assert energy.idle_instances == 0
    assert energy.kwh_per_hour == pytest.approx(0.0004)
    # billed for 3600 * util = 15 busy seconds
    assert energy.cost_per_hour == pytest.approx(15 * (0.000024 + 0.0000025))


def test_zero_traffic_without_instances_draws_nothing_per_hour(estimator):
    energy = _run(estimator, requests_per_min=0, min_instances=0, max_instances=10)

    assert energy.kwh_per_hour == 0
    assert energy.cost_per_hour == 0
    assert energy.kwh_per_1k > 0


def test_zero_traffic_with_min_instances_draws_baseline_power(estimator):
    energy = _run(estimator, requests_per_min=0, min_instances=2, max_instances=10)

    assert energy.kwh_per_hour == pytest.approx(2 * 0.35 / 1000)
    assert energy.cost_per_hour == 0


def test_provisioned_instances_beyond_active_fleet_idle(estimator):
    # min > max is not rejected: one instance is active, two more sit idle
    energy = _run(estimator, requests_per_min=0, min_instances=3, max_instances=1, idle_utilization_pc=10)

    assert energy.idle_instances == 2
    idle_watts = 12.0 * 0.10 + 0.35
    assert energy.kwh_per_hour == pytest.approx((0.35 + 2 * idle_watts) / 1000)


def test_custom_settings_are_used():
    settings = Config()
    settings.WATTS_PER_VCPU_AT_FULL = 20.0
    settings.WATTS_PER_GB_MEMORY = 1.0
    settings.COST_PER_VCPU_SECOND = 0.001
    settings.COST_PER_GB_SECOND = 0.0
    estimator = ServerlessEstimator(settings)

    assert estimator.estimate_power_watts(1, 2, 0.5) == pytest.approx(12.0)
    assert estimator.cost_from_runtime_seconds(1, 2, 10) == pytest.approx(0.01)


@pytest.mark.parametrize("rpm", [0, 30, 600, 60000])
@pytest.mark.parametrize("min_instances", [0, 1, 4])
def test_estimates_are_never_negative(estimator, rpm, min_instances):
    energy = _run(estimator, requests_per_min=rpm, min_instances=min_instances, max_instances=3)

    assert energy.kwh_per_1k >= 0
    assert energy.cost_per_1k >= 0
    assert energy.kwh_per_hour >= 0
    assert energy.cost_per_hour >= 0
    assert energy.idle_instances >= 0
