# tests/core/test_sizing.py

import pytest

from greenrun.core.normalizer import normalize
from greenrun.core.sizing import clamp, estimate_sizing
from greenrun.models.estimate import EstimateRequest


def _sizing(**fields):
    return estimate_sizing(normalize(EstimateRequest(**fields)))


def test_baseline_scenario(baseline_request):
    sizing = estimate_sizing(normalize(baseline_request))

    assert sizing.requests_per_second == pytest.approx(100 / 60)
    assert sizing.concurrent_load == pytest.approx(1 / 3)
    assert sizing.active_instances == 1
    assert sizing.utilization == pytest.approx((1 / 3) / 80)
    assert 0 < sizing.utilization < 0.01


def test_zero_traffic_without_min_instances_has_no_active_instance():
    sizing = _sizing(requests_per_min=0, min_instances=0, max_instances=10)

    assert sizing.requests_per_second == 0
    assert sizing.concurrent_load == 0
    assert sizing.active_instances == 0
    assert sizing.utilization == 0


def test_zero_traffic_keeps_min_instances_active():
    sizing = _sizing(requests_per_min=0, min_instances=2, max_instances=10)

    assert sizing.active_instances == 2
    assert sizing.utilization == 0


def test_instances_scale_with_load():
    # 6000 rpm * 2s = 200 in-flight requests -> 200 / 80 -> 3 instances
    sizing = _sizing(requests_per_min=6000, avg_duration_ms=2000, concurrency=80, max_instances=10)

    assert sizing.concurrent_load == pytest.approx(200)
    assert sizing.active_instances == 3
    assert sizing.utilization == pytest.approx(200 / 240)


def test_active_instances_capped_at_max_and_utilization_clamped():
    sizing = _sizing(requests_per_min=60000, avg_duration_ms=1000, concurrency=10, max_instances=2)

    assert sizing.active_instances == 2
    assert sizing.utilization == 1.0


@pytest.mark.parametrize("rpm", [0, 1, 59, 60, 600, 6000, 600000])
@pytest.mark.parametrize("min_instances,max_instances", [(0, 1), (0, 10), (2, 5), (5, 5)])
def test_sizing_invariants(rpm, min_instances, max_instances):
    sizing = _sizing(
        requests_per_min=rpm,
        avg_duration_ms=350,
        concurrency=20,
        min_instances=min_instances,
        max_instances=max_instances,
    )

    assert min_instances <= sizing.active_instances <= max_instances
    assert 0.0 <= sizing.utilization <= 1.0


def test_clamp():
    assert clamp(-1, 0, 1) == 0
    assert clamp(2, 0, 1) == 1
    assert clamp(0.5, 0, 1) == 0.5
