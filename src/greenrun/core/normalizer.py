# src/greenrun/core/normalizer.py

import logging
import math

from greenrun.models.estimate import EstimateInput, EstimateRequest

logger = logging.getLogger(__name__)

DEFAULT_IDLE_UTILIZATION_PC = 10.0
DEFAULT_CONCURRENCY = 80
DEFAULT_VCPU = 1.0
DEFAULT_MEMORY_GB = 1.0
DEFAULT_AVG_DURATION_MS = 200
DEFAULT_MIN_INSTANCES = 0
DEFAULT_MAX_INSTANCES = 1


def normalize(request: EstimateRequest) -> EstimateInput:
    """
    Replaces every invalid field of a raw request with its default.

    Normalization never fails: region and requests_per_min are passed
    through untouched (zero traffic is a valid scenario).
    """
    values = request.model_dump()
    replaced = []

    def _default(field: str, invalid: bool, default):
        # NaN compares false against every bound, so it is checked explicitly.
        value = values[field]
        if invalid or (isinstance(value, float) and not math.isfinite(value)):
            replaced.append(field)
            values[field] = default

    _default("idle_utilization_pc", values["idle_utilization_pc"] <= 0, DEFAULT_IDLE_UTILIZATION_PC)
    _default("concurrency", values["concurrency"] <= 0, DEFAULT_CONCURRENCY)
    _default("vcpu", values["vcpu"] <= 0, DEFAULT_VCPU)
    _default("memory_gb", values["memory_gb"] <= 0, DEFAULT_MEMORY_GB)
    _default("avg_duration_ms", values["avg_duration_ms"] <= 0, DEFAULT_AVG_DURATION_MS)
    _default("min_instances", values["min_instances"] < 0, DEFAULT_MIN_INSTANCES)
    _default("max_instances", values["max_instances"] <= 0, DEFAULT_MAX_INSTANCES)

    if replaced:
        logger.debug("Defaulted invalid request fields: %s", ", ".join(replaced))

    return EstimateInput(**values)
