# src/greenrun/core/scorer.py

"""
Heuristic risk score. Starts at 100 and subtracts a penalty for each red
flag; penalties from unrelated categories stack.

Thresholds here are tuned independently from the ones used by the
Recommender and intentionally differ (e.g. memory 1.5GB vs 1.0GB).
"""

import logging

from greenrun.models.estimate import EstimateInput

logger = logging.getLogger(__name__)

MAX_SCORE = 100
MIN_SCORE = 0


def risk_score(inp: EstimateInput, util: float, intensity: float, cost_per_1k: float) -> int:
    score = MAX_SCORE
    # High carbon grid
    if intensity > 500:
        score -= 20
    elif intensity > 350:
        score -= 10
    # Low concurrency
    if inp.concurrency < 40:
        score -= 15
    # Over-provisioned memory
    if inp.memory_gb > 1.5 and util < 0.35:
        score -= 15
    # Min instances billed while traffic is low
    if inp.min_instances >= 1 and inp.requests_per_min < 60:
        score -= 10
    # Expensive per 1k requests
    if cost_per_1k > 0.015:
        score -= 15
    elif cost_per_1k > 0.01:
        score -= 8

    score = max(MIN_SCORE, min(MAX_SCORE, score))
    logger.debug("Risk score for region '%s': %d", inp.region, score)
    return score
