# src/greenrun/core/suggester.py

"""
Builds an optimized configuration snippet by applying the advisor's fixes
to a copy of the normalized input.
"""

from greenrun.data.grid_intensity import LOW_CARBON_REGIONS, PREFERRED_REGION
from greenrun.models.estimate import EstimateInput

CONFIG_TEMPLATE = """# Suggested Cloud Run config (opt.)
region: {region}
cpu: {vcpu:.0f}
memory: {memory_gb:.1f}Gi
minInstances: {min_instances}
maxInstances: {max_instances}
concurrency: {concurrency}
ingress: all
"""


def optimize_input(inp: EstimateInput, util: float, intensity: float) -> EstimateInput:
    """Returns a corrected copy of the input; the original is left untouched."""
    changes = {}
    if inp.concurrency < 80:
        changes["concurrency"] = 80
    if inp.memory_gb > 1.5 and util < 0.35:
        changes["memory_gb"] = 1.5
    # TODO: consider every known region below the intensity threshold, not only the two exemplars.
    if intensity > 400 and inp.region not in LOW_CARBON_REGIONS:
        changes["region"] = PREFERRED_REGION
    if inp.min_instances >= 1 and inp.requests_per_min < 60:
        changes["min_instances"] = 0
    return inp.model_copy(update=changes)


def suggest_config(inp: EstimateInput, util: float, intensity: float) -> str:
    suggested = optimize_input(inp, util, intensity)
    return CONFIG_TEMPLATE.format(**suggested.model_dump())
