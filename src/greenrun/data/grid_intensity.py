# src/greenrun/data/grid_intensity.py

"""
Static grid carbon intensity (gCO2e/kWh) per cloud region.

The table is a snapshot, not a live feed. Regions missing from it fall back
to the configured DEFAULT_INTENSITY.
"""

from types import MappingProxyType

GRID_INTENSITY_BY_REGION = MappingProxyType(
    {
        "us-central1": 400.0,
        "us-east1": 420.0,
        "us-west1": 300.0,
        "europe-west1": 230.0,
        "europe-west4": 180.0,
        "asia-south1": 700.0,
        "asia-southeast1": 500.0,
    }
)

# Regions the optimizer never moves a workload away from.
LOW_CARBON_REGIONS = ("europe-west4", "us-west1")
PREFERRED_REGION = "europe-west4"
