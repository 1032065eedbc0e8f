# src/greenrun/core/calculator.py

import logging
import threading
from dataclasses import dataclass
from typing import Mapping, Optional

from greenrun.data.grid_intensity import GRID_INTENSITY_BY_REGION

from .config import config

logger = logging.getLogger(__name__)


@dataclass
class CarbonCalculationResult:
    co2e_grams: float
    grid_intensity: float


class CarbonCalculator:
    """Calculates CO2e emissions based on energy consumption and grid carbon intensity."""

    def __init__(self, intensities: Optional[Mapping[str, float]] = None, default_intensity: Optional[float] = None):
        """Initialize with a region table and an optional default intensity.

        Unknown regions are warned about only once per calculator.
        """
        self.intensities = intensities if intensities is not None else GRID_INTENSITY_BY_REGION
        self.default_intensity = default_intensity if default_intensity is not None else config.DEFAULT_INTENSITY
        self._warned_regions = set()
        self._lock = threading.Lock()

    def get_intensity(self, region: str) -> float:
        """Return the grid intensity (gCO2e/kWh) for a region, or the default."""
        intensity = self.intensities.get(region)
        if intensity is not None:
            return intensity

        with self._lock:
            first_time = region not in self._warned_regions
            self._warned_regions.add(region)
        if first_time:
            logger.warning(
                "Carbon intensity unknown for region '%s'; using default %s gCO2e/kWh",
                region,
                self.default_intensity,
            )
        return self.default_intensity

    def calculate_emissions(self, kwh: float, region: str) -> CarbonCalculationResult:
        """Calculate CO2e grams and return it with the grid intensity used."""
        grid_intensity = self.get_intensity(region)
        if kwh == 0.0:
            return CarbonCalculationResult(co2e_grams=0.0, grid_intensity=grid_intensity)
        return CarbonCalculationResult(co2e_grams=kwh * grid_intensity, grid_intensity=grid_intensity)
