from __future__ import annotations

import re
from abc import ABC, abstractmethod

from ..models.estimate import EstimateResult


class BaseExporter(ABC):
    """Abstract base class for estimate exporters.

    Subclasses set FILE_EXTENSION and implement `export`. When no explicit
    file is given, the estimate is written to `filename_for(result)`, which
    names the file after the region the estimate was computed for.
    """

    FILENAME_PREFIX: str = "greenrun-estimate"
    FILE_EXTENSION: str = ""

    def filename_for(self, result: EstimateResult) -> str:
        """Default file name for an estimate, e.g. `greenrun-estimate-europe-west4.json`."""
        region = re.sub(r"[^A-Za-z0-9_-]+", "-", result.assumptions.region).strip("-").lower()
        stem = f"{self.FILENAME_PREFIX}-{region}" if region else self.FILENAME_PREFIX
        return stem + self.FILE_EXTENSION

    @abstractmethod
    async def export(self, result: EstimateResult, path: str | None = None) -> str:
        """Write the estimate to disk. Return the written path."""
        raise NotImplementedError()
