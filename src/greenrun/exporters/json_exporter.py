import json
import os
from typing import Optional

import aiofiles

from ..models.estimate import EstimateResult
from .base_exporter import BaseExporter


class JSONExporter(BaseExporter):
    """Writes an estimate result as indented JSON, in its wire shape."""

    FILE_EXTENSION = ".json"

    async def export(self, result: EstimateResult, path: Optional[str] = None) -> str:
        # A missing path or a directory gets the region-based file name
        if path is None or os.path.isdir(path) or path.endswith(os.sep):
            out_path = os.path.join(path or ".", self.filename_for(result))
        else:
            out_path = path
        os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)

        async with aiofiles.open(out_path, "w", encoding="utf-8") as fh:
            await fh.write(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2))
        return out_path
