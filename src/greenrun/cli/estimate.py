# src/greenrun/cli/estimate.py
"""
Implements the `estimate` and `regions` commands for the GreenRun CLI.
"""

import asyncio
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from typing_extensions import Annotated

from ..core.config import config
from ..core.exceptions import ExportError, InvalidEstimateRequestError
from ..core.factory import get_pipeline
from ..data.grid_intensity import GRID_INTENSITY_BY_REGION
from ..exporters.json_exporter import JSONExporter
from ..models.cli import OutputOptions
from ..models.estimate import EstimateResult
from ..reporters.console_reporter import ConsoleReporter

logger = logging.getLogger(__name__)


def load_payload(input_file: Optional[Path], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Reads a JSON payload from disk and applies the options given on the command line."""
    payload: Dict[str, Any] = {}
    if input_file is not None:
        try:
            payload = json.loads(input_file.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise InvalidEstimateRequestError(f"cannot read {input_file}: {e}") from e
        if not isinstance(payload, dict):
            raise InvalidEstimateRequestError(f"{input_file} must contain a JSON object")
    payload.update({key: value for key, value in overrides.items() if value is not None})
    return payload


async def handle_export(result: EstimateResult, path: Optional[Path] = None) -> str:
    """Handles writing the estimate to a JSON file, or into a directory under its default name."""
    exporter = JSONExporter()
    try:
        return await exporter.export(result, str(path) if path is not None else None)
    except OSError as e:
        raise ExportError(f"Failed to export estimate to {path}: {e}") from e


def estimate(
    vcpu: Annotated[Optional[float], typer.Option(help="vCPU per instance.")] = None,
    memory_gb: Annotated[Optional[float], typer.Option("--memory-gb", help="Memory per instance, in GB.")] = None,
    concurrency: Annotated[Optional[int], typer.Option(help="Simultaneous requests per instance.")] = None,
    avg_duration_ms: Annotated[
        Optional[int], typer.Option("--avg-duration-ms", help="Average request duration in ms.")
    ] = None,
    requests_per_min: Annotated[
        Optional[int], typer.Option("--requests-per-min", help="Steady traffic in requests per minute.")
    ] = None,
    region: Annotated[Optional[str], typer.Option(help="Deployment region, e.g. europe-west4.")] = None,
    min_instances: Annotated[Optional[int], typer.Option("--min-instances", help="Minimum instances.")] = None,
    max_instances: Annotated[Optional[int], typer.Option("--max-instances", help="Maximum instances.")] = None,
    idle_utilization_pc: Annotated[
        Optional[float], typer.Option("--idle-utilization-pc", help="CPU utilization of an idle instance (%).")
    ] = None,
    input_file: Annotated[
        Optional[Path],
        typer.Option("--input", help="JSON file with the request payload; options override its fields.", dir_okay=False),
    ] = None,
    output_format: Annotated[
        str, typer.Option("--output", help="Console output format (table/json).", case_sensitive=False)
    ] = "table",
    export_path: Annotated[
        Optional[Path],
        typer.Option("--export", help="Also write the estimate as JSON to this path.", dir_okay=False),
    ] = None,
):
    """
    Estimate energy, carbon footprint and cost for a request-driven workload.

    Missing or invalid values fall back to defaults (1 vCPU, 1GB, concurrency 80, 200ms).
    """
    output = OutputOptions(output_format=output_format, export_path=export_path)
    overrides = {
        "vcpu": vcpu,
        "memory_gb": memory_gb,
        "concurrency": concurrency,
        "avg_duration_ms": avg_duration_ms,
        "requests_per_min": requests_per_min,
        "region": region,
        "min_instances": min_instances,
        "max_instances": max_instances,
        "idle_utilization_pc": idle_utilization_pc,
    }

    try:
        payload = load_payload(input_file, overrides)
        result = get_pipeline().run(payload)
    except InvalidEstimateRequestError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)

    if output.format == "json":
        typer.echo(result.model_dump_json(indent=2))
    else:
        ConsoleReporter().report(result)

    if output.export_enabled:
        try:
            written_path = asyncio.run(handle_export(result, output.export_path))
        except ExportError as e:
            logger.error(str(e))
            logger.debug(traceback.format_exc())
            raise typer.Exit(code=1)
        logger.info(f"Successfully exported estimate to {written_path}")
        print(f"Estimate exported to: {written_path}", file=sys.stderr)


def regions():
    """
    List known regions and their grid carbon intensity.
    """
    ConsoleReporter().report_regions(GRID_INTENSITY_BY_REGION, config.DEFAULT_INTENSITY)
