# src/greenrun/models/cli.py
"""
Data models for GreenRun CLI command options using Typer.
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

OUTPUT_FORMATS = ("table", "json")


class OutputOptions:
    """Dependency-injectable model for output/export options."""

    def __init__(
        self,
        output_format: Annotated[
            str,
            typer.Option(
                "--output",
                help="Console output format (table/json).",
                case_sensitive=False,
            ),
        ] = "table",
        export_path: Annotated[
            Optional[Path],
            typer.Option(
                "--export",
                help="Also write the estimate as JSON to this file, or into this directory.",
                exists=False,
                dir_okay=True,
                writable=True,
            ),
        ] = None,
    ):
        self.output_format = output_format
        self.export_path = export_path
        self._validate()

    def _validate(self):
        """Validates the output format."""
        if self.output_format.lower() not in OUTPUT_FORMATS:
            raise typer.BadParameter(f"Invalid output format '{self.output_format}'. Must be 'table' or 'json'.")

    @property
    def format(self) -> str:
        """Returns the validated, lower-cased format."""
        return self.output_format.lower()

    @property
    def export_enabled(self) -> bool:
        return self.export_path is not None
