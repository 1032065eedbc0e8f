# src/greenrun/reporters/console_reporter.py
"""
A reporter that displays an estimate in formatted tables in the console.
"""

import logging
from typing import Mapping

from rich.console import Console
from rich.table import Table

from ..models.estimate import EstimateResult
from .base_reporter import BaseReporter

logger = logging.getLogger(__name__)


def risk_style(score: int) -> str:
    """Colour used for a risk score: green when healthy, yellow when borderline, red otherwise."""
    if score >= 90:
        return "bold green"
    if score >= 70:
        return "bold yellow"
    return "bold red"


class ConsoleReporter(BaseReporter):
    """
    Renders an estimate to the console using the 'rich' library.
    """

    def __init__(self, console: Console = None):
        self.console = console or Console()

    def report(self, result: EstimateResult):
        """
        Displays the footprint, the monthly forecast, the assumptions and the advice.
        """
        table = Table(title="GreenRun Estimate", header_style="bold magenta", show_lines=True)
        table.add_column("Basis", style="cyan")
        table.add_column("Energy (kWh)", style="yellow", justify="right")
        table.add_column("CO2e (g)", style="red", justify="right")
        table.add_column("Cost ($)", style="green", justify="right")
        for label, footprint in (("per 1k requests", result.per_1k_requests), ("per hour", result.per_hour)):
            table.add_row(
                label,
                f"{footprint.energy_kwh:.5f}",
                f"{footprint.co2_g:.2f}",
                f"{footprint.cost_usd:.4f}",
            )
        self.console.print(table)

        forecast = result.monthly_forecast
        monthly = Table(title="Monthly Forecast", header_style="bold magenta", show_lines=True)
        monthly.add_column("Requests", justify="right")
        monthly.add_column("Energy (kWh)", style="yellow", justify="right")
        monthly.add_column("CO2e (kg)", style="red", justify="right")
        monthly.add_column("Cost ($)", style="green", justify="right")
        monthly.add_column("Assumption", style="dim")
        monthly.add_row(
            f"{forecast.requests:,}",
            f"{forecast.energy_kwh:.2f}",
            f"{forecast.co2_kg:.2f}",
            f"{forecast.cost_usd:.2f}",
            forecast.assumption,
        )
        self.console.print(monthly)

        self.report_assumptions(result.assumptions.model_dump())

        style = risk_style(result.risk_score)
        self.console.print(f"\nRisk score: [{style}]{result.risk_score}/100[/]")
        self.report_advice(result)
        self.console.print("\n[bold]Suggested configuration[/bold]")
        self.console.print(result.suggested_yaml, markup=False, highlight=False)

    def report_assumptions(self, assumptions: Mapping[str, object]):
        table = Table(title="Assumptions", header_style="bold magenta")
        table.add_column("Name", style="cyan")
        table.add_column("Value", justify="right")
        for name, value in assumptions.items():
            table.add_row(name, str(value))
        self.console.print(table)

    def report_advice(self, result: EstimateResult):
        """
        Displays the ordered optimization advice.
        """
        table = Table(title="Optimization Advice", header_style="bold magenta", show_lines=True)
        table.add_column("#", style="dim", justify="right")
        table.add_column("Recommendation", style="white")
        for i, advice in enumerate(result.advice, start=1):
            table.add_row(str(i), advice)
        self.console.print(table)

    def report_regions(self, regions: Mapping[str, float], default_intensity: float):
        """Displays known regions sorted from cleanest to dirtiest grid."""
        table = Table(title="Grid Carbon Intensity by Region", header_style="bold magenta")
        table.add_column("Region", style="cyan")
        table.add_column("gCO2e/kWh", style="red", justify="right")
        for region, intensity in sorted(regions.items(), key=lambda item: item[1]):
            table.add_row(region, f"{intensity:.0f}")
        self.console.print(table)
        self.console.print(f"Unknown regions use {default_intensity:.0f} gCO2e/kWh.", style="dim")
