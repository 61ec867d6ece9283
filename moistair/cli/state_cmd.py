"""CLI command for evaluating a full moist air state."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from moistair.core.config import ProjectMeta, SolverSettings, save_state_json
from moistair.core.errors import MoistAirError
from moistair.core.humidity import HumidityKind
from moistair.core.properties import compute_moist_air_state
from moistair.utils.constants import P_ATM, T_CELSIUS_OFFSET
from moistair.utils.validation import Severity, validate_state_inputs


@click.command("state")
@click.option(
    "--p", "pressure", type=float, default=P_ATM, show_default=True, help="Total pressure [kPa]."
)
@click.option("--t", "drybulb", type=float, required=True, help="Drybulb temperature [K].")
@click.option(
    "--kind",
    type=click.Choice([k.value for k in HumidityKind], case_sensitive=False),
    required=True,
    help="Humidity input: rh, wbt, dpt or w.",
)
@click.option("--value", type=float, required=True, help="Value of the humidity input.")
@click.option(
    "--maxiter", type=int, default=100, show_default=True, help="Root finder iteration cap."
)
@click.option("--name", type=str, default="Untitled", help="Name stored with saved output.")
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    default=None,
    help="Output file path (JSON).",
)
@click.pass_context
def state(
    ctx: click.Context,
    pressure: float,
    drybulb: float,
    kind: str,
    value: float,
    maxiter: int,
    name: str,
    output: str | None,
) -> None:
    """Compute all psychrometric properties at one state point."""
    console: Console = ctx.obj.get("console", Console())

    check = validate_state_inputs(pressure, drybulb, kind, value)
    for msg in check.messages:
        if msg.severity is Severity.INFO:
            console.print(f"[dim]Note: {msg.message}[/dim]")
    for msg in check.warnings:
        console.print(f"[yellow]Warning:[/yellow] {msg.message}")
    if not check.is_valid:
        for msg in check.errors:
            console.print(f"[red]Error:[/red] {msg.message}")
        raise SystemExit(1)

    try:
        result = compute_moist_air_state(
            pressure,
            drybulb,
            kind,
            value,
            settings=SolverSettings(maxiter=maxiter),
            meta=ProjectMeta(name=name),
        )
    except MoistAirError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1)

    console.print(f"\n[bold]MoistAir — State Point[/bold]\n")

    table = Table(title="Moist Air Properties")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_column("Unit", style="dim")

    table.add_row("Pressure", f"{result.pressure:.3f}", "kPa")
    table.add_row("Drybulb", f"{result.drybulb - T_CELSIUS_OFFSET:.2f}", "°C")
    table.add_row("Wetbulb", f"{result.wetbulb - T_CELSIUS_OFFSET:.2f}", "°C")
    table.add_row("Dewpoint", f"{result.dewpoint - T_CELSIUS_OFFSET:.2f}", "°C")
    table.add_row("Relative Humidity", f"{result.relative_humidity * 100:.1f}", "%")
    table.add_row("Humidity Ratio", f"{result.humidity_ratio:.6f}", "kg/kg")
    table.add_row("Saturation Pressure", f"{result.saturation_pressure:.4f}", "kPa")
    table.add_row("Vapour Pressure", f"{result.vapor_pressure:.4f}", "kPa")
    table.add_row("Density", f"{result.density:.4f}", "kg/m³")
    table.add_row("Specific Volume", f"{result.specific_volume:.4f}", "m³/kg")
    table.add_row("Enthalpy", f"{result.enthalpy:.2f}", "kJ/kg")

    console.print(table)

    if output:
        save_state_json(result, output)
        console.print(f"\n[dim]Saved to {output}[/dim]")
