"""CLI command for saturation pressure."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from moistair.core.errors import MoistAirError
from moistair.core.saturation import saturation_pressure
from moistair.utils.constants import T_CELSIUS_OFFSET


@click.command("psat")
@click.argument("temperatures", type=float, nargs=-1, required=True)
@click.pass_context
def psat(ctx: click.Context, temperatures: tuple[float, ...]) -> None:
    """Saturation vapour pressure of water at one or more TEMPERATURES [K]."""
    console: Console = ctx.obj.get("console", Console())

    table = Table(title="Saturation Pressure")
    table.add_column("T [K]", style="cyan", justify="right")
    table.add_column("T [°C]", style="dim", justify="right")
    table.add_column("p_ws [kPa]", style="green", justify="right")

    for T in temperatures:
        try:
            p_ws = saturation_pressure(T)
        except MoistAirError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise SystemExit(1)
        table.add_row(f"{T:.2f}", f"{T - T_CELSIUS_OFFSET:.2f}", f"{p_ws:.6f}")

    console.print(table)
