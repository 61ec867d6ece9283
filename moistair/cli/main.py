"""MoistAir command-line interface.

Entry point for the ``moistair`` CLI tool.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from moistair import __app_name__, __version__

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name=__app_name__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """MoistAir — psychrometric properties of moist air.

    Pressures in kPa, temperatures in K, enthalpy in kJ/kg dry air.
    """
    ctx.ensure_object(dict)
    ctx.obj["console"] = console
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


# Import and register sub-commands
from moistair.cli.info_cmd import info  # noqa: E402
from moistair.cli.psat_cmd import psat  # noqa: E402
from moistair.cli.state_cmd import state  # noqa: E402

cli.add_command(psat)
cli.add_command(state)
cli.add_command(info)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()
