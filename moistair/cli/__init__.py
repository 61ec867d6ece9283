"""MoistAir command-line interface package."""

from moistair.cli.main import cli, main

__all__ = ["cli", "main"]
