"""CLI command for inspecting saved state files."""

from __future__ import annotations

from dataclasses import asdict

import click
from rich.console import Console
from rich.tree import Tree

from moistair.core.config import load_state_json


@click.command("info")
@click.argument("path", type=click.Path(exists=True))
@click.pass_context
def info(ctx: click.Context, path: str) -> None:
    """Display summary of a saved state file."""
    console: Console = ctx.obj.get("console", Console())
    state = load_state_json(path)

    tree = Tree(f"[bold]{state.meta.name}[/bold]")
    meta = tree.add("[cyan]Metadata[/cyan]")
    meta.add(f"Author: {state.meta.author or '—'}")
    meta.add(f"Version: {state.meta.version}")
    meta.add(f"Modified: {state.meta.modified or '—'}")

    props = tree.add("[cyan]Properties[/cyan]")
    for k, v in asdict(state).items():
        if k == "meta":
            continue
        props.add(f"{k}: {v:.6g}")

    console.print(tree)
