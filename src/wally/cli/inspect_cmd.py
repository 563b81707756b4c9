"""wally inspect CLI command reporting detected project conventions."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from wally.cli.output import render_inspection
from wally.project.inspector import inspect_project
from wally.project.paths import resolve_components_path
from wally.project.validator import check_project


def inspect(
    directory: str = typer.Argument(".", help="Project directory to inspect"),
) -> None:
    """Show the conventions `wally add --inline` adapts to."""
    console = Console()
    root = Path(directory).resolve()

    project = check_project(root)
    if not project.value:
        console.print("[yellow]Warning: Angular project not detected.[/yellow]")
        if project.diagnostic:
            console.print(f"[dim]{escape(project.diagnostic)}[/dim]")

    render_inspection(inspect_project(root), console)
    console.print(f"Components path: {escape(str(resolve_components_path(root)))}")
