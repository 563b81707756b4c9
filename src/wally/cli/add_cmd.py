"""wally add CLI command for component generation.

Copies a packaged template (or synthesizes one with --inline) into the
components directory of the current Angular project.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from wally.cli.output import render_inspection, render_next_steps
from wally.errors import EmptyTemplateError, NotFoundError, ParseError, ValidationError, WriteError
from wally.models.config import load_settings
from wally.project.inspector import inspect_project
from wally.project.paths import resolve_components_path
from wally.project.validator import check_project
from wally.scaffold.loader import load_template
from wally.scaffold.names import validate_component_name
from wally.scaffold.synth import synthesize
from wally.scaffold.writer import write_files


def add(
    name: str = typer.Argument("", help="Component to add (e.g. button)"),
    inline: bool = typer.Option(
        False,
        "--inline",
        help="Generate a component adapted to the project instead of copying a template",
    ),
    templates: Optional[Path] = typer.Option(
        None,
        "--templates",
        envvar="WALLY_TEMPLATES",
        help="Templates directory (default: templates shipped with wally)",
    ),
    path: Optional[Path] = typer.Option(
        None, "--path", help="Components directory, relative to the project root"
    ),
) -> None:
    """Add a component to the current Angular project."""
    console = Console()
    root = Path.cwd()

    try:
        validate_component_name(name)
    except ValidationError as exc:
        console.print(f"\n[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    project = check_project(root)
    if not project.value:
        console.print("\n[bold red]Error:[/bold red] Angular project not detected.")
        if project.diagnostic:
            console.print(f"[dim]{escape(project.diagnostic)}[/dim]")
        console.print("Run wally from the root of an Angular project (angular.json + package.json).")
        raise typer.Exit(code=1)

    try:
        settings = load_settings(root)
    except ParseError as exc:
        console.print(f"\n[bold red]Error:[/bold red] Invalid settings: {escape(str(exc))}")
        raise typer.Exit(code=1)

    templates_dir = templates
    if templates_dir is None and settings.templates_dir:
        templates_dir = root / settings.templates_dir

    console.print(f"\n[cyan]Creating component: {escape(name)}[/cyan]")

    try:
        if inline:
            console.print("[blue]Inspecting project conventions...[/blue]")
            inspection = inspect_project(root)
            render_inspection(inspection, console)
            files = synthesize(name, inspection.config)
        else:
            files = load_template(name, templates_dir)
    except (NotFoundError, EmptyTemplateError) as exc:
        console.print(f"\n[bold red]Error:[/bold red] {escape(str(exc))}")
        console.print("[dim]Run 'wally list' to see available components.[/dim]")
        raise typer.Exit(code=1)

    if path is not None:
        components_path = path
    elif settings.components_path:
        components_path = Path(settings.components_path)
    else:
        components_path = resolve_components_path(root)

    if (root / components_path).exists():
        console.print(f"[green]Using: {escape(str(components_path))}[/green]")
    else:
        console.print(f"[yellow]Creating: {escape(str(components_path))}[/yellow]")

    try:
        write_files(root / components_path / name, files)
    except WriteError as exc:
        console.print(f"\n[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.written:
            kept = ", ".join(p.name for p in exc.written)
            console.print(f"[yellow]Already written (left in place): {escape(kept)}[/yellow]")
        raise typer.Exit(code=1)

    console.print("\n[bold green]Component created successfully![/bold green]")
    render_next_steps(name, console)
