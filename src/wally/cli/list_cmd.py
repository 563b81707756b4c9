"""wally list CLI command showing the available component templates."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from wally.cli.output import render_catalog
from wally.scaffold.loader import get_templates_dir, list_templates


def list_components(
    templates: Optional[Path] = typer.Option(
        None,
        "--templates",
        envvar="WALLY_TEMPLATES",
        help="Templates directory (default: templates shipped with wally)",
    ),
) -> None:
    """List the components available to `wally add`."""
    console = Console()
    catalog = list_templates(templates)
    if not catalog:
        root = templates or get_templates_dir()
        console.print(f"[yellow]No templates found in {escape(str(root))}[/yellow]")
        raise typer.Exit(code=1)

    console.print("\n[blue]Available components:[/blue]")
    render_catalog(catalog, console)
