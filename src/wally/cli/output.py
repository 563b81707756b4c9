"""Rich terminal output for wally commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich import box
from rich.markup import escape
from rich.table import Table

from wally.scaffold.names import class_name, selector

if TYPE_CHECKING:
    from rich.console import Console

    from wally.models.component import TemplateInfo
    from wally.models.config import Detection, ProjectInspection


def _detection_cell(detection: Detection) -> str:
    if detection.diagnostic is not None:
        return f"[yellow]? unknown[/yellow] [dim]({escape(detection.diagnostic)})[/dim]"
    if detection.value:
        return "[green]✓ yes[/green]"
    return "[dim]✗ no[/dim]"


def render_inspection(inspection: ProjectInspection, console: Console) -> None:
    """Render detected project conventions as a key-value table."""
    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column("Feature", style="bold")
    table.add_column("Detected")

    table.add_row("Standalone components", _detection_cell(inspection.standalone))
    table.add_row("Tailwind CSS", _detection_cell(inspection.tailwind))
    table.add_row("Angular Signals (v17+)", _detection_cell(inspection.signals))

    console.print(table)


def render_catalog(catalog: list[TemplateInfo], console: Console) -> None:
    """Render the template catalog, marking templates still in development."""
    table = Table(box=box.SIMPLE, padding=(0, 2))
    table.add_column("Component", style="bold")
    table.add_column("Status")
    table.add_column("Description")

    for info in catalog:
        status = "[green]✓ ready[/green]" if info.ready else "[yellow]⚠ in development[/yellow]"
        table.add_row(escape(info.name), status, escape(info.description))

    console.print(table)


def render_next_steps(name: str, console: Console) -> None:
    """Tell the user how to wire the new component into their app."""
    tag = selector(name)
    console.print("\n[blue]Next steps:[/blue]")
    console.print(f"[dim]1. Import {escape(class_name(name))}[/dim]")
    console.print("[dim]2. Add it to the imports of your module or component[/dim]")
    console.print(f"[dim]3. Use <{escape(tag)}></{escape(tag)}>[/dim]")
