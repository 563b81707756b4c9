"""Write a component's files into the project."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from wally.errors import WriteError
from wally.models.component import ComponentFile

console = Console()


def write_files(base_path: Path, files: list[ComponentFile]) -> list[Path]:
    """Create base_path (with parents) and write each file into it.

    Existing files are overwritten without prompting. Writing stops at the
    first failure; files already written stay on disk.

    Args:
        base_path: Destination directory for the component.
        files: Files to write, named relative to base_path.

    Returns:
        Paths written, in order.

    Raises:
        WriteError: If the directory or any file cannot be written.
    """
    console.print(f"\n[blue]Creating {len(files)} files...[/blue]")

    try:
        base_path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteError(base_path, exc.strerror or str(exc), []) from exc

    written: list[Path] = []
    for component_file in files:
        target = base_path / component_file.name
        try:
            target.write_bytes(component_file.content.encode("utf-8"))
        except OSError as exc:
            raise WriteError(target, exc.strerror or str(exc), written) from exc
        written.append(target)
        console.print(f"  [green]✓[/green] {escape(component_file.name)}")

    return written
