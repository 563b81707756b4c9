"""Load pre-authored component templates shipped with wally.

Each template is a directory under the templates root named after the
component. Its files are copied verbatim; no placeholder substitution
happens here.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from rich.console import Console
from rich.markup import escape

from wally.errors import EmptyTemplateError, NotFoundError
from wally.models.component import ComponentFile, TemplateInfo

console = Console()

# Optional per-template metadata file, read by list_templates only.
TEMPLATE_META = "template.yaml"


def get_templates_dir() -> Path:
    """Return the path to the templates directory within the package."""
    return Path(__file__).parent / "templates"


def expected_files(name: str) -> list[tuple[str, str]]:
    """(file name, description) pairs a template may provide, behavior first."""
    return [
        (f"{name}.component.ts", "TypeScript component"),
        (f"{name}.component.html", "HTML template"),
        (f"{name}.component.spec.ts", "Unit tests"),
    ]


def load_template(name: str, templates_dir: Path | None = None) -> list[ComponentFile]:
    """Read the files of template ``name``.

    Missing files are optional and skipped. A file that exists but cannot
    be read is reported and skipped.

    Args:
        name: Component name, also the template directory name.
        templates_dir: Templates root. Defaults to the packaged templates.

    Returns:
        The present files, in expected_files order. Never empty.

    Raises:
        NotFoundError: If the template directory does not exist.
        EmptyTemplateError: If none of the expected files could be read.
    """
    template_path = (templates_dir or get_templates_dir()) / name
    if not template_path.is_dir():
        raise NotFoundError(name, template_path)

    console.print(f"[blue]Loading template from {escape(str(template_path))}[/blue]")

    files: list[ComponentFile] = []
    for file_name, description in expected_files(name):
        file_path = template_path / file_name
        if not file_path.is_file():
            console.print(f"  [dim]- {escape(file_name)} not found (optional)[/dim]")
            continue
        try:
            content = file_path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            console.print(f"  [yellow]! Could not read {escape(file_name)}: {escape(str(exc))}[/yellow]")
            continue
        files.append(ComponentFile(name=file_name, content=content, description=description))
        console.print(f"  [green]✓[/green] {escape(file_name)} loaded")

    if not files:
        raise EmptyTemplateError(name, template_path)
    return files


def _read_description(template_path: Path) -> str:
    meta_path = template_path / TEMPLATE_META
    if not meta_path.is_file():
        return ""
    try:
        meta = yaml.safe_load(meta_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError):
        return ""
    if isinstance(meta, dict):
        return str(meta.get("description", ""))
    return ""


def list_templates(templates_dir: Path | None = None) -> list[TemplateInfo]:
    """Scan the templates root and describe each template, sorted by name.

    Returns an empty list when the templates root does not exist.
    """
    root = templates_dir or get_templates_dir()
    if not root.is_dir():
        return []

    catalog: list[TemplateInfo] = []
    for template_path in sorted(p for p in root.iterdir() if p.is_dir()):
        name = template_path.name
        present = [
            file_name
            for file_name, _ in expected_files(name)
            if (template_path / file_name).is_file()
        ]
        catalog.append(
            TemplateInfo(
                name=name,
                description=_read_description(template_path),
                files=present,
                ready=f"{name}.component.ts" in present,
            )
        )
    return catalog
