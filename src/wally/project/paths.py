"""Resolve where generated components are written inside a project."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from wally.errors import ParseError
from wally.project.manifest import ANGULAR_JSON, read_json

DEFAULT_SOURCE_ROOT = "src"
DEFAULT_COMPONENTS_PATH = Path("src") / "app" / "components"


def _first_source_root(descriptor: dict[str, Any]) -> str:
    """Return the sourceRoot of the first declared project, or ``src``."""
    projects = descriptor.get("projects")
    if not isinstance(projects, dict) or not projects:
        raise ParseError(Path(ANGULAR_JSON), "no projects declared")
    project_name = next(iter(projects))
    project = projects[project_name]
    if isinstance(project, dict):
        source_root = project.get("sourceRoot")
        if isinstance(source_root, str) and source_root:
            return source_root
    return DEFAULT_SOURCE_ROOT


def candidate_paths(source_root: str) -> list[Path]:
    """Destination candidates in order of preference."""
    base = Path(source_root) / "app"
    return [
        base / "components",
        base / "shared" / "components",
        base,
    ]


def resolve_components_path(root: Path | None = None) -> Path:
    """Pick the components directory for root (default: cwd).

    Returns the first existing candidate under the first project's
    sourceRoot, or the first candidate when none exist yet; the caller
    creates it. Falls back to ``src/app/components`` when angular.json is
    missing or malformed. The returned path is relative to root.
    """
    root = root or Path.cwd()
    try:
        source_root = _first_source_root(read_json(root / ANGULAR_JSON))
    except ParseError:
        return DEFAULT_COMPONENTS_PATH

    candidates = candidate_paths(source_root)
    try:
        for candidate in candidates:
            if (root / candidate).exists():
                return candidate
    except OSError:
        pass
    return candidates[0]
