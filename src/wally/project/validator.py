"""Check that a directory is the root of an Angular project."""

from __future__ import annotations

from pathlib import Path

from wally.errors import ParseError
from wally.models.config import Detection
from wally.project.manifest import (
    ANGULAR_CORE,
    ANGULAR_JSON,
    PACKAGE_JSON,
    dependency_version,
    read_json,
)


def check_project(root: Path | None = None) -> Detection:
    """Decide whether root (default: cwd) is an Angular project.

    Requires both angular.json and package.json, and @angular/core declared
    under dependencies or devDependencies. Never raises: a malformed
    package.json yields ``False`` with a diagnostic.
    """
    root = root or Path.cwd()
    try:
        for marker in (ANGULAR_JSON, PACKAGE_JSON):
            if not (root / marker).is_file():
                return Detection(value=False)
        manifest = read_json(root / PACKAGE_JSON)
    except (OSError, ParseError) as exc:
        return Detection(value=False, diagnostic=str(exc))

    return Detection(value=dependency_version(manifest, ANGULAR_CORE) is not None)


def is_valid_project(root: Path | None = None) -> bool:
    """Boolean shorthand for check_project."""
    return check_project(root).value
