"""Readers for the Angular project's JSON descriptor files.

package.json is the manifest (dependency groupings) and angular.json is
the workspace descriptor (named projects with their sourceRoot).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from wally.errors import ParseError

PACKAGE_JSON = "package.json"
ANGULAR_JSON = "angular.json"
ANGULAR_CORE = "@angular/core"

# Dependency groupings searched for a package, in order.
DEPENDENCY_GROUPS: tuple[str, ...] = ("dependencies", "devDependencies")


def read_json(path: Path) -> dict[str, Any]:
    """Parse a JSON object from path.

    Raises:
        ParseError: If the file cannot be read, is not JSON, or is not an object.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ParseError(path, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise ParseError(path, f"not valid UTF-8 (byte {exc.start})") from exc
    except json.JSONDecodeError as exc:
        raise ParseError(path, f"invalid JSON at line {exc.lineno}: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise ParseError(path, "expected a JSON object at top level")
    return data


def dependency_version(manifest: dict[str, Any], package: str) -> str | None:
    """Return the declared version of package, or None if not declared.

    Groupings are searched in DEPENDENCY_GROUPS order; groupings that are
    not mappings are ignored. A null, false or empty version counts as undeclared.
    """
    for group in DEPENDENCY_GROUPS:
        deps = manifest.get(group)
        if not isinstance(deps, dict):
            continue
        version = deps.get(package)
        if version and str(version).strip():
            return str(version)
    return None
