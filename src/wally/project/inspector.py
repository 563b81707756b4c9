"""Detect the conventions an Angular project follows.

Three signals are probed independently so a broken package.json does not
hide a standalone bootstrap or a Tailwind config:

- standalone: src/main.ts calls bootstrapApplication
- tailwind: a Tailwind or PostCSS config file sits in the project root
- signals: @angular/core major version is 17 or newer
"""

from __future__ import annotations

import re
from pathlib import Path

from wally.errors import ParseError
from wally.models.config import Detection, ProjectConfig, ProjectInspection
from wally.project.manifest import ANGULAR_CORE, PACKAGE_JSON, dependency_version, read_json

MAIN_TS = Path("src") / "main.ts"
STANDALONE_MARKER = "bootstrapApplication"
TAILWIND_CONFIGS: tuple[str, ...] = (
    "tailwind.config.js",
    "tailwind.config.ts",
    "postcss.config.mjs",
)
SIGNALS_MIN_MAJOR = 17

_LEADING_DIGITS = re.compile(r"\d+")


def _detect_standalone(root: Path) -> Detection:
    main_ts = root / MAIN_TS
    try:
        if not main_ts.is_file():
            return Detection(value=False)
        content = main_ts.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return Detection(value=False, diagnostic=f"{MAIN_TS}: {exc}")
    return Detection(value=STANDALONE_MARKER in content)


def _detect_tailwind(root: Path) -> Detection:
    try:
        found = any((root / name).exists() for name in TAILWIND_CONFIGS)
    except OSError as exc:
        return Detection(value=False, diagnostic=str(exc))
    return Detection(value=found)


def parse_major_version(spec: str) -> int | None:
    """Extract the major version from an npm version range.

    Only the leading token is considered; characters before its first digit
    (``^``, ``~``, ``>=``, ``v``) are dropped. Returns None when the token
    carries no digits, e.g. ``latest`` or ``*``.

    >>> parse_major_version("^17.0.0")
    17
    >>> parse_major_version(">=16.2 <18")
    16
    """
    tokens = spec.split()
    if not tokens:
        return None
    match = _LEADING_DIGITS.search(tokens[0])
    if match is None:
        return None
    return int(match.group())


def _detect_signals(root: Path) -> Detection:
    try:
        manifest = read_json(root / PACKAGE_JSON)
    except ParseError as exc:
        return Detection(value=False, diagnostic=str(exc))

    version = dependency_version(manifest, ANGULAR_CORE)
    if version is None:
        return Detection(value=False)
    major = parse_major_version(version)
    if major is None:
        return Detection(
            value=False,
            diagnostic=f"cannot read a major version from {ANGULAR_CORE} '{version}'",
        )
    return Detection(value=major >= SIGNALS_MIN_MAJOR)


def inspect_project(root: Path | None = None) -> ProjectInspection:
    """Probe root (default: cwd) for each convention. Never raises."""
    root = root or Path.cwd()
    return ProjectInspection(
        standalone=_detect_standalone(root),
        tailwind=_detect_tailwind(root),
        signals=_detect_signals(root),
    )


def detect_config(root: Path | None = None) -> ProjectConfig:
    """Return the feature flags for root; all False in the worst case."""
    return inspect_project(root).config
