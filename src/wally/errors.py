"""Exception hierarchy for wally.

Inspector, validator and path resolver catch ParseError internally and
degrade to defaults. Loader and writer errors propagate to the command
handler, which reports them and exits non-zero.
"""

from __future__ import annotations

from pathlib import Path


class WallyError(Exception):
    """Base class for all wally errors."""


class ValidationError(WallyError):
    """Raised for an invalid component name or a non-Angular project."""


class NotFoundError(WallyError):
    """Raised when no template directory exists for a component."""

    def __init__(self, name: str, path: Path) -> None:
        self.name = name
        self.path = path
        super().__init__(f'Template for component "{name}" not found')


class EmptyTemplateError(WallyError):
    """Raised when a template directory holds none of the expected files."""

    def __init__(self, name: str, path: Path) -> None:
        self.name = name
        self.path = path
        super().__init__(f'No valid files found in template "{name}"')


class ParseError(WallyError):
    """Raised when a manifest, descriptor or settings file is malformed.

    Attributes:
        path: File that failed to parse.
        message: Description of the failure.
    """

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{path.name}: {message}")


class WriteError(WallyError):
    """Raised when the destination directory or a file cannot be written.

    Attributes:
        path: Path that failed.
        written: Files written before the failure. They are left in place.
    """

    def __init__(self, path: Path, reason: str, written: list[Path]) -> None:
        self.path = path
        self.written = written
        super().__init__(f"Could not write {path}: {reason}")
