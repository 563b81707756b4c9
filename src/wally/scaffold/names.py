"""Component name validation and derived Angular identifiers."""

from __future__ import annotations

import re

from wally.errors import ValidationError

# Angular CLI style kebab-case: "button", "date-picker", "step2".
_COMPONENT_NAME = re.compile(r"^[a-z][a-z0-9]*(-[a-z0-9]+)*$")
_SEPARATORS = re.compile(r"[-_\s]+")


def validate_component_name(name: str) -> str:
    """Return name unchanged if it is a usable component name.

    Raises:
        ValidationError: If name is empty or not lower kebab-case.
    """
    if not name:
        raise ValidationError("Specify the component name (e.g. wally add button)")
    if not _COMPONENT_NAME.match(name):
        raise ValidationError(
            f"Invalid component name '{name}'. "
            "Use lowercase letters, digits and hyphens, starting with a letter "
            "(e.g. 'button', 'date-picker')."
        )
    return name


def pascal_case(name: str) -> str:
    """Convert a component name to PascalCase: ``date-picker`` -> ``DatePicker``."""
    return "".join(part[:1].upper() + part[1:] for part in _SEPARATORS.split(name))


def class_name(name: str) -> str:
    return f"{pascal_case(name)}Component"


def selector(name: str) -> str:
    return f"app-{name}"
