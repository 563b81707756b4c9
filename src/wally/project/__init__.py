"""Angular project inspection: validation, feature detection and paths."""

from wally.project.inspector import detect_config, inspect_project
from wally.project.paths import resolve_components_path
from wally.project.validator import check_project, is_valid_project

__all__ = [
    "check_project",
    "detect_config",
    "inspect_project",
    "is_valid_project",
    "resolve_components_path",
]
