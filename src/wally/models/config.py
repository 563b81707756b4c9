"""Configuration models for wally.

ProjectConfig holds the feature flags detected from an Angular project.
WallySettings captures the optional wally.yaml file a project may ship
to override where templates come from and where components go.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from wally.errors import ParseError

SETTINGS_FILE = "wally.yaml"


class ProjectConfig(BaseModel):
    """Feature flags that shape synthesized component files."""

    model_config = {"frozen": True, "extra": "forbid"}

    use_standalone: bool = False
    use_tailwind: bool = False
    use_signals: bool = False


class Detection(BaseModel):
    """Outcome of a single project probe.

    ``value`` is the boolean answer. ``diagnostic`` is set only when the
    probe could not be determined (unreadable or malformed input), in which
    case ``value`` is the safe default ``False``.
    """

    model_config = {"frozen": True}

    value: bool = False
    diagnostic: str | None = None

    @property
    def determined(self) -> bool:
        return self.diagnostic is None


class ProjectInspection(BaseModel):
    """Per-signal detections gathered by the project inspector."""

    model_config = {"frozen": True}

    standalone: Detection = Field(default_factory=Detection)
    tailwind: Detection = Field(default_factory=Detection)
    signals: Detection = Field(default_factory=Detection)

    @property
    def config(self) -> ProjectConfig:
        return ProjectConfig(
            use_standalone=self.standalone.value,
            use_tailwind=self.tailwind.value,
            use_signals=self.signals.value,
        )


class WallySettings(BaseModel):
    """Project-level settings loaded from wally.yaml."""

    model_config = {"extra": "forbid"}

    templates_dir: str | None = None
    components_path: str | None = None


def load_settings(project_root: Path | None = None) -> WallySettings:
    """Load WallySettings from wally.yaml. Returns defaults if not found.

    Args:
        project_root: Directory holding wally.yaml. Defaults to cwd.

    Returns:
        Validated WallySettings instance.

    Raises:
        ParseError: If the file is not valid YAML or does not match the schema.
    """
    import yaml

    settings_path = (project_root or Path.cwd()) / SETTINGS_FILE
    if not settings_path.exists():
        return WallySettings()

    try:
        raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ParseError(settings_path, f"cannot read file ({exc})") from exc
    except yaml.YAMLError as exc:
        raise ParseError(settings_path, f"invalid YAML ({exc})") from exc
    if raw is None:
        return WallySettings()
    try:
        return WallySettings.model_validate(raw)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(p) for p in first["loc"]) or "<root>"
        raise ParseError(settings_path, f"{field}: {first['msg']}") from exc
