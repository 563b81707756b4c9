"""Wally data models - re-exports all public model classes."""

from wally.models.component import ComponentFile, TemplateInfo
from wally.models.config import (
    Detection,
    ProjectConfig,
    ProjectInspection,
    WallySettings,
    load_settings,
)

__all__ = [
    "ComponentFile",
    "Detection",
    "ProjectConfig",
    "ProjectInspection",
    "TemplateInfo",
    "WallySettings",
    "load_settings",
]
