"""Models for generated component files and the template catalog."""

from __future__ import annotations

from pydantic import BaseModel


class ComponentFile(BaseModel):
    """One file of a component's output set."""

    model_config = {"frozen": True}

    name: str
    content: str
    description: str


class TemplateInfo(BaseModel):
    """A template directory as listed by ``wally list``.

    ``ready`` is True when the template ships its behavior file
    (``<name>.component.ts``); other templates are still in development.
    """

    name: str
    description: str = ""
    files: list[str] = []
    ready: bool = False
