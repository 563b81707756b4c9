"""Component scaffolding: template loading, synthesis and file writing."""

from wally.scaffold.loader import list_templates, load_template
from wally.scaffold.names import validate_component_name
from wally.scaffold.synth import synthesize
from wally.scaffold.writer import write_files

__all__ = [
    "list_templates",
    "load_template",
    "synthesize",
    "validate_component_name",
    "write_files",
]
