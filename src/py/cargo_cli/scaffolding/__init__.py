"""Project scaffolding module for cargo-cli.

This module renders the boilerplate for the ``cargo cli`` command into a
project created by ``cargo new --bin``.

Supported argument parsers:
- clap (arguments declared as flags)
- docopt (arguments parsed from a usage string)
"""

from cargo_cli.scaffolding.generator import TemplateContext, generate_project
from cargo_cli.scaffolding.manifest import update_manifest
from cargo_cli.scaffolding.templates import ParserTemplate, get_available_templates, get_template

__all__ = [
    "ParserTemplate",
    "TemplateContext",
    "generate_project",
    "get_available_templates",
    "get_template",
    "update_manifest",
]
