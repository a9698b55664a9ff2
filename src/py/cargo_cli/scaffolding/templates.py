"""Argument parser template definitions for scaffolding.

This module defines the available argument parser variants and the crates
each one adds to the generated ``Cargo.toml``.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from cargo_cli.config import ArgParser

__all__ = ("PARSER_TEMPLATES", "ParserTemplate", "get_available_templates", "get_template")


def _str_dict_factory() -> dict[str, str]:
    return {}


_DictStrStrFactory: Callable[[], dict[str, str]] = _str_dict_factory

ERROR_CHAIN_DEPENDENCY = '"0.12"'


@dataclass
class ParserTemplate:
    """Configuration for an argument parser template.

    Attributes:
        name: Display name for the template
        type: Argument parser enum
        description: One-line summary written into the generated README
        crate: Name of the parser crate referenced by ``main.rs``
        dependencies: Crate name to TOML value, added to ``[dependencies]``
        files: Files generated for this variant, relative to the project root
    """

    name: str
    type: ArgParser
    description: str
    crate: str
    dependencies: dict[str, str] = field(default_factory=_DictStrStrFactory)
    files: tuple[str, ...] = ("src/error.rs", "src/main.rs", "src/run.rs")


PARSER_TEMPLATES: dict[ArgParser, ParserTemplate] = {
    ArgParser.CLAP: ParserTemplate(
        name="clap",
        type=ArgParser.CLAP,
        description="Arguments declared as flags with the clap builder API",
        crate="clap",
        dependencies={
            "clap": '"4"',
            "error-chain": ERROR_CHAIN_DEPENDENCY,
        },
    ),
    ArgParser.DOCOPT: ParserTemplate(
        name="docopt",
        type=ArgParser.DOCOPT,
        description="Arguments parsed from a docopt usage string",
        crate="docopt",
        dependencies={
            "docopt": '"1"',
            "error-chain": ERROR_CHAIN_DEPENDENCY,
            "serde": '{ version = "1", features = ["derive"] }',
        },
    ),
}


def get_available_templates() -> list[ParserTemplate]:
    """Get all available argument parser templates.

    Returns:
        List of available ParserTemplate instances.
    """
    return list(PARSER_TEMPLATES.values())


def get_template(parser_type: "ArgParser | str") -> "ParserTemplate | None":
    """Get a specific argument parser template.

    Args:
        parser_type: The argument parser (enum or string).

    Returns:
        The ParserTemplate if found, None otherwise.
    """
    if isinstance(parser_type, ArgParser):
        return PARSER_TEMPLATES.get(parser_type)
    try:
        return PARSER_TEMPLATES.get(ArgParser(parser_type))
    except ValueError:
        return None
