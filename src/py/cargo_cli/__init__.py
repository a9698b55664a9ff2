"""cargo-cli: create Rust command line applications.

``cargo cli <path>`` runs ``cargo new --bin`` and adds boilerplate for either
the clap or the docopt argument parser, plus error-chain based error handling.

Programmatic usage:
    from cargo_cli import CargoExecutor, InvocationConfig, StatusReporter, create_cli_project

    config = InvocationConfig(path="flambe", arg_parser="docopt", vcs="none")
    create_cli_project(config, CargoExecutor(), StatusReporter(level=config.output_level))
"""

from cargo_cli.commands import create_cli_project
from cargo_cli.config import ArgParser, ColorMode, InvocationConfig, OutputLevel, Vcs
from cargo_cli.executor import CargoExecutor, ProjectExecutor
from cargo_cli.output import StatusReporter

__all__ = (
    "ArgParser",
    "CargoExecutor",
    "ColorMode",
    "InvocationConfig",
    "OutputLevel",
    "ProjectExecutor",
    "StatusReporter",
    "Vcs",
    "create_cli_project",
)
