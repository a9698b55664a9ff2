"""Configuration for cargo-cli.

``InvocationConfig`` is built once per run from the command line and passed
explicitly to the delegate executor and the template generator.
"""

from cargo_cli.config._constants import CARGO_ENV_VAR, COLOR_ENV_VAR, DEFAULT_LOGGER_NAME, TRACE
from cargo_cli.config._invocation import InvocationConfig
from cargo_cli.config._runtime import resolve_cargo_executable
from cargo_cli.config._types import ArgParser, ColorMode, OutputLevel, Vcs

__all__ = (
    "CARGO_ENV_VAR",
    "COLOR_ENV_VAR",
    "DEFAULT_LOGGER_NAME",
    "TRACE",
    "ArgParser",
    "ColorMode",
    "InvocationConfig",
    "OutputLevel",
    "Vcs",
    "resolve_cargo_executable",
)
