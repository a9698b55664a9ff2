"""Constants shared by the configuration modules."""

__all__ = (
    "CARGO_ENV_VAR",
    "COLOR_ENV_VAR",
    "DEFAULT_LOGGER_NAME",
    "TRACE",
)

CARGO_ENV_VAR = "CARGO"
"""Set by cargo to its own executable when dispatching an external subcommand."""
COLOR_ENV_VAR = "CARGO_TERM_COLOR"
DEFAULT_LOGGER_NAME = "cargo_cli"

TRACE = 5
