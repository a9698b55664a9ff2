"""Runtime settings read from the environment."""

import os

from cargo_cli.config._constants import CARGO_ENV_VAR

__all__ = ("resolve_cargo_executable",)


def resolve_cargo_executable() -> "str | None":
    """Resolve the cargo executable from the environment.

    Cargo exports ``CARGO`` when it runs an external subcommand, so ``cargo cli``
    reuses the same toolchain it was launched from.

    Returns:
        The executable path, or None when ``CARGO`` is unset or blank.
    """
    env_value = os.getenv(CARGO_ENV_VAR)
    if env_value is None or not env_value.strip():
        return None
    return env_value.strip()
