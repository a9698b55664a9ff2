"""Project creation executors.

This module provides executor classes that create the base project skeleton
(manifest, source directory and version control) before any templates are
written. ``CargoExecutor`` wraps ``cargo new --bin``.
"""

import logging
import shlex
import shutil
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from cargo_cli.config import DEFAULT_LOGGER_NAME, TRACE, resolve_cargo_executable
from cargo_cli.exceptions import DelegateError, DelegateExecutableNotFoundError

if TYPE_CHECKING:
    from cargo_cli.config import InvocationConfig

__all__ = ("CargoExecutor", "ProjectExecutor", "build_cargo_new_args")

logger = logging.getLogger(DEFAULT_LOGGER_NAME)


def build_cargo_new_args(config: "InvocationConfig") -> list[str]:
    """Translate an invocation into ``cargo new`` arguments.

    Args:
        config: The validated invocation.

    Returns:
        The arguments following the executable, ending with the target path.
    """
    args = ["new", "--bin"]
    if config.frozen:
        args.append("--frozen")
    if config.locked:
        args.append("--locked")

    if config.quiet:
        args.append("--quiet")
    elif config.verbosity == 1:
        args.append("-v")
    elif config.verbosity > 1:
        args.append("-vv")

    args.extend(["--color", config.color.value, "--vcs", config.vcs.value])  # type: ignore[union-attr]
    if config.name is not None:
        args.extend(["--name", config.name])
    args.append(str(config.path))
    return args


class ProjectExecutor(ABC):
    """Abstract base class for project creation executors."""

    bin_name: ClassVar[str]

    def __init__(self, executable_path: "Path | str | None" = None) -> None:
        self.executable_path = executable_path

    @abstractmethod
    def command_args(self, config: "InvocationConfig") -> list[str]:
        """Build the arguments passed to the executable."""

    @abstractmethod
    def create(self, config: "InvocationConfig") -> None:
        """Create the base project and wait for it to finish."""

    def _resolve_executable(self) -> str:
        if self.executable_path:
            return str(self.executable_path)
        path = shutil.which(self.bin_name)
        if path is None:
            raise DelegateExecutableNotFoundError(self.bin_name)
        return path

    def command(self, config: "InvocationConfig") -> list[str]:
        """Get the full command line for ``config``, executable included."""
        return [self._resolve_executable(), *self.command_args(config)]


class CargoExecutor(ProjectExecutor):
    """Runs ``cargo new --bin``.

    Output from cargo goes straight to this process's stdout and stderr.
    """

    bin_name = "cargo"

    def __init__(self, executable_path: "Path | str | None" = None) -> None:
        super().__init__(executable_path or resolve_cargo_executable())

    def command_args(self, config: "InvocationConfig") -> list[str]:
        return build_cargo_new_args(config)

    def create(self, config: "InvocationConfig") -> None:
        command = self.command(config)
        logger.debug("Running %s", shlex.join(command))
        try:
            process = subprocess.run(
                command,
                check=False,
                stdout=None,  # inherit for live output
                stderr=None,
            )
        except OSError as e:
            raise DelegateExecutableNotFoundError(command[0], e.strerror or str(e)) from e
        logger.log(TRACE, "%s exited with %s", self.bin_name, process.returncode)
        if process.returncode != 0:
            raise DelegateError(command, process.returncode)
