"""cargo-cli exception classes."""

from pathlib import Path

__all__ = [
    "CargoCliError",
    "DelegateError",
    "DelegateExecutableNotFoundError",
    "InvalidConfigError",
    "ManifestError",
    "TemplateConflictError",
    "TemplateIOError",
]


class CargoCliError(Exception):
    """Base exception for cargo-cli related errors.

    Attributes:
        stage: The step of project generation that raised the error.
    """

    stage: str = "project generation"
    exit_code: int = 1


class InvalidConfigError(CargoCliError, ValueError):
    """Raised when invocation options are missing, unknown or conflicting."""

    stage = "validation"
    exit_code = 2

    def __init__(self, param: str, message: str) -> None:
        """Initialize the exception.

        Args:
            param: The name of the offending option.
            message: A description of what is wrong with it.
        """
        super().__init__(message)
        self.param = param


class DelegateError(CargoCliError):
    """Raised when the project creation command exits with a non-zero status."""

    stage = "delegation"

    def __init__(self, command: list[str], return_code: int) -> None:
        super().__init__(f"Command {' '.join(command)!r} failed with return code {return_code}.")
        self.command = command
        self.return_code = return_code

    @property
    def exit_code(self) -> int:  # type: ignore[override]
        # Negative codes mean the child was killed by a signal.
        return self.return_code if self.return_code > 0 else 1


class DelegateExecutableNotFoundError(CargoCliError):
    """Raised when the project creation executable is not found or cannot be started."""

    stage = "delegation"

    def __init__(self, executable: str, reason: "str | None" = None) -> None:
        if reason is None:
            super().__init__(f"Executable {executable!r} not found.")
        else:
            super().__init__(f"Executable {executable!r} could not be run: {reason}")
        self.executable = executable


class TemplateConflictError(CargoCliError):
    """Raised when a generated file would overwrite an existing one."""

    stage = "template emission"

    def __init__(self, path: Path) -> None:
        super().__init__(f"Refusing to overwrite existing file {str(path)!r}.")
        self.path = path


class TemplateIOError(CargoCliError):
    """Raised when a generated file cannot be written."""

    stage = "template emission"

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Unable to write {str(path)!r}: {reason}")
        self.path = path


class ManifestError(CargoCliError):
    """Raised when the generated ``Cargo.toml`` cannot be read or updated."""

    stage = "manifest update"

    def __init__(self, manifest_path: Path, reason: str) -> None:
        super().__init__(f"Cargo manifest at {str(manifest_path)!r} could not be updated: {reason}")
        self.manifest_path = manifest_path
