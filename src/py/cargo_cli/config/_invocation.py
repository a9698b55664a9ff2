"""The validated options for a single ``cargo cli`` run."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TypeVar

from cargo_cli.config._types import ArgParser, ColorMode, OutputLevel, Vcs
from cargo_cli.exceptions import InvalidConfigError

__all__ = ("InvocationConfig",)

_E = TypeVar("_E", bound=Enum)


def _coerce_choice(enum_type: "type[_E]", value: "_E | str", flag: str) -> "_E":
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError:
        accepted = ", ".join(member.value for member in enum_type)
        msg = f"Invalid value for {flag}: {value!r}. Expected one of: {accepted}"
        raise InvalidConfigError(flag, msg) from None


@dataclass(frozen=True)
class InvocationConfig:
    """Options for generating one CLI project.

    Attributes:
        path: Directory to create.
        arg_parser: Argument parser used by the generated code.
        vcs: Version control system to initialize.
        name: Package name override; defaults to the last component of ``path``.
        color: Terminal colouring mode.
        frozen: Forward ``--frozen`` to cargo.
        locked: Forward ``--locked`` to cargo.
        verbosity: Number of ``-v`` flags given.
        quiet: Suppress status output.
        readme: Generate a README.md.
    """

    path: "Path | str"
    arg_parser: "ArgParser | str" = ArgParser.CLAP
    vcs: "Vcs | str" = Vcs.GIT
    name: "str | None" = None
    color: "ColorMode | str" = ColorMode.AUTO
    frozen: bool = False
    locked: bool = False
    verbosity: int = 0
    quiet: bool = False
    readme: bool = True

    def __post_init__(self) -> None:
        if not str(self.path).strip():
            raise InvalidConfigError("path", "A non-empty <path> is required.")
        object.__setattr__(self, "path", Path(self.path))
        object.__setattr__(self, "arg_parser", _coerce_choice(ArgParser, self.arg_parser, "--arg_parser"))
        object.__setattr__(self, "vcs", _coerce_choice(Vcs, self.vcs, "--vcs"))
        object.__setattr__(self, "color", _coerce_choice(ColorMode, self.color, "--color"))
        if self.name is not None and not self.name.strip():
            raise InvalidConfigError("--name", "The package name cannot be blank.")
        if self.verbosity < 0:
            raise InvalidConfigError("--verbose", "Verbosity cannot be negative.")
        if self.quiet and self.verbosity > 0:
            raise InvalidConfigError("--quiet", "--quiet cannot be used together with --verbose.")

    @property
    def package_name(self) -> str:
        """The name of the generated package."""
        if self.name:
            return self.name
        return Path(self.path).resolve().name

    @property
    def output_level(self) -> OutputLevel:
        """The status output level implied by ``quiet`` and ``verbosity``."""
        if self.quiet:
            return OutputLevel.WARN
        match self.verbosity:
            case 0:
                return OutputLevel.INFO
            case 1:
                return OutputLevel.DEBUG
            case _:
                return OutputLevel.TRACE
