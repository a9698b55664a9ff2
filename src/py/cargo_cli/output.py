"""Terminal status output in cargo's style.

Status lines are printed as a right-aligned, bold green verb followed by a
message, e.g. ``     Created binary cli (application) `demo` project``.
"""

import logging
from dataclasses import dataclass, field

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from cargo_cli.config import DEFAULT_LOGGER_NAME, ColorMode, OutputLevel

__all__ = ("StatusReporter", "configure_logging", "make_console")

_VERB_WIDTH = 12


def make_console(color: ColorMode = ColorMode.AUTO, *, stderr: bool = False) -> Console:
    """Create a console honouring the ``--color`` option.

    Args:
        color: The requested colouring mode.
        stderr: Write to standard error instead of standard output.

    Returns:
        A configured console.
    """
    match color:
        case ColorMode.ALWAYS:
            return Console(stderr=stderr, force_terminal=True, soft_wrap=True, highlight=False)
        case ColorMode.NEVER:
            return Console(stderr=stderr, no_color=True, soft_wrap=True, highlight=False)
        case _:
            return Console(stderr=stderr, soft_wrap=True, highlight=False)


def configure_logging(level: OutputLevel, console: Console) -> logging.Logger:
    """Route the ``cargo_cli`` logger to ``console`` at ``level``.

    Args:
        level: Minimum level to emit.
        console: The (stderr) console the handler writes to.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    logger.setLevel(int(level))
    for handler in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(handler)
    logger.addHandler(RichHandler(console=console, show_time=False, show_path=False, markup=False))
    logger.propagate = False
    return logger


@dataclass
class StatusReporter:
    """Prints progress and the final outcome of a run."""

    level: OutputLevel = OutputLevel.INFO
    color: ColorMode = ColorMode.AUTO
    console: Console = field(init=False)
    err_console: Console = field(init=False)

    def __post_init__(self) -> None:
        self.console = make_console(self.color)
        self.err_console = make_console(self.color, stderr=True)

    def status(self, verb: str, message: str, *, style: str = "bold green", stderr: bool = False) -> None:
        console = self.err_console if stderr else self.console
        console.print(f"[{style}]{verb:>{_VERB_WIDTH}}[/] {escape(message)}")

    def debug(self, verb: str, message: str) -> None:
        if self.level <= OutputLevel.DEBUG:
            self.status(verb, message)

    def info(self, verb: str, message: str) -> None:
        if self.level <= OutputLevel.INFO:
            self.status(verb, message)

    def warn(self, verb: str, message: str) -> None:
        if self.level <= OutputLevel.WARN:
            self.status(verb, message, style="bold yellow", stderr=True)

    def fail(self, error: Exception) -> None:
        """Print ``error`` with the stage it came from. Never suppressed by ``--quiet``."""
        stage = getattr(error, "stage", "project generation")
        self.err_console.print(f"[bold red]error[/]: {escape(stage)} failed: {escape(str(error))}")
