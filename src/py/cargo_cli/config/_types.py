"""Closed option sets accepted on the command line."""

import logging
from enum import Enum, IntEnum

from cargo_cli.config._constants import TRACE

__all__ = ("ArgParser", "ColorMode", "OutputLevel", "Vcs")


class ArgParser(str, Enum):
    """Argument parser used by the generated binary."""

    CLAP = "clap"
    DOCOPT = "docopt"


class Vcs(str, Enum):
    """Version control systems ``cargo new`` can initialize."""

    GIT = "git"
    HG = "hg"
    PIJUL = "pijul"
    FOSSIL = "fossil"
    NONE = "none"


class ColorMode(str, Enum):
    """Terminal colouring modes."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class OutputLevel(IntEnum):
    """How much status output is printed, aligned with :mod:`logging` levels."""

    TRACE = TRACE
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
