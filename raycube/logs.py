"""Coloured console logging."""

from __future__ import annotations

import sys
from enum import Enum

LOG_PREFIX = "raycube"

_RESET = "\033[0m"
_BRIGHT_BLACK = "\033[1;90m"
_MAGENTA = "\033[1;35m"
_CYAN = "\033[1;36m"
_BLUE = "\033[1;34m"
_YELLOW = "\033[1;33m"
_RED = "\033[1;31m"
_WHITE = "\033[0;37m"


class LogLevel(Enum):
    """Severity of a log message, with its label and colour."""

    INFO = ("Info", _CYAN)
    DEBUG = ("Debug", _BLUE)
    WARNING = ("Warning", _YELLOW)
    ERROR = ("Error", _RED)

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def colour(self) -> str:
        return self.value[1]


def _tag(text: str, colour: str) -> str:
    return f"{_BRIGHT_BLACK}[{colour}{text}{_BRIGHT_BLACK}]{_RESET} "


def log(level: LogLevel, message: str) -> None:
    """Write ``message`` to standard output with the prefix and level tags."""
    line = (
        _tag(LOG_PREFIX, _MAGENTA)
        + _tag(level.label, level.colour)
        + f"{_WHITE}{message}\n"
    )
    sys.stdout.write(line)
    sys.stdout.flush()


def info(message: str) -> None:
    """Log an informational message."""
    log(LogLevel.INFO, message)


def debug(message: str) -> None:
    """Log a debugging message."""
    log(LogLevel.DEBUG, message)


def warning(message: str) -> None:
    """Log a warning."""
    log(LogLevel.WARNING, message)


def error(message: str) -> None:
    """Log an error."""
    log(LogLevel.ERROR, message)