# geofeed_tools/utils/logging.py

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


class LevelColorFormatter(logging.Formatter):
    """Formatter that colors the level name when writing to a terminal."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True):
        super().__init__(fmt=_FORMAT, datefmt=_DATEFMT)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if not self.use_color:
            return text
        color = self.COLORS.get(record.levelname, "")
        if not color:
            return text
        return text.replace(record.levelname, f"{color}{record.levelname}{self.RESET}", 1)


def setup_logging(level: str = "WARNING", use_color: bool = True) -> None:
    """
    Configure the package logger to write to stderr.

    Stdout is reserved for the verdict, so log records never mix with it.
    Calling this more than once replaces the previous handler.
    """
    root = logging.getLogger("geofeed_tools")
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(LevelColorFormatter(use_color=use_color and sys.stderr.isatty()))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    root.propagate = False


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
