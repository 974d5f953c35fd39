# geofeed_tools/errors.py

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class GeofeedToolsError(Exception):
    """Base class for errors that stop a validation run."""


class LoadError(GeofeedToolsError):
    """Reference data is missing or malformed."""

    def __init__(self, dataset: str, source: str, reason: str):
        super().__init__(f"{source}: {reason}")
        self.dataset = dataset  # "countries" or "subdivisions"
        self.source = source
        self.reason = reason


class OpenError(GeofeedToolsError):
    """The geofeed file could not be opened for reading."""

    def __init__(self, path: Union[str, Path], reason: Optional[str] = None):
        self.path = Path(path)
        message = f"open {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CloseError(GeofeedToolsError):
    """
    Releasing the geofeed file failed after reading.

    Not fatal: it is attached to the ValidationResult instead of raised.
    """

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        super().__init__(f"close {path}: {reason}")
