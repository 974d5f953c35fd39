# geofeed_tools/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Optional

from geofeed_tools.errors import CloseError


@dataclass(frozen=True)
class Country:
    name: str   # "United States"
    code: str   # ISO 3166-1 alpha-2, "US"

    @classmethod
    def from_mapping(cls, item: Mapping[str, Any]) -> "Country":
        return cls(name=_required_str(item, "name"), code=_required_str(item, "code"))


@dataclass(frozen=True)
class Subdivision:
    name: str   # "California"
    code: str   # full ISO 3166-2 code, "US-CA"

    @classmethod
    def from_mapping(cls, item: Mapping[str, Any]) -> "Subdivision":
        return cls(name=_required_str(item, "name"), code=_required_str(item, "code"))


def _required_str(item: Mapping[str, Any], key: str) -> str:
    if not isinstance(item, Mapping):
        raise ValueError(f"expected an object with '{key}', got {type(item).__name__}")
    value = item.get(key)
    if not isinstance(value, str):
        raise ValueError(f"missing or non-string '{key}' in {dict(item)!r}")
    return value


class DiagnosticKind(str, Enum):
    GEOFEED_FORMAT = "geofeed_format"
    PREFIX_FORMAT = "prefix_format"
    COUNTRY_CODE = "country_code"
    NO_SUBDIVISIONS = "no_subdivisions"
    SUBDIVISION_CODE = "subdivision_code"


@dataclass(frozen=True)
class Diagnostic:
    """One defect found on one line of a geofeed file."""

    line_number: int
    kind: DiagnosticKind
    prefix: Optional[str] = None
    country_code: Optional[str] = None
    subdivision_code: Optional[str] = None

    @property
    def message(self) -> str:
        if self.kind is DiagnosticKind.GEOFEED_FORMAT:
            return "invalid geofeed format"
        if self.kind is DiagnosticKind.PREFIX_FORMAT:
            return f"invalid prefix format ({self.prefix})"
        if self.kind is DiagnosticKind.COUNTRY_CODE:
            return f"invalid country code ({self.country_code})"
        if self.kind is DiagnosticKind.NO_SUBDIVISIONS:
            return f"no subdivisions found for country ({self.country_code})"
        return (
            f"invalid subdivision code ({self.subdivision_code}) "
            f"for country ({self.country_code})"
        )

    def __str__(self) -> str:
        return f"Line {self.line_number}: {self.message}"


@dataclass
class ValidationResult:
    path: Path
    diagnostics: list[Diagnostic] = field(default_factory=list)
    lines_read: int = 0
    close_error: Optional[CloseError] = None

    @property
    def valid(self) -> bool:
        """True if no line produced a diagnostic (a close failure does not count)."""
        return len(self.diagnostics) == 0
