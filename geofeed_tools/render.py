# geofeed_tools/render.py

from __future__ import annotations

from geofeed_tools.models import Diagnostic, DiagnosticKind, ValidationResult

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"


def _paint(text: str, color: str, enabled: bool) -> str:
    if not enabled:
        return text
    return f"{color}{text}{RESET}"


def render_diagnostic(diagnostic: Diagnostic, color: bool = True) -> str:
    """
    Render "Line {n}: ..." with the checked field in magenta and the
    offending values in cyan.
    """
    kind = diagnostic.kind

    def value(text):
        return "(" + _paint(str(text), CYAN, color) + ")"

    if kind is DiagnosticKind.GEOFEED_FORMAT:
        body = f"invalid {_paint('geofeed', MAGENTA, color)} format"
    elif kind is DiagnosticKind.PREFIX_FORMAT:
        body = f"invalid {_paint('prefix', MAGENTA, color)} format {value(diagnostic.prefix)}"
    elif kind is DiagnosticKind.COUNTRY_CODE:
        body = f"invalid {_paint('country code', MAGENTA, color)} {value(diagnostic.country_code)}"
    elif kind is DiagnosticKind.NO_SUBDIVISIONS:
        body = f"no subdivisions found for country {value(diagnostic.country_code)}"
    else:
        body = (
            f"invalid {_paint('subdivision code', MAGENTA, color)} {value(diagnostic.subdivision_code)} "
            f"for country {value(diagnostic.country_code)}"
        )
    return f"Line {diagnostic.line_number}: {body}"


def render_verdict(result: ValidationResult, color: bool = True) -> list[str]:
    if result.valid:
        return [f"Congratulations! Your geofeed file is {_paint('VALID', GREEN, color)}."]

    lines = [f"Your geofeed file is {_paint('INVALID', RED, color)}:"]
    lines.extend(f"- {render_diagnostic(d, color=color)}" for d in result.diagnostics)
    return lines


def render_warning(text: str, color: bool = True) -> str:
    return _paint(text, YELLOW, color)
