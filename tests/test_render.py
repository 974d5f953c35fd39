"""Tests for terminal rendering of verdicts and diagnostics."""

from pathlib import Path

from geofeed_tools.models import Diagnostic, DiagnosticKind, ValidationResult
from geofeed_tools.render import CYAN, GREEN, MAGENTA, RED, RESET, render_diagnostic, render_verdict


class TestRenderDiagnostic:

    def test_plain_matches_str(self):
        diagnostics = [
            Diagnostic(1, DiagnosticKind.GEOFEED_FORMAT),
            Diagnostic(2, DiagnosticKind.PREFIX_FORMAT, prefix="bad"),
            Diagnostic(3, DiagnosticKind.COUNTRY_CODE, country_code="ZZ"),
            Diagnostic(4, DiagnosticKind.NO_SUBDIVISIONS, country_code="AQ", subdivision_code="AQ-01"),
            Diagnostic(5, DiagnosticKind.SUBDIVISION_CODE, country_code="US", subdivision_code="US-XX"),
        ]
        for d in diagnostics:
            assert render_diagnostic(d, color=False) == str(d)

    def test_colored(self):
        d = Diagnostic(3, DiagnosticKind.COUNTRY_CODE, country_code="ZZ")
        rendered = render_diagnostic(d, color=True)
        assert rendered == f"Line 3: invalid {MAGENTA}country code{RESET} ({CYAN}ZZ{RESET})"


class TestRenderVerdict:

    def test_valid(self):
        result = ValidationResult(path=Path("feed.csv"))
        assert render_verdict(result, color=False) == ["Congratulations! Your geofeed file is VALID."]
        assert f"{GREEN}VALID{RESET}" in render_verdict(result)[0]

    def test_invalid(self):
        result = ValidationResult(
            path=Path("feed.csv"),
            diagnostics=[
                Diagnostic(1, DiagnosticKind.PREFIX_FORMAT, prefix="nope"),
                Diagnostic(1, DiagnosticKind.COUNTRY_CODE, country_code="ZZ"),
            ],
        )
        assert render_verdict(result, color=False) == [
            "Your geofeed file is INVALID:",
            "- Line 1: invalid prefix format (nope)",
            "- Line 1: invalid country code (ZZ)",
        ]
        assert f"{RED}INVALID{RESET}" in render_verdict(result)[0]
