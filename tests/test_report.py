"""Tests for the diagnostics report export."""

import json
from typing import get_args

import pandas as pd
import pytest

from geofeed_tools.cli import ReportFormat
from geofeed_tools.models import Diagnostic, DiagnosticKind
from geofeed_tools.report import REPORT_COLUMNS, ReportFileFormat, diagnostics_to_dataframe, save_report


@pytest.fixture
def diagnostics():
    return [
        Diagnostic(2, DiagnosticKind.PREFIX_FORMAT, prefix="nope", country_code="ZZ"),
        Diagnostic(2, DiagnosticKind.COUNTRY_CODE, prefix="nope", country_code="ZZ"),
        Diagnostic(5, DiagnosticKind.SUBDIVISION_CODE, prefix="192.0.2.0/24", country_code="US", subdivision_code="US-XX"),
    ]


class TestDiagnosticsToDataframe:

    def test_rows_in_order(self, diagnostics):
        df = diagnostics_to_dataframe(diagnostics)
        assert list(df.columns) == REPORT_COLUMNS
        assert df["line"].tolist() == [2, 2, 5]
        assert df["kind"].tolist() == ["prefix_format", "country_code", "subdivision_code"]
        assert df.loc[2, "message"] == "invalid subdivision code (US-XX) for country (US)"

    def test_empty(self):
        df = diagnostics_to_dataframe([])
        assert df.empty
        assert list(df.columns) == REPORT_COLUMNS


class TestSaveReport:

    def test_csv(self, diagnostics, tmp_path):
        out = save_report(diagnostics_to_dataframe(diagnostics), tmp_path / "nested" / "report.csv", fmt="csv")
        assert out.exists()
        loaded = pd.read_csv(out)
        assert loaded["line"].tolist() == [2, 2, 5]
        assert loaded["country_code"].tolist() == ["ZZ", "ZZ", "US"]

    def test_json(self, diagnostics, tmp_path):
        out = save_report(diagnostics_to_dataframe(diagnostics), tmp_path / "report.json", fmt="json")
        records = json.loads(out.read_text(encoding="utf-8"))
        assert len(records) == 3
        assert records[1]["message"] == "invalid country code (ZZ)"
        assert records[0]["subdivision_code"] is None

    def test_unknown_format(self, diagnostics, tmp_path):
        with pytest.raises(ValueError, match="Unsupported report format"):
            save_report(diagnostics_to_dataframe(diagnostics), tmp_path / "report.xml", fmt="xml")

    def test_cli_choices_match_writer_formats(self):
        assert {f.value for f in ReportFormat} == set(get_args(ReportFileFormat))
