# geofeed_tools/report.py

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Literal, Union

import pandas as pd

from geofeed_tools.models import Diagnostic
from geofeed_tools.utils.logging import get_logger

log = get_logger(__name__)

PathLike = Union[str, Path]
ReportFileFormat = Literal["csv", "json"]

REPORT_COLUMNS = ["line", "kind", "prefix", "country_code", "subdivision_code", "message"]


def diagnostics_to_dataframe(diagnostics: Iterable[Diagnostic]) -> pd.DataFrame:
    """
    One row per diagnostic, in file order.

    An empty input still yields the full set of columns so the written
    report always has a header.
    """
    rows = [
        {
            "line": d.line_number,
            "kind": d.kind.value,
            "prefix": d.prefix,
            "country_code": d.country_code,
            "subdivision_code": d.subdivision_code,
            "message": d.message,
        }
        for d in diagnostics
    ]
    df = pd.DataFrame(rows, columns=REPORT_COLUMNS)
    df["line"] = df["line"].astype("int64")
    return df


def save_report(df: pd.DataFrame, path: PathLike, fmt: ReportFileFormat = "csv") -> Path:
    """
    Write the diagnostics table as CSV or JSON (list of records).

    Parent directories are created as needed. Returns the written path.
    """
    out_path = Path(path).expanduser()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    log.info("Saving %s report (%d rows) to %s", fmt, len(df), out_path)

    if fmt == "csv":
        df.to_csv(out_path, index=False)
    elif fmt == "json":
        df.to_json(out_path, orient="records", indent=2)
    else:
        raise ValueError(f"Unsupported report format: {fmt}")

    log.debug("Report written successfully to %s", out_path)
    return out_path
