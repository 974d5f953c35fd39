# geofeed_tools/validate/driver.py

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Union

from geofeed_tools.errors import CloseError, OpenError
from geofeed_tools.models import Diagnostic, ValidationResult
from geofeed_tools.reference.index import ReferenceData
from geofeed_tools.utils.logging import get_logger
from geofeed_tools.validate.classifier import classify_line

log = get_logger(__name__)

PathLike = Union[str, Path]


def iter_diagnostics(lines: Iterable[str], reference: ReferenceData) -> Iterator[Diagnostic]:
    """Classify lines in order, numbering them from 1."""
    for line_number, line in enumerate(lines, start=1):
        yield from classify_line(line, line_number, reference)


def _count_lines(lines: Iterable[str], result: ValidationResult) -> Iterator[str]:
    for line_number, line in enumerate(lines, start=1):
        result.lines_read = line_number
        yield line


def validate_file(path: PathLike, reference: ReferenceData) -> ValidationResult:
    """
    Stream a geofeed file through the line classifier.

    Raises OpenError if the file cannot be opened. The file is read one line
    at a time and always closed; a failure to close is recorded on the
    result as close_error and does not change the diagnostics.
    """
    path = Path(path).expanduser()
    log.info("Validating %s", path)

    if path.is_dir():
        raise OpenError(path, "is a directory")
    try:
        # utf-8-sig drops a leading BOM; undecodable bytes end up in fields
        # and get reported like any other bad value. Lines split on "\n" only.
        fh = path.open("r", encoding="utf-8-sig", errors="replace", newline="\n")
    except OSError as exc:
        raise OpenError(path, exc.strerror or str(exc)) from exc

    result = ValidationResult(path=path)
    try:
        result.diagnostics.extend(iter_diagnostics(_count_lines(fh, result), reference))
    finally:
        try:
            fh.close()
        except OSError as exc:
            result.close_error = CloseError(path, exc.strerror or str(exc))
            log.warning("Failed to close %s: %s", path, exc)

    log.info(
        "Read %d lines from %s, %d diagnostic(s)",
        result.lines_read,
        path,
        len(result.diagnostics),
    )
    return result
