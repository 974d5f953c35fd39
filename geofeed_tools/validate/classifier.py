# geofeed_tools/validate/classifier.py

from __future__ import annotations

import csv
import ipaddress
from typing import Optional

from geofeed_tools.models import Diagnostic, DiagnosticKind
from geofeed_tools.reference.index import ReferenceData

# prefix, country_code, subdivision_code, city, postal_code
GEOFEED_MIN_FIELDS = 5


def is_valid_prefix(text: str) -> bool:
    """
    Return True if text is an IPv4 or IPv6 prefix in address/length form.

    Host bits may be set ("192.0.2.1/24" is accepted). A bare address,
    a netmask-style length ("10.0.0.0/255.0.0.0") and scoped IPv6
    addresses are rejected.
    """
    address, sep, length = text.partition("/")
    if not sep or "%" in address:
        return False
    if not (length.isascii() and length.isdigit()):
        return False
    try:
        ipaddress.ip_network(text, strict=False)
    except ValueError:
        return False
    return True


def _bare_quote_field(line: str) -> Optional[int]:
    """
    Return the index of the first unquoted field containing a '"', or None.

    A quote only opens a quoted field as the very first character of the
    field; anywhere else in an unquoted field it is a parse error.
    """
    field_index = 0
    at_field_start = True
    in_quotes = False
    i = 0
    while i < len(line):
        ch = line[i]
        if in_quotes:
            if ch == '"':
                if line[i + 1:i + 2] == '"':
                    i += 1
                else:
                    in_quotes = False
        elif ch == ",":
            field_index += 1
            at_field_start = True
            i += 1
            continue
        elif ch == '"':
            if not at_field_start:
                return field_index
            in_quotes = True
        at_field_start = False
        i += 1
    return None


def split_record(line: str) -> list[str]:
    """
    Parse one line as a single CSV record.

    Parsing is best effort: text after a closing quote or an unterminated
    quoted field yields an empty record, and a bare quote in an unquoted
    field yields only the fields before it. Either way the caller sees a
    short record and reports an invalid geofeed format.
    """
    try:
        record = next(csv.reader([line], strict=True), [])
    except csv.Error:
        return []
    bad_field = _bare_quote_field(line)
    if bad_field is not None:
        return record[:bad_field]
    return record


def classify_line(line: str, line_number: int, reference: ReferenceData) -> list[Diagnostic]:
    """
    Check one geofeed line and return its diagnostics (0, 1 or 2 of them).

    Blank and '#' comment lines are skipped. A prefix problem never stops the
    country check; a country problem always stops the subdivision check.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return []

    record = split_record(line.rstrip("\r\n"))
    if len(record) < GEOFEED_MIN_FIELDS:
        return [Diagnostic(line_number, DiagnosticKind.GEOFEED_FORMAT)]

    prefix, country_code, subdivision_code = record[0], record[1], record[2]
    diagnostics: list[Diagnostic] = []

    if not is_valid_prefix(prefix):
        diagnostics.append(Diagnostic(line_number, DiagnosticKind.PREFIX_FORMAT, prefix=prefix))

    # An empty country code is allowed.
    if country_code == "":
        return diagnostics

    if not reference.has_country(country_code):
        diagnostics.append(
            Diagnostic(line_number, DiagnosticKind.COUNTRY_CODE, prefix=prefix, country_code=country_code)
        )
        return diagnostics

    if subdivision_code == "":
        return diagnostics

    valid_codes = reference.subdivisions.get(country_code)
    if valid_codes is None:
        diagnostics.append(
            Diagnostic(
                line_number,
                DiagnosticKind.NO_SUBDIVISIONS,
                prefix=prefix,
                country_code=country_code,
                subdivision_code=subdivision_code,
            )
        )
    elif subdivision_code not in valid_codes:
        diagnostics.append(
            Diagnostic(
                line_number,
                DiagnosticKind.SUBDIVISION_CODE,
                prefix=prefix,
                country_code=country_code,
                subdivision_code=subdivision_code,
            )
        )
    return diagnostics
