"""Geofeed line classification and file validation."""

from geofeed_tools.validate.classifier import classify_line, is_valid_prefix, split_record
from geofeed_tools.validate.driver import iter_diagnostics, validate_file

__all__ = [
    "classify_line",
    "is_valid_prefix",
    "iter_diagnostics",
    "split_record",
    "validate_file",
]
