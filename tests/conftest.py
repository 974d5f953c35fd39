"""
Shared fixtures: small synthetic ISO reference tables and a helper that
writes geofeed files into tmp_path.
"""

import json

import pytest

from geofeed_tools.models import Country, Subdivision
from geofeed_tools.reference import ReferenceData

COUNTRIES = [
    {"name": "United States", "code": "US"},
    {"name": "Canada", "code": "CA"},
    {"name": "Germany", "code": "DE"},
    {"name": "Antarctica", "code": "AQ"},
]

SUBDIVISIONS = {
    "US": [
        {"name": "California", "code": "US-CA"},
        {"name": "New York", "code": "US-NY"},
    ],
    "CA": [
        {"name": "Ontario", "code": "CA-ON"},
    ],
    # Listed but empty: looks the same as AQ, which is not listed at all.
    "DE": [],
}


@pytest.fixture
def reference():
    countries = [Country.from_mapping(item) for item in COUNTRIES]
    subdivisions = {
        code: [Subdivision.from_mapping(item) for item in items]
        for code, items in SUBDIVISIONS.items()
    }
    return ReferenceData.from_sources(countries, subdivisions)


@pytest.fixture
def reference_files(tmp_path):
    """Write the synthetic tables as JSON files; returns (countries, subdivisions) paths."""
    countries_path = tmp_path / "countries.json"
    subdivisions_path = tmp_path / "subdivisions.json"
    countries_path.write_text(json.dumps(COUNTRIES), encoding="utf-8")
    subdivisions_path.write_text(json.dumps(SUBDIVISIONS), encoding="utf-8")
    return countries_path, subdivisions_path


@pytest.fixture
def write_feed(tmp_path):
    def _write(text, name="geofeed.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
