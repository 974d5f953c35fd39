# geofeed_tools/reference/loader.py

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any, Optional, Union

from geofeed_tools.errors import LoadError
from geofeed_tools.models import Country, Subdivision
from geofeed_tools.reference.index import ReferenceData
from geofeed_tools.utils.logging import get_logger

log = get_logger(__name__)

COUNTRY_RESOURCE = "iso3166-1.json"
SUBDIVISION_RESOURCE = "iso3166-2.json"

SourceLike = Union[str, Path, None]


def _read_json(source: SourceLike, resource_name: str, dataset: str) -> tuple[str, Any]:
    """
    Read and decode one JSON document.

    With source=None the packaged resource under geofeed_tools/data is used,
    otherwise source is a filesystem path. Returns (label, decoded).
    """
    if source is None:
        label = f"geofeed_tools/data/{resource_name}"
        try:
            resource = resources.files("geofeed_tools") / "data" / resource_name
            text = resource.read_text(encoding="utf-8")
        except OSError as exc:
            raise LoadError(dataset, label, str(exc)) from exc
    else:
        path = Path(source).expanduser()
        label = str(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise LoadError(dataset, label, str(exc)) from exc

    try:
        return label, json.loads(text)
    except json.JSONDecodeError as exc:
        raise LoadError(dataset, label, f"invalid JSON: {exc}") from exc


def load_countries(source: SourceLike = None) -> list[Country]:
    """Load the ISO 3166-1 country list (ordered list of {name, code})."""
    label, raw = _read_json(source, COUNTRY_RESOURCE, "countries")
    if not isinstance(raw, list):
        raise LoadError("countries", label, f"expected a list of countries, got {type(raw).__name__}")

    countries: list[Country] = []
    for idx, item in enumerate(raw):
        try:
            countries.append(Country.from_mapping(item))
        except ValueError as exc:
            raise LoadError("countries", label, f"entry {idx}: {exc}") from exc

    log.debug("Loaded %d countries from %s", len(countries), label)
    return countries


def load_subdivisions(source: SourceLike = None) -> dict[str, list[Subdivision]]:
    """Load the ISO 3166-2 subdivisions, keyed by country code."""
    label, raw = _read_json(source, SUBDIVISION_RESOURCE, "subdivisions")
    if not isinstance(raw, dict):
        raise LoadError("subdivisions", label, f"expected a mapping of country code to subdivisions, got {type(raw).__name__}")

    by_country: dict[str, list[Subdivision]] = {}
    total = 0
    for country_code, items in raw.items():
        if not isinstance(items, list):
            raise LoadError("subdivisions", label, f"{country_code}: expected a list, got {type(items).__name__}")
        subs: list[Subdivision] = []
        for idx, item in enumerate(items):
            try:
                subs.append(Subdivision.from_mapping(item))
            except ValueError as exc:
                raise LoadError("subdivisions", label, f"{country_code} entry {idx}: {exc}") from exc
        by_country[country_code] = subs
        total += len(subs)

    log.debug("Loaded %d subdivisions for %d countries from %s", total, len(by_country), label)
    return by_country


def load_reference_data(
        countries_source: SourceLike = None,
        subdivisions_source: SourceLike = None,
) -> ReferenceData:
    """
    Load both datasets and build the lookup indexes.

    Any failure raises LoadError; nothing is returned half-built.
    """
    countries = load_countries(countries_source)
    subdivisions = load_subdivisions(subdivisions_source)
    reference = ReferenceData.from_sources(countries, subdivisions)
    log.info(
        "Reference data ready: %d country codes, %d countries with subdivisions",
        len(reference.countries),
        len(reference.subdivisions),
    )
    return reference
