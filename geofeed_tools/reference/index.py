# geofeed_tools/reference/index.py

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from geofeed_tools.models import Country, Subdivision


def build_country_set(countries: Iterable[Country]) -> frozenset[str]:
    return frozenset(country.code for country in countries)


def build_subdivision_index(
        subdivisions_by_country: Mapping[str, Iterable[Subdivision]],
) -> Mapping[str, frozenset[str]]:
    """
    Collapse each country's subdivision list into a set of codes.

    Countries with an empty list are left out, so "no subdivisions known"
    and "not in the dataset" look the same to a lookup.
    """
    index = {}
    for country_code, subs in subdivisions_by_country.items():
        codes = frozenset(sub.code for sub in subs)
        if codes:
            index[country_code] = codes
    return MappingProxyType(index)


@dataclass(frozen=True)
class ReferenceData:
    """Read-only lookup tables shared by every classified line."""

    countries: frozenset[str]
    subdivisions: Mapping[str, frozenset[str]]

    @classmethod
    def from_sources(
            cls,
            countries: Iterable[Country],
            subdivisions_by_country: Mapping[str, Iterable[Subdivision]],
    ) -> "ReferenceData":
        return cls(
            countries=build_country_set(countries),
            subdivisions=build_subdivision_index(subdivisions_by_country),
        )

    def has_country(self, code: str) -> bool:
        return code in self.countries
