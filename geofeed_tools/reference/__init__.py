"""ISO 3166 reference data: packaged loaders and lookup indexes."""

from geofeed_tools.reference.index import (
    ReferenceData,
    build_country_set,
    build_subdivision_index,
)
from geofeed_tools.reference.loader import (
    load_countries,
    load_reference_data,
    load_subdivisions,
)

__all__ = [
    "ReferenceData",
    "build_country_set",
    "build_subdivision_index",
    "load_countries",
    "load_reference_data",
    "load_subdivisions",
]
