"""Geofeed (RFC 8805) validation tools."""

__version__ = "1.0.0"
