"""Shared conversion constants: single source of truth.

Centralises the KML namespace, default option values and the schema type
tags recognised when coercing ``SimpleData`` text.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# KML document
# ---------------------------------------------------------------------------

KML_NAMESPACE: str = "http://www.opengis.net/kml/2.2"
"""Default namespace written on the ``<kml>`` root element."""

KML_EXTENSION: str = ".kml"
"""Suffix enforced on output filenames."""

KML_FORMAT: str = "kml"
"""Format tag returned with in-memory KML output."""

# ---------------------------------------------------------------------------
# GeoJSON -> KML defaults
# ---------------------------------------------------------------------------

DEFAULT_FEATURE_STYLE_KEY: str = "gtran-kml-style-id"
"""Property that carries each feature's style identifier."""

DEFAULT_NAME_PROPERTY: str = "name"
"""Feature property used as the Placemark ``<name>``."""

DEFAULT_DOCUMENT_NAME: str = "My KML"

DEFAULT_DOCUMENT_DESCRIPTION: str = "Converted from GeoJson by gtran-kml"

# ---------------------------------------------------------------------------
# Schema type tags (KML SimpleField@type)
# ---------------------------------------------------------------------------

INTEGER_TYPES: frozenset[str] = frozenset({"int", "uint", "short", "ushort"})
FLOAT_TYPES: frozenset[str] = frozenset({"float", "double"})
BOOL_TYPE: str = "bool"
