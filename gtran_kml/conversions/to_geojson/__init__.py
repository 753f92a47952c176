"""KML -> GeoJSON conversion.

Parses a KML document with lxml and produces a GeoJSON FeatureCollection.

The conversion is split into focused stages:
- **_tree**: read and parse the document, strip XML namespaces
- **_schema**: collect ``<Schema>`` field types once per document
- **_coordinates**: coordinate text -> ``[lon, lat]`` pairs / rings
- **_geometry**: Point / LineString / Polygon -> GeoJSON geometry
- **_properties**: name, description, ExtendedData and folder properties

Supported KML structures:
- Point, LineString and Polygon (with inner boundaries) Placemarks
- Folders, including nested Folder hierarchies
- ExtendedData/Data and Schema/SchemaData typed metadata

Placemarks are listed once for every Folder that contains them, directly
or through sub-folders, each copy tagged with that Folder's name.
Placemarks outside any Folder follow, without a ``folder`` property.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gtran_kml.conversions.to_geojson._coordinates import (
    parse_coordinates,
    parse_position,
    parse_ring,
)
from gtran_kml.conversions.to_geojson._geometry import GEOMETRY_TAGS, get_geometry
from gtran_kml.conversions.to_geojson._properties import convert, get_properties
from gtran_kml.conversions.to_geojson._schema import find_schemas
from gtran_kml.conversions.to_geojson._tree import load_tree, read_kml, strip_namespaces
from gtran_kml.models.geojson import Feature, FeatureCollection

if TYPE_CHECKING:
    from pathlib import Path

    from lxml.etree import _Element

    from gtran_kml.conversions.to_geojson._schema import SchemaTable

logger = logging.getLogger("gtran_kml.conversions.to_geojson")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "GEOMETRY_TAGS",
    "convert",
    "find_schemas",
    "get_geometry",
    "get_properties",
    "load_tree",
    "parse_coordinates",
    "parse_position",
    "parse_ring",
    "read_kml",
    "strip_namespaces",
    "to_feature_collection",
    "to_geojson",
]


def to_geojson(data: str | bytes | Path) -> dict[str, object]:
    """Convert a KML document into a GeoJSON FeatureCollection.

    Args:
        data: KML text, raw bytes, or a ``pathlib.Path`` to a KML file.

    Returns:
        A ``{"type": "FeatureCollection", "features": [...]}`` dict.

    Raises:
        KmlParseError: If the document is empty or not valid XML.
        SchemaNotFoundError: If a ``SchemaData`` refers to an undeclared schema.
    """
    logger.info("Converting KML to GeoJSON | input=%s", _describe_input(data))
    root = load_tree(data)
    collection = to_feature_collection(root)

    logger.info("Converted KML to GeoJSON with %d feature(s)", len(collection))
    return collection.to_dict()


def to_feature_collection(root: _Element) -> FeatureCollection:
    """Walk a namespace-stripped KML tree and build its features.

    Folders are visited in document order, and every Placemark beneath a
    Folder (at any depth) yields one feature tagged with that Folder's
    name. Placemarks outside any Folder are appended last.
    """
    schemas = find_schemas(root)
    logger.debug("Resolved %d schema(s)", len(schemas))

    features: list[Feature] = []
    for folder in root.iter("Folder"):
        folder_name = folder.findtext("./name", default="")
        for placemark in folder.iterfind(".//Placemark"):
            features.append(_build_feature(placemark, schemas, folder_name))

    for placemark in root.iter("Placemark"):
        if not any(ancestor.tag == "Folder" for ancestor in placemark.iterancestors()):
            features.append(_build_feature(placemark, schemas, ""))

    return FeatureCollection(features=features)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _describe_input(data: str | bytes | Path) -> str:
    if isinstance(data, str):
        return f"text ({len(data)} chars)"
    if isinstance(data, bytes | bytearray):
        return f"bytes ({len(data)} bytes)"
    return str(data)


def _build_feature(placemark: _Element, schemas: SchemaTable, folder_name: str) -> Feature:
    return Feature(
        geometry=get_geometry(placemark),
        properties=get_properties(placemark, schemas, folder_name),
    )
