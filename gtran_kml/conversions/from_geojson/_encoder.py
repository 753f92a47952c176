"""GeoJSON -> KML text encoder built on lxml.

Produces a single ``<Document>`` holding one ``<Placemark>`` per feature.
Every non-null property is written to ``ExtendedData/Data`` so it
survives a round trip through ``to_geojson``. Features without a
supported geometry are skipped.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from lxml import etree

from gtran_kml.core.constants import (
    DEFAULT_DOCUMENT_DESCRIPTION,
    DEFAULT_DOCUMENT_NAME,
    DEFAULT_NAME_PROPERTY,
    KML_NAMESPACE,
)
from gtran_kml.utils.helpers import xml_safe

if TYPE_CHECKING:
    from lxml.etree import _Element

logger = logging.getLogger("gtran_kml.conversions.from_geojson")

_MULTI_PARTS: dict[str, str] = {
    "MultiPoint": "Point",
    "MultiLineString": "LineString",
    "MultiPolygon": "Polygon",
}


def kml_tag(local_name: str) -> str:
    """Qualify *local_name* with the KML namespace."""
    return f"{{{KML_NAMESPACE}}}{local_name}"


def sub_element(parent: _Element, local_name: str, text: str | None = None) -> _Element:
    """Append a KML child element, optionally with text.

    Characters XML cannot represent are removed from *text*.
    """
    child = etree.SubElement(parent, kml_tag(local_name))
    if text is not None:
        child.text = xml_safe(text)
    return child


def encode_kml(
    collection: Mapping[str, Any],
    *,
    name: str = DEFAULT_NAME_PROPERTY,
    document_name: str = DEFAULT_DOCUMENT_NAME,
    document_description: str = DEFAULT_DOCUMENT_DESCRIPTION,
) -> str:
    """Encode a GeoJSON FeatureCollection as KML text.

    Args:
        collection: GeoJSON FeatureCollection dict.
        name: Feature property written as each Placemark's ``<name>``.
        document_name: ``<Document><name>``.
        document_description: ``<Document><description>``.

    Returns:
        UTF-8 KML text, including the XML declaration.
    """
    root = etree.Element(kml_tag("kml"), nsmap={None: KML_NAMESPACE})
    document = sub_element(root, "Document")
    sub_element(document, "name", document_name)
    sub_element(document, "description", document_description)

    skipped = 0
    for feature in collection.get("features", []):
        if not _write_placemark(document, feature, name):
            skipped += 1

    if skipped:
        logger.warning("Skipped %d feature(s) without a supported geometry", skipped)

    return etree.tostring(root, xml_declaration=True, encoding="UTF-8").decode("utf-8")


def format_value(value: Any) -> str:
    """Render a property value as KML text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, dict | list):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def format_number(value: float | int) -> str:
    """Shortest text for a coordinate: ``1.0`` -> ``"1"``, ``0.1`` -> ``"0.1"``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def format_position(position: list[float]) -> str:
    return ",".join(format_number(component) for component in position)


def format_positions(positions: list[list[float]]) -> str:
    return " ".join(format_position(position) for position in positions)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _write_placemark(document: _Element, feature: Mapping[str, Any], name: str) -> bool:
    geometry = feature.get("geometry")
    if not _is_supported(geometry):
        return False

    properties = feature.get("properties") or {}
    placemark = sub_element(document, "Placemark")

    if properties.get(name) is not None:
        sub_element(placemark, "name", format_value(properties[name]))
    if properties.get("description") is not None:
        sub_element(placemark, "description", format_value(properties["description"]))

    data_items = [(key, value) for key, value in properties.items() if value is not None]
    if data_items:
        extended = sub_element(placemark, "ExtendedData")
        for key, value in data_items:
            data = sub_element(extended, "Data")
            data.set("name", xml_safe(str(key)))
            sub_element(data, "value", format_value(value))

    _write_geometry(placemark, geometry)
    return True


def _is_supported(geometry: Any) -> bool:
    if not isinstance(geometry, Mapping):
        return False
    geom_type = geometry.get("type")
    if geom_type == "GeometryCollection":
        parts = geometry.get("geometries")
        return isinstance(parts, list) and all(_is_supported(part) for part in parts)
    if geom_type in ("Point", "LineString", "Polygon") or geom_type in _MULTI_PARTS:
        return isinstance(geometry.get("coordinates"), list)
    return False


def _write_geometry(parent: _Element, geometry: Mapping[str, Any]) -> None:
    geom_type = geometry["type"]

    if geom_type == "GeometryCollection":
        multi = sub_element(parent, "MultiGeometry")
        for part in geometry["geometries"]:
            _write_geometry(multi, part)
        return

    if geom_type in _MULTI_PARTS:
        multi = sub_element(parent, "MultiGeometry")
        for coordinates in geometry["coordinates"]:
            _write_geometry(multi, {"type": _MULTI_PARTS[geom_type], "coordinates": coordinates})
        return

    geom_elem = sub_element(parent, geom_type)
    coordinates = geometry["coordinates"]

    if geom_type == "Point":
        sub_element(geom_elem, "coordinates", format_position(coordinates))
    elif geom_type == "LineString":
        sub_element(geom_elem, "coordinates", format_positions(coordinates))
    else:
        for idx, ring in enumerate(coordinates):
            boundary = sub_element(geom_elem, "outerBoundaryIs" if idx == 0 else "innerBoundaryIs")
            linear_ring = sub_element(boundary, "LinearRing")
            sub_element(linear_ring, "coordinates", format_positions(ring))
