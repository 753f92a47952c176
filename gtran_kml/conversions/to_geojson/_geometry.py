"""Placemark geometry translation.

Only the first recognised geometry child is converted, checked in the
order Point, LineString, Polygon.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gtran_kml.conversions.to_geojson._coordinates import parse_coordinates
from gtran_kml.models.geojson import Geometry

if TYPE_CHECKING:
    from lxml.etree import _Element

GEOMETRY_TAGS: tuple[str, ...] = ("Point", "LineString", "Polygon")


def get_geometry(placemark: _Element) -> Geometry | None:
    """Translate a Placemark's geometry into a GeoJSON ``Geometry``.

    Returns:
        The geometry of the first Point, LineString or Polygon child, or
        ``None`` when the Placemark has none of them.
    """
    for tag in GEOMETRY_TAGS:
        geom_elem = placemark.find(tag)
        if geom_elem is None:
            continue
        if tag == "Polygon":
            return _polygon(geom_elem)
        return Geometry(type=tag, coordinates=parse_coordinates(geom_elem.findtext("coordinates")))
    return None


def _polygon(polygon_elem: _Element) -> Geometry:
    outer = polygon_elem.findtext("outerBoundaryIs/LinearRing/coordinates")
    inner = [
        node.text or ""
        for node in polygon_elem.findall("innerBoundaryIs/LinearRing/coordinates")
    ]
    return Geometry(type="Polygon", coordinates=parse_coordinates(outer, inner))
