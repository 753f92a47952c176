"""Splice shared ``<Style>`` definitions into encoded KML.

One ``<Style id="...">`` is written per symbol table entry, and every
Placemark whose style-id Data field names a known style gets a matching
``<styleUrl>``. Symbol dicts are read according to the geometry type:

=====================  ===================================================
Geometry               Symbol keys
=====================  ===================================================
Point, MultiPoint      ``url`` (icon href), ``color``, ``size`` (scale)
LineString, Multi...   ``color``, ``width``
Polygon, MultiPolygon  ``fillColor``, ``outlineColor``, ``outlineWidth``
=====================  ===================================================

Every symbol may also carry ``opacity`` (0-1), which overrides the alpha
of its colors. Colors are ``"#rrggbb"``, ``"#rrggbbaa"``, ``[r, g, b]`` or
``[r, g, b, a]`` and are written in KML's ``aabbggrr`` order.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from lxml import etree

from gtran_kml.conversions.from_geojson._encoder import format_value, kml_tag, sub_element
from gtran_kml.core.constants import KML_NAMESPACE

if TYPE_CHECKING:
    from lxml.etree import _Element

    from gtran_kml.models.symbol import SymbolStyle, SymbolTable

logger = logging.getLogger("gtran_kml.conversions.from_geojson")

_HEX_COLOR = re.compile(r"#?([0-9a-fA-F]{6})([0-9a-fA-F]{2})?")

_NS = {"kml": KML_NAMESPACE}

_POINT_TYPES = frozenset({"Point", "MultiPoint"})
_LINE_TYPES = frozenset({"LineString", "MultiLineString"})
_POLYGON_TYPES = frozenset({"Polygon", "MultiPolygon"})

# Children that precede <Style> in a Document and <styleUrl> in a Placemark.
_LEADING_TAGS = frozenset({kml_tag("name"), kml_tag("description")})


def add_styles(kml_text: str, symbols: SymbolTable, feature_style_key: str) -> str:
    """Return *kml_text* with style definitions and references added.

    Args:
        kml_text: KML produced by ``encode_kml``.
        symbols: Style id -> descriptor, from ``assign_style_ids``.
        feature_style_key: ExtendedData field holding each feature's style id.
    """
    parser = etree.XMLParser(resolve_entities=False, no_network=True, remove_blank_text=True)
    root = etree.fromstring(kml_text.encode("utf-8"), parser=parser)
    document = root.find(kml_tag("Document"))
    if document is None:
        return kml_text

    insert_at = _leading_count(document)
    for offset, (style_id, descriptor) in enumerate(symbols.items()):
        document.insert(insert_at + offset, build_style(style_id, descriptor))

    linked = 0
    for placemark in list(document.iter(kml_tag("Placemark"))):
        style_id = _feature_style_id(placemark, feature_style_key)
        if style_id in symbols:
            style_url = etree.Element(kml_tag("styleUrl"))
            style_url.text = f"#{style_id}"
            placemark.insert(_leading_count(placemark), style_url)
            linked += 1

    logger.debug("Added %d style(s), linked %d placemark(s)", len(symbols), linked)
    return etree.tostring(root, xml_declaration=True, encoding="UTF-8").decode("utf-8")


def build_style(style_id: str, descriptor: SymbolStyle) -> _Element:
    """Build the ``<Style>`` element for one symbol descriptor."""
    style = etree.Element(kml_tag("Style"))
    style.set("id", style_id)

    geom_type = descriptor.geom_type
    symbol = descriptor.symbol
    if isinstance(symbol, str):
        symbol = {"url": symbol} if geom_type in _POINT_TYPES else {"color": symbol}
    if not isinstance(symbol, Mapping):
        logger.debug("Symbol for style %s is not a mapping; writing an empty style", style_id)
        return style

    opacity = symbol.get("opacity")

    if geom_type in _POINT_TYPES:
        icon_style = sub_element(style, "IconStyle")
        _add_color(icon_style, symbol.get("color"), opacity)
        if symbol.get("size") is not None:
            sub_element(icon_style, "scale", format_value(symbol["size"]))
        if symbol.get("url"):
            icon = sub_element(icon_style, "Icon")
            sub_element(icon, "href", str(symbol["url"]))
    elif geom_type in _LINE_TYPES:
        _add_line_style(style, symbol.get("color"), symbol.get("width"), opacity)
    elif geom_type in _POLYGON_TYPES:
        poly_style = sub_element(style, "PolyStyle")
        _add_color(poly_style, symbol.get("fillColor"), opacity)
        _add_line_style(style, symbol.get("outlineColor"), symbol.get("outlineWidth"), opacity)

    return style


def kml_color(color: Any, opacity: float | None = None) -> str | None:
    """Convert an RGB(A) color to KML ``aabbggrr`` hex.

    Returns:
        The KML color, or ``None`` if *color* is not a recognised format.
    """
    rgba: list[int]
    if isinstance(color, str):
        match = _HEX_COLOR.fullmatch(color.strip())
        if match is None:
            return None
        rgb_hex, alpha_hex = match.groups()
        rgba = [int(rgb_hex[i : i + 2], 16) for i in (0, 2, 4)]
        rgba.append(int(alpha_hex, 16) if alpha_hex else 255)
    elif isinstance(color, list | tuple) and len(color) in (3, 4):
        try:
            rgba = [max(0, min(255, int(component))) for component in color]
        except (TypeError, ValueError):
            return None
        if len(rgba) == 3:
            rgba.append(255)
    else:
        return None

    if opacity is not None:
        rgba[3] = max(0, min(255, round(float(opacity) * 255)))

    red, green, blue, alpha = rgba
    return f"{alpha:02x}{blue:02x}{green:02x}{red:02x}"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _add_color(parent: _Element, color: Any, opacity: float | None) -> None:
    if color is None:
        return
    value = kml_color(color, opacity)
    if value is None:
        logger.warning("Ignoring unrecognised color %r", color)
        return
    sub_element(parent, "color", value)


def _add_line_style(style: _Element, color: Any, width: Any, opacity: float | None) -> None:
    if color is None and width is None:
        return
    line_style = sub_element(style, "LineStyle")
    _add_color(line_style, color, opacity)
    if width is not None:
        sub_element(line_style, "width", format_value(width))


def _leading_count(parent: _Element) -> int:
    count = 0
    for child in parent:
        if child.tag not in _LEADING_TAGS:
            break
        count += 1
    return count


def _feature_style_id(placemark: _Element, feature_style_key: str) -> str | None:
    for data in placemark.iterfind("kml:ExtendedData/kml:Data", _NS):
        if data.get("name") == feature_style_key:
            return data.findtext("kml:value", namespaces=_NS)
    return None
