"""Style deduplication for GeoJSON -> KML output.

Every feature is described by ``SymbolStyle(geometry type, symbol)``.
Structurally equal descriptors hash to the same id, so features drawn
the same way share a single ``<Style>`` in the emitted KML.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Mapping
from typing import Any

from gtran_kml.core.constants import DEFAULT_FEATURE_STYLE_KEY
from gtran_kml.models.symbol import SymbolStyle, SymbolTable

logger = logging.getLogger("gtran_kml.conversions.from_geojson")

#: A fixed symbol value, or a function computing one per feature.
SymbolInput = Any | Callable[[dict[str, Any]], Any]


def resolve_symbol(feature: dict[str, Any], symbol: SymbolInput) -> Any:
    """Return the symbol for *feature*, calling *symbol* if it is a function."""
    if callable(symbol):
        return symbol(feature)
    return symbol


def symbol_descriptor(feature: dict[str, Any], symbol: SymbolInput) -> SymbolStyle:
    """Build the ``SymbolStyle`` of a single feature."""
    geometry = feature.get("geometry") or {}
    return SymbolStyle(geom_type=geometry.get("type", ""), symbol=resolve_symbol(feature, symbol))


def assign_style_ids(
    collection: Mapping[str, Any],
    symbol: SymbolInput,
    feature_style_key: str = DEFAULT_FEATURE_STYLE_KEY,
) -> tuple[dict[str, Any], SymbolTable]:
    """Tag each feature with the id of its style.

    The input is not modified: a deep copy is decorated and returned.

    Args:
        collection: GeoJSON FeatureCollection dict.
        symbol: Fixed symbol value, or ``(feature) -> symbol``.
        feature_style_key: Property that receives the style id. Any
            existing value under this key is overwritten.

    Returns:
        ``(decorated_collection, symbol_table)`` where the table maps each
        distinct style id to the first descriptor that produced it.
    """
    decorated = copy.deepcopy(dict(collection))
    symbols: SymbolTable = {}

    for feature in decorated.get("features", []):
        descriptor = symbol_descriptor(feature, symbol)
        style_id = descriptor.style_id
        symbols.setdefault(style_id, descriptor)

        if feature.get("properties") is None:
            feature["properties"] = {}
        feature["properties"][feature_style_key] = style_id

    logger.debug(
        "Assigned %d distinct style(s) to %d feature(s)",
        len(symbols),
        len(decorated.get("features", [])),
    )
    return decorated, symbols
