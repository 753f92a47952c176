"""GeoJSON -> KML conversion.

Encodes a GeoJSON FeatureCollection as a KML document, optionally with
shared styles.

The conversion is split into focused stages:
- **_styles**: content-addressed style ids per (geometry type, symbol)
- **_encoder**: FeatureCollection -> KML text (lxml)
- **_symbol**: splice ``<Style>`` / ``<styleUrl>`` into the KML text
- **_writer**: atomic ``.kml`` file output

The caller's FeatureCollection is never modified; styling works on a
deep copy.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from gtran_kml.conversions.from_geojson._encoder import encode_kml, format_value
from gtran_kml.conversions.from_geojson._styles import (
    assign_style_ids,
    resolve_symbol,
    symbol_descriptor,
)
from gtran_kml.conversions.from_geojson._symbol import add_styles, build_style, kml_color
from gtran_kml.conversions.from_geojson._writer import write_kml
from gtran_kml.core.config import ConversionConfig
from gtran_kml.core.constants import KML_FORMAT
from gtran_kml.core.exceptions import GeoJsonValidationError
from gtran_kml.models.options import KmlExportOptions

if TYPE_CHECKING:
    from pathlib import Path

    from gtran_kml.models.symbol import SymbolTable

logger = logging.getLogger("gtran_kml.conversions.from_geojson")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "add_styles",
    "assign_style_ids",
    "build_style",
    "encode_kml",
    "format_value",
    "from_geojson",
    "kml_color",
    "resolve_symbol",
    "symbol_descriptor",
    "write_kml",
]


def from_geojson(
    geojson: Mapping[str, Any],
    file_name: str | Path | None = None,
    options: KmlExportOptions | Mapping[str, Any] | None = None,
    *,
    config: ConversionConfig | None = None,
) -> str | dict[str, str]:
    """Convert a GeoJSON FeatureCollection to KML.

    Args:
        geojson: GeoJSON FeatureCollection dict. Not modified.
        file_name: Output path. ``.kml`` is appended when missing. When
            omitted the KML is returned in memory.
        options: ``KmlExportOptions`` or an equivalent dict
            (``symbol``, ``featureStyleKey``, ``name``, ``documentName``,
            ``documentDescription``).
        config: Defaults for unset options. Loaded from the environment
            when omitted.

    Returns:
        The written filename, or ``{"data": kml_text, "format": "kml"}``
        when *file_name* is ``None``.

    Raises:
        GeoJsonValidationError: If *geojson* is not a FeatureCollection or
            *options* are invalid.
        KmlWriteError: If the output file cannot be written.
    """
    _require_feature_collection(geojson)
    logger.info("Converting GeoJSON to KML | features=%d", len(geojson["features"]))
    resolved = _coerce_options(options).resolve(config or ConversionConfig.from_env())
    collection = copy.deepcopy(dict(geojson))

    symbols: SymbolTable = {}
    if resolved.has_symbol:
        collection, symbols = assign_style_ids(
            collection, resolved.symbol, resolved.feature_style_key
        )

    kml_text = encode_kml(
        collection,
        name=resolved.name,
        document_name=resolved.document_name,
        document_description=resolved.document_description,
    )

    if resolved.has_symbol:
        kml_text = add_styles(kml_text, symbols, resolved.feature_style_key)

    logger.info(
        "Converted GeoJSON to KML | features=%d | styles=%d",
        len(collection["features"]),
        len(symbols),
    )

    if file_name:
        return write_kml(kml_text, file_name)
    return {"data": kml_text, "format": KML_FORMAT}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _require_feature_collection(geojson: object) -> None:
    if not isinstance(geojson, Mapping):
        msg = f"GeoJSON input must be an object, got {type(geojson).__name__}"
        raise GeoJsonValidationError(msg)
    features = geojson.get("features")
    if not isinstance(features, list):
        msg = "GeoJSON input must be a FeatureCollection with a 'features' list"
        raise GeoJsonValidationError(msg)
    for idx, feature in enumerate(features):
        if not isinstance(feature, Mapping):
            msg = f"Feature at index {idx} must be an object, got {type(feature).__name__}"
            raise GeoJsonValidationError(msg)


def _coerce_options(options: KmlExportOptions | Mapping[str, Any] | None) -> KmlExportOptions:
    if options is None:
        return KmlExportOptions()
    if isinstance(options, KmlExportOptions):
        return options
    try:
        return KmlExportOptions.model_validate(dict(options))
    except PydanticValidationError as exc:
        msg = f"Invalid conversion options: {exc}"
        raise GeoJsonValidationError(msg) from exc
