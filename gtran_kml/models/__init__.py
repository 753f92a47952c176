"""Data models and schemas.

Defines the data structures used by both conversion directions:
- Geometry / Feature / FeatureCollection: GeoJSON output of KML parsing
- SymbolStyle: content-addressed style descriptor for KML output
- KmlExportOptions: GeoJSON -> KML conversion options
"""

from gtran_kml.models.geojson import Feature, FeatureCollection, Geometry, PropertyValue
from gtran_kml.models.options import KmlExportOptions
from gtran_kml.models.symbol import SymbolStyle, SymbolTable

__all__ = [
    "Feature",
    "FeatureCollection",
    "Geometry",
    "KmlExportOptions",
    "PropertyValue",
    "SymbolStyle",
    "SymbolTable",
]
