"""gtran-kml: convert between KML documents and GeoJSON FeatureCollections.

KML is parsed with lxml into GeoJSON features (Point, LineString and
Polygon geometries, plus name, description, ExtendedData and folder
properties). GeoJSON is encoded back to KML, optionally with shared
styles deduplicated by content.
"""

from gtran_kml.conversions.from_geojson import from_geojson
from gtran_kml.conversions.to_geojson import to_geojson

__version__ = "0.1.0"

__all__ = ["from_geojson", "to_geojson"]
