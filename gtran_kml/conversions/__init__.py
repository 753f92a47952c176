"""Conversion pipelines.

- to_geojson: KML document -> GeoJSON FeatureCollection
- from_geojson: GeoJSON FeatureCollection -> KML document / file
"""
