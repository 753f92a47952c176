"""Data model for GeoJSON output produced from KML.

A ``FeatureCollection`` holds one ``Feature`` per converted Placemark.
Each Feature carries an optional ``Geometry`` (Point, LineString or
Polygon) and a flat property mapping built from the Placemark's name,
description, ExtendedData and enclosing folder.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

#: Property values produced by KML extraction.
PropertyValue = str | int | float | bool


@dataclass(frozen=True, slots=True)
class Geometry:
    """A GeoJSON geometry.

    Attributes:
        type: ``"Point"``, ``"LineString"`` or ``"Polygon"``.
        coordinates: ``[lon, lat]`` for Point, a list of pairs for
            LineString, a list of rings for Polygon (ring 0 is the outer
            boundary, the rest are holes).
    """

    type: str
    coordinates: list[Any] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a GeoJSON geometry object."""
        return {"type": self.type, "coordinates": self.coordinates}

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Geometry:
        """Deserialise from a GeoJSON geometry object.

        Raises:
            TypeError: If ``type`` is missing or ``coordinates`` is not a list.
        """
        geom_type = data.get("type")
        if not isinstance(geom_type, str):
            msg = f"geometry type must be a string, got {type(geom_type).__name__}"
            raise TypeError(msg)
        coordinates = data.get("coordinates", [])
        if not isinstance(coordinates, list):
            msg = f"coordinates must be a list, got {type(coordinates).__name__}"
            raise TypeError(msg)
        return cls(type=geom_type, coordinates=coordinates)


@dataclass(frozen=True, slots=True)
class Feature:
    """A single GeoJSON feature converted from a KML Placemark.

    Attributes:
        geometry: Parsed geometry, or ``None`` for a Placemark without a
            Point, LineString or Polygon.
        properties: Name, description, ExtendedData values and folder name.
    """

    geometry: Geometry | None = None
    properties: dict[str, PropertyValue] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a GeoJSON Feature object."""
        return {
            "type": "Feature",
            "geometry": self.geometry.to_dict() if self.geometry is not None else None,
            "properties": dict(self.properties),
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Feature:
        """Deserialise from a GeoJSON Feature object.

        A missing or null ``properties`` member becomes an empty mapping.

        Raises:
            TypeError: If geometry or properties have unexpected types.
        """
        geometry_raw = data.get("geometry")
        if geometry_raw is not None and not isinstance(geometry_raw, dict):
            msg = f"geometry must be an object, got {type(geometry_raw).__name__}"
            raise TypeError(msg)

        properties_raw = data.get("properties") or {}
        if not isinstance(properties_raw, dict):
            msg = f"properties must be an object, got {type(properties_raw).__name__}"
            raise TypeError(msg)

        return cls(
            geometry=Geometry.from_dict(geometry_raw) if geometry_raw is not None else None,
            properties=dict(properties_raw),
        )


@dataclass(frozen=True, slots=True)
class FeatureCollection:
    """An ordered GeoJSON FeatureCollection."""

    features: list[Feature] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a GeoJSON FeatureCollection object."""
        return {
            "type": "FeatureCollection",
            "features": [feature.to_dict() for feature in self.features],
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> FeatureCollection:
        """Deserialise from a GeoJSON FeatureCollection object.

        Raises:
            TypeError: If ``features`` is missing or not a list of objects.
        """
        features_raw = data.get("features")
        if not isinstance(features_raw, list):
            msg = f"features must be a list, got {type(features_raw).__name__}"
            raise TypeError(msg)
        features: list[Feature] = []
        for idx, item in enumerate(features_raw):
            if not isinstance(item, dict):
                msg = f"feature at index {idx} must be an object, got {type(item).__name__}"
                raise TypeError(msg)
            features.append(Feature.from_dict(item))
        return cls(features=features)

    def __len__(self) -> int:
        return len(self.features)
