"""KML coordinate text parsing.

KML writes coordinates as whitespace-separated ``lon,lat[,alt]`` tuples.
The shape of the result depends only on the input:

- one tuple                 -> ``[lon, lat]``            (Point)
- several tuples, no inner  -> ``[[lon, lat], ...]``     (LineString)
- inner rings supplied      -> ``[outer, *inner]``       (Polygon)

Altitude is dropped. Components that are not numbers become ``nan``.
"""

from __future__ import annotations

from gtran_kml.utils.helpers import parse_float

#: A ``[lon, lat]`` coordinate pair.
Position = list[float]


def parse_position(token: str) -> Position:
    """Parse one ``lon,lat[,alt]`` tuple into ``[lon, lat]``."""
    parts = token.split(",")
    lon = parse_float(parts[0])
    lat = parse_float(parts[1]) if len(parts) > 1 else parse_float(None)
    return [lon, lat]


def parse_ring(text: str | None) -> list[Position]:
    """Parse a coordinate string into an ordered list of positions."""
    if not text:
        return []
    return [parse_position(token) for token in text.split()]


def parse_coordinates(
    outer: str | None, inner: list[str] | None = None
) -> Position | list[Position] | list[list[Position]]:
    """Parse KML coordinate text into a GeoJSON coordinate payload.

    Args:
        outer: Coordinate text of the geometry (or the outer boundary).
        inner: Coordinate texts of inner boundaries. Pass a list (even an
            empty one) to request Polygon rings; ``None`` for Point and
            LineString.

    Returns:
        A bare pair when *outer* holds exactly one tuple, otherwise a list
        of pairs, or a list of rings when *inner* is given.
    """
    points = parse_ring(outer)
    if len(points) == 1:
        return points[0]

    if inner is None:
        return points

    return [points, *(parse_ring(text) for text in inner)]
