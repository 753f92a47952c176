"""Shared pytest fixtures for the gtran-kml test suite."""

from pathlib import Path

import pytest

from gtran_kml.core.config import ConversionConfig

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


# ---------------------------------------------------------------------------
# Sample KML file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mixed_kml(data_dir: Path) -> Path:
    """Two folders (Roads, Parcels) with every geometry type, typed schema
    data, and one Placemark outside any folder."""
    return data_dir / "01_folders_mixed_geometry.kml"


@pytest.fixture()
def nested_folders_kml(data_dir: Path) -> Path:
    """Path to a KML with a Folder nested inside another Folder."""
    return data_dir / "02_nested_folders.kml"


@pytest.fixture()
def missing_schema_kml(data_dir: Path) -> Path:
    """Path to a KML whose SchemaData references an undeclared schema."""
    return data_dir / "03_missing_schema.kml"


@pytest.fixture()
def no_namespace_kml(data_dir: Path) -> Path:
    """Path to a KML without the 2.2 namespace declaration."""
    return data_dir / "04_no_namespace.kml"


# ---------------------------------------------------------------------------
# GeoJSON fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def config() -> ConversionConfig:
    """Default conversion config, independent of the environment."""
    return ConversionConfig()


@pytest.fixture()
def feature_collection() -> dict[str, object]:
    """A FeatureCollection with one of each supported geometry type.

    The Polygon has two holes so ring order is observable.
    """
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [-70.2532459795475, 43.6399758607149]},
                "properties": {"id": 1, "name": "test"},
            },
            {
                "type": "Feature",
                "geometry": {
                    "type": "LineString",
                    "coordinates": [[-70.25, 43.63], [-70.26, 43.64], [-70.27, 43.65]],
                },
                "properties": {"name": "Route 1", "lanes": 2},
            },
            {
                "type": "Feature",
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [
                        [[-70.0, 43.0], [-70.0, 44.0], [-69.0, 44.0], [-69.0, 43.0], [-70.0, 43.0]],
                        [[-69.8, 43.2], [-69.8, 43.4], [-69.6, 43.4], [-69.8, 43.2]],
                        [[-69.4, 43.6], [-69.4, 43.8], [-69.2, 43.8], [-69.4, 43.6]],
                    ],
                },
                "properties": {"name": "Lot 7", "active": True},
            },
        ],
    }
