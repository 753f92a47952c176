"""Tests for the conversion exception taxonomy.

Validates:
- ConversionError base attributes and ``to_error_dict()`` payload
- Category classification (validation, transient, permanent)
- Concrete errors carry their stage and code
"""

from __future__ import annotations

from typing import ClassVar

from gtran_kml.core.config import ConfigValidationError
from gtran_kml.core.exceptions import (
    ConversionError,
    GeoJsonValidationError,
    KmlParseError,
    KmlWriteError,
    SchemaNotFoundError,
    TransientError,
    ValidationError,
)


class TestConversionErrorBase:
    """ConversionError base class behavior."""

    def test_default_attributes(self) -> None:
        err = ConversionError("boom")
        assert err.message == "boom"
        assert err.stage == ""
        assert err.code == ""
        assert err.retryable is False

    def test_custom_attributes(self) -> None:
        err = ConversionError("fail", stage="from_geojson", code="X", retryable=True)
        assert err.stage == "from_geojson"
        assert err.code == "X"
        assert err.retryable is True

    def test_str_is_message(self) -> None:
        assert str(ConversionError("human-readable error")) == "human-readable error"

    def test_to_error_dict_keys(self) -> None:
        payload = ConversionError("x", stage="s", code="C").to_error_dict()
        assert set(payload) == {"category", "code", "stage", "message", "retryable"}

    def test_category_from_retryable_flag(self) -> None:
        assert ConversionError("x").category == "permanent"
        assert ConversionError("x", retryable=True).category == "transient"


class TestCategories:
    """Each concrete error reports the right category and retry flag."""

    VALIDATION_ERRORS: ClassVar[list[type[ConversionError]]] = [
        KmlParseError,
        GeoJsonValidationError,
    ]

    def test_validation_errors(self) -> None:
        for cls in self.VALIDATION_ERRORS:
            err = cls("bad input")
            assert isinstance(err, ValidationError)
            assert err.category == "validation"
            assert err.retryable is False

    def test_write_error_is_transient(self) -> None:
        err = KmlWriteError("disk full")
        assert isinstance(err, TransientError)
        assert err.category == "transient"
        assert err.retryable is True

    def test_config_error_is_conversion_error(self) -> None:
        err = ConfigValidationError("KEY", "", "must not be empty")
        assert isinstance(err, ConversionError)
        assert err.to_error_dict()["code"] == "CONFIG_VALIDATION_FAILED"


class TestConcreteErrors:
    """Stage / code defaults and extra attributes."""

    def test_parse_error_defaults(self) -> None:
        err = KmlParseError("Not valid XML")
        assert err.stage == "to_geojson"
        assert err.code == "KML_PARSE_FAILED"

    def test_schema_not_found(self) -> None:
        err = SchemaNotFoundError("parcels")
        assert isinstance(err, KmlParseError)
        assert err.schema_id == "parcels"
        assert err.code == "KML_SCHEMA_NOT_FOUND"
        assert "parcels" in str(err)

    def test_geojson_error_defaults(self) -> None:
        err = GeoJsonValidationError("no features")
        assert err.stage == "from_geojson"
        assert err.code == "GEOJSON_INVALID"

    def test_write_error_defaults(self) -> None:
        err = KmlWriteError("x")
        assert err.stage == "from_geojson"
        assert err.code == "KML_WRITE_FAILED"
