"""Unified conversion exception taxonomy.

Every domain exception inherits from ``ConversionError`` and carries
structured context fields (stage, code, retryable) so callers can tell
bad input apart from an I/O failure without string matching.

Taxonomy categories
-------------------
- ``ValidationError``: malformed KML/GeoJSON input, never retryable.
- ``TransientError``: environmental failures (e.g. disk full), retryable.

Coordinate parsing and schema type coercion are lenient and never raise;
malformed numbers become ``float("nan")``.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base exception for all conversion errors.

    Attributes:
        message: Human-readable error description.
        stage: Conversion stage where the error occurred
            (e.g. ``"to_geojson"``, ``"from_geojson"``).
        code: Machine-readable error code (e.g. ``"KML_PARSE_FAILED"``).
        retryable: Whether repeating the call could succeed.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, TransientError):
            return "transient"
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(ConversionError):
    """Malformed input. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class TransientError(ConversionError):
    """Environmental failure that may succeed on retry."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", True)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Concrete errors
# ---------------------------------------------------------------------------


class KmlParseError(ValidationError):
    """Raised when a KML document cannot be parsed."""

    default_stage = "to_geojson"
    default_code = "KML_PARSE_FAILED"


class SchemaNotFoundError(KmlParseError):
    """Raised when ``SchemaData@schemaUrl`` names a schema the document lacks.

    Attributes:
        schema_id: The identifier that could not be resolved.
    """

    default_code = "KML_SCHEMA_NOT_FOUND"

    def __init__(self, schema_id: str) -> None:
        self.schema_id = schema_id
        super().__init__(f"SchemaData references unknown schema {schema_id!r}")


class GeoJsonValidationError(ValidationError):
    """Raised when the GeoJSON input is not a FeatureCollection."""

    default_stage = "from_geojson"
    default_code = "GEOJSON_INVALID"


class KmlWriteError(TransientError):
    """Raised when the KML output file cannot be written."""

    default_stage = "from_geojson"
    default_code = "KML_WRITE_FAILED"
