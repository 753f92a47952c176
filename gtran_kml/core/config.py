"""Conversion defaults loaded from environment variables.

All values have defaults matching the library's documented behaviour, so
``ConversionConfig()`` works without any environment set up. Explicit
options passed to ``from_geojson`` always win over these values.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if a value is empty,
    catching bad configuration before any conversion runs.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from gtran_kml.core.constants import (
    DEFAULT_DOCUMENT_DESCRIPTION,
    DEFAULT_DOCUMENT_NAME,
    DEFAULT_FEATURE_STYLE_KEY,
    DEFAULT_NAME_PROPERTY,
)
from gtran_kml.core.exceptions import ConversionError


class ConfigValidationError(ConversionError):
    """Raised when a configuration value is invalid.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class ConversionConfig:
    """Immutable GeoJSON -> KML defaults.

    Attributes:
        feature_style_key: Feature property that receives the style id.
        name_property: Feature property written as the Placemark name.
        document_name: ``<Document><name>`` of the emitted KML.
        document_description: ``<Document><description>`` of the emitted KML.
    """

    feature_style_key: str = DEFAULT_FEATURE_STYLE_KEY
    name_property: str = DEFAULT_NAME_PROPERTY
    document_name: str = DEFAULT_DOCUMENT_NAME
    document_description: str = DEFAULT_DOCUMENT_DESCRIPTION

    @classmethod
    def from_env(cls) -> ConversionConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If any value is set but empty.
        """
        config = cls(
            feature_style_key=os.getenv("GTRAN_KML_FEATURE_STYLE_KEY", DEFAULT_FEATURE_STYLE_KEY),
            name_property=os.getenv("GTRAN_KML_NAME_PROPERTY", DEFAULT_NAME_PROPERTY),
            document_name=os.getenv("GTRAN_KML_DOCUMENT_NAME", DEFAULT_DOCUMENT_NAME),
            document_description=os.getenv(
                "GTRAN_KML_DOCUMENT_DESCRIPTION", DEFAULT_DOCUMENT_DESCRIPTION
            ),
        )
        _validate(config)
        return config


def _validate(config: ConversionConfig) -> None:
    """Reject empty values.  Raises ``ConfigValidationError``."""
    if not config.feature_style_key.strip():
        raise ConfigValidationError(
            "GTRAN_KML_FEATURE_STYLE_KEY",
            config.feature_style_key,
            "must not be empty",
        )

    if not config.name_property.strip():
        raise ConfigValidationError(
            "GTRAN_KML_NAME_PROPERTY",
            config.name_property,
            "must not be empty",
        )

    if not config.document_name:
        raise ConfigValidationError(
            "GTRAN_KML_DOCUMENT_NAME",
            config.document_name,
            "must not be empty",
        )

    if not config.document_description:
        raise ConfigValidationError(
            "GTRAN_KML_DOCUMENT_DESCRIPTION",
            config.document_description,
            "must not be empty",
        )
