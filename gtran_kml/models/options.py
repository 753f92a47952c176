"""Pydantic model for GeoJSON -> KML conversion options.

Unset fields fall back to ``ConversionConfig`` (environment) defaults at
conversion time. Field aliases accept the camelCase spelling used in
JSON configuration files (``featureStyleKey``, ``documentName``,
``documentDescription``).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gtran_kml.core.config import ConversionConfig


class KmlExportOptions(BaseModel):
    """Options accepted by ``from_geojson``.

    Attributes:
        symbol: Style symbol shared by all features, or a callable
            ``(feature_dict) -> symbol`` evaluated per feature. ``None``
            disables style processing entirely.
        feature_style_key: Property that receives each feature's style id.
        name: Feature property written as the Placemark name.
        document_name: KML ``<Document>`` name.
        document_description: KML ``<Document>`` description.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    symbol: Any = None
    feature_style_key: str | None = Field(default=None, alias="featureStyleKey")
    name: str | None = None
    document_name: str | None = Field(default=None, alias="documentName")
    document_description: str | None = Field(default=None, alias="documentDescription")

    @field_validator("feature_style_key")
    @classmethod
    def _style_key_not_blank(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            msg = "feature_style_key must not be blank"
            raise ValueError(msg)
        return value

    @property
    def has_symbol(self) -> bool:
        """Whether style deduplication and splicing should run."""
        return self.symbol is not None

    def resolve(self, config: ConversionConfig) -> KmlExportOptions:
        """Return a copy with every unset (or empty) field taken from *config*."""
        return self.model_copy(
            update={
                "feature_style_key": self.feature_style_key or config.feature_style_key,
                "name": self.name or config.name_property,
                "document_name": self.document_name or config.document_name,
                "document_description": self.document_description
                or config.document_description,
            }
        )
