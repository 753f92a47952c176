"""Placemark property extraction and schema type coercion.

Properties are assembled in a fixed order, and a later source only
replaces an earlier value when it uses the same key:

1. ``name`` and ``description`` tags
2. ``ExtendedData/SchemaData/SimpleData`` (typed via ``<Schema>``)
3. ``ExtendedData/Data/value`` (untyped strings)
4. ``folder`` (enclosing Folder name)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gtran_kml.core.constants import BOOL_TYPE, FLOAT_TYPES, INTEGER_TYPES
from gtran_kml.core.exceptions import SchemaNotFoundError
from gtran_kml.utils.helpers import parse_float, parse_int

if TYPE_CHECKING:
    from lxml.etree import _Element

    from gtran_kml.conversions.to_geojson._schema import SchemaTable
    from gtran_kml.models.geojson import PropertyValue


def convert(value: str, to_type: str | None) -> PropertyValue:
    """Coerce ``SimpleData`` text according to its declared schema type.

    Integer types truncate, numeric text that cannot be parsed becomes
    ``nan``, ``bool`` is true only for ``"true"`` (any case), and unknown
    types return the text unchanged.
    """
    if to_type in INTEGER_TYPES:
        return parse_int(value)
    if to_type in FLOAT_TYPES:
        return parse_float(value)
    if to_type == BOOL_TYPE:
        return value.lower() == "true"
    return value


def get_properties(
    placemark: _Element, schemas: SchemaTable, folder: str = ""
) -> dict[str, PropertyValue]:
    """Build the GeoJSON properties of a Placemark.

    Args:
        placemark: Namespace-stripped ``<Placemark>`` element.
        schemas: Schema table of the document. ``SchemaData`` blocks are
            ignored when it is empty.
        folder: Name of the Folder the Placemark is listed under.

    Raises:
        SchemaNotFoundError: If the document declares schemas but a
            ``SchemaData`` refers to one that does not exist.
    """
    properties: dict[str, PropertyValue] = {}

    name = placemark.findtext("./name")
    if name:
        properties["name"] = name

    description = placemark.findtext("./description")
    if description:
        properties["description"] = description

    if schemas:
        for schema_data in placemark.findall("./ExtendedData/SchemaData"):
            schema_id = schema_data.get("schemaUrl", "").removeprefix("#")
            schema = schemas.get(schema_id)
            if schema is None:
                raise SchemaNotFoundError(schema_id)
            for field in schema_data.findall("./SimpleData"):
                field_name = field.get("name", "")
                properties[field_name] = convert(field.text or "", schema.get(field_name))

    for field in placemark.findall("./ExtendedData/Data"):
        properties[field.get("name", "")] = field.findtext("./value", default="")

    if folder:
        properties["folder"] = folder

    return properties
