"""Tests for schema resolution, type coercion and property extraction.

Covers:
- ``find_schemas`` field-type tables
- ``convert`` coercion per schema type (int, float, bool, passthrough)
- Property order: name, description, SchemaData, Data, folder
- Missing schemas raise ``SchemaNotFoundError``
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import pytest

from gtran_kml.conversions.to_geojson import convert, find_schemas, get_properties, load_tree
from gtran_kml.core.exceptions import SchemaNotFoundError

if TYPE_CHECKING:
    from lxml.etree import _Element

KML_OPEN = '<kml xmlns="http://www.opengis.net/kml/2.2">'

PARCEL_SCHEMA = """
<Schema name="parcel" id="parcel">
  <SimpleField name="id" type="int"/>
  <SimpleField name="area" type="double"/>
  <SimpleField name="active" type="bool"/>
  <SimpleField name="title" type="string"/>
</Schema>
"""


def _document(body: str) -> _Element:
    return load_tree(f"{KML_OPEN}<Document>{body}</Document></kml>")


def _first_placemark(root: _Element) -> _Element:
    placemark = root.find(".//Placemark")
    assert placemark is not None
    return placemark


# ---------------------------------------------------------------------------
# Schema resolution
# ---------------------------------------------------------------------------


class TestFindSchemas:
    """Schema id -> field types."""

    def test_single_schema(self) -> None:
        schemas = find_schemas(_document(PARCEL_SCHEMA))
        assert schemas == {
            "parcel": {"id": "int", "area": "double", "active": "bool", "title": "string"}
        }

    def test_multiple_schemas(self) -> None:
        schemas = find_schemas(
            _document(
                '<Schema id="a"><SimpleField name="x" type="int"/></Schema>'
                '<Schema id="b"><SimpleField name="y" type="float"/></Schema>'
            )
        )
        assert schemas == {"a": {"x": "int"}, "b": {"y": "float"}}

    def test_no_schemas(self) -> None:
        assert find_schemas(_document("<name>empty</name>")) == {}

    def test_document_root(self) -> None:
        root = load_tree(
            '<Document><Schema id="a"><SimpleField name="x" type="bool"/></Schema></Document>'
        )
        assert find_schemas(root) == {"a": {"x": "bool"}}


# ---------------------------------------------------------------------------
# Type coercion
# ---------------------------------------------------------------------------


class TestConvert:
    """String -> typed value coercion."""

    @pytest.mark.parametrize("type_tag", ["int", "uint", "short", "ushort"])
    def test_integer_types(self, type_tag: str) -> None:
        value = convert("5", type_tag)
        assert value == 5
        assert isinstance(value, int)

    def test_integer_truncates(self) -> None:
        assert convert("7.8", "int") == 7

    @pytest.mark.parametrize("type_tag", ["float", "double"])
    def test_float_types(self, type_tag: str) -> None:
        assert convert("1250.5", type_tag) == 1250.5

    @pytest.mark.parametrize("text", ["True", "true", "TRUE"])
    def test_bool_true(self, text: str) -> None:
        assert convert(text, "bool") is True

    @pytest.mark.parametrize("text", ["false", "1", "yes", ""])
    def test_bool_false(self, text: str) -> None:
        assert convert(text, "bool") is False

    def test_unknown_type_passthrough(self) -> None:
        assert convert("5", "string") == "5"
        assert convert("5", None) == "5"

    def test_invalid_number_is_nan(self) -> None:
        assert math.isnan(convert("n/a", "int"))
        assert math.isnan(convert("n/a", "double"))


# ---------------------------------------------------------------------------
# Property extraction
# ---------------------------------------------------------------------------


class TestGetProperties:
    """Property sources and their order."""

    def test_name_and_description(self) -> None:
        root = _document(
            "<Placemark><name>Point2</name><description>test</description></Placemark>"
        )
        properties = get_properties(_first_placemark(root), {})
        assert properties == {"name": "Point2", "description": "test"}

    def test_absent_tags_omitted(self) -> None:
        root = _document("<Placemark/>")
        assert get_properties(_first_placemark(root), {}) == {}

    def test_schema_data_typed(self) -> None:
        root = _document(
            PARCEL_SCHEMA
            + "<Placemark><ExtendedData><SchemaData schemaUrl=\"#parcel\">"
            '<SimpleData name="id">5</SimpleData>'
            '<SimpleData name="area">12.5</SimpleData>'
            '<SimpleData name="active">True</SimpleData>'
            '<SimpleData name="title">Lot</SimpleData>'
            '<SimpleData name="undeclared">raw</SimpleData>'
            "</SchemaData></ExtendedData></Placemark>"
        )
        properties = get_properties(_first_placemark(root), find_schemas(root))
        assert properties == {
            "id": 5,
            "area": 12.5,
            "active": True,
            "title": "Lot",
            "undeclared": "raw",
        }

    def test_schema_url_without_hash(self) -> None:
        root = _document(
            PARCEL_SCHEMA
            + '<Placemark><ExtendedData><SchemaData schemaUrl="parcel">'
            '<SimpleData name="id">9</SimpleData>'
            "</SchemaData></ExtendedData></Placemark>"
        )
        assert get_properties(_first_placemark(root), find_schemas(root)) == {"id": 9}

    def test_untyped_data_is_string(self) -> None:
        root = _document(
            "<Placemark><ExtendedData>"
            '<Data name="id"><value>1</value></Data>'
            '<Data name="empty"/>'
            "</ExtendedData></Placemark>"
        )
        assert get_properties(_first_placemark(root), {}) == {"id": "1", "empty": ""}

    def test_name_tag_kept_alongside_unrelated_schema_fields(self) -> None:
        root = _document(
            PARCEL_SCHEMA
            + "<Placemark><name>Tag name</name><ExtendedData>"
            '<SchemaData schemaUrl="#parcel"><SimpleData name="title">Schema title</SimpleData>'
            "</SchemaData></ExtendedData></Placemark>"
        )
        properties = get_properties(_first_placemark(root), find_schemas(root))
        assert properties["name"] == "Tag name"
        assert properties["title"] == "Schema title"
        assert list(properties) == ["name", "title"]

    def test_colliding_key_takes_later_source(self) -> None:
        root = _document(
            "<Placemark><name>Tag name</name><ExtendedData>"
            '<Data name="name"><value>Data name</value></Data>'
            "</ExtendedData></Placemark>"
        )
        assert get_properties(_first_placemark(root), {})["name"] == "Data name"

    def test_folder_added_last(self) -> None:
        root = _document("<Placemark><name>A</name></Placemark>")
        properties = get_properties(_first_placemark(root), {}, "Roads")
        assert list(properties.items()) == [("name", "A"), ("folder", "Roads")]

    def test_empty_folder_omitted(self) -> None:
        root = _document("<Placemark><name>A</name></Placemark>")
        assert "folder" not in get_properties(_first_placemark(root), {}, "")

    def test_schema_data_ignored_without_schemas(self) -> None:
        root = _document(
            "<Placemark><ExtendedData><SchemaData schemaUrl=\"#parcel\">"
            '<SimpleData name="id">5</SimpleData>'
            "</SchemaData></ExtendedData></Placemark>"
        )
        assert get_properties(_first_placemark(root), {}) == {}

    def test_missing_schema_raises(self) -> None:
        root = _document(
            PARCEL_SCHEMA
            + "<Placemark><ExtendedData><SchemaData schemaUrl=\"#other\">"
            '<SimpleData name="id">5</SimpleData>'
            "</SchemaData></ExtendedData></Placemark>"
        )
        with pytest.raises(SchemaNotFoundError) as exc_info:
            get_properties(_first_placemark(root), find_schemas(root))
        assert exc_info.value.schema_id == "other"
