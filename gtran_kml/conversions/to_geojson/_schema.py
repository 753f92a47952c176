"""Typed ``<Schema>`` resolution.

A document declares its typed fields once, and any number of Placemarks
refer to them via ``SchemaData@schemaUrl``::

    <Schema name="parcels" id="parcels">
        <SimpleField name="area" type="double"/>
    </Schema>

becomes ``{"parcels": {"area": "double"}}``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lxml.etree import _Element

#: Field name -> declared type tag.
Schema = dict[str, str]

#: Schema id -> Schema.
SchemaTable = dict[str, Schema]


def find_schemas(root: _Element) -> SchemaTable:
    """Collect every ``Document/Schema`` of a namespace-stripped KML tree.

    Returns:
        Mapping of schema id to field types. Empty when the document
        declares no schemas.
    """
    schema_nodes = root.findall("./Document/Schema")
    if root.tag == "Document":
        schema_nodes.extend(root.findall("./Schema"))

    schemas: SchemaTable = {}
    for schema_node in schema_nodes:
        schema: Schema = {}
        for field_node in schema_node.findall("./SimpleField"):
            schema[field_node.get("name", "")] = field_node.get("type", "")
        schemas[schema_node.get("id", "")] = schema
    return schemas
