"""lxml element tree loading for KML input.

KML files in the wild use the 2.2 namespace, the legacy Google
namespace, or none at all. Tags are reduced to their local names after
parsing so the rest of the pipeline can use plain paths such as
``"./Document/Schema"`` regardless of which one a document declares.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from lxml import etree

from gtran_kml.core.exceptions import KmlParseError

if TYPE_CHECKING:
    from lxml.etree import _Element

logger = logging.getLogger("gtran_kml.conversions.to_geojson")


def read_kml(data: str | bytes | Path) -> bytes:
    """Return the raw bytes of a KML document.

    ``Path`` objects are read from disk; strings are treated as KML text.

    Raises:
        KmlParseError: If the file cannot be read or the document is empty.
    """
    if isinstance(data, Path):
        try:
            content = data.read_bytes()
        except OSError as exc:
            msg = f"Cannot read KML file: {exc}"
            raise KmlParseError(msg) from exc
    elif isinstance(data, str):
        content = data.encode("utf-8")
    else:
        content = bytes(data)

    if not content.strip():
        msg = "KML document is empty"
        raise KmlParseError(msg)
    return content


def load_tree(data: str | bytes | Path) -> _Element:
    """Parse a KML document and return its root element, namespaces stripped.

    Text input is already decoded, so any ``encoding`` named in its XML
    declaration is ignored. Bytes and files honour the declaration.

    Raises:
        KmlParseError: If the document is empty or not well-formed XML.
    """
    content = read_kml(data)
    parser = etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        huge_tree=False,
        encoding="utf-8" if isinstance(data, str) else None,
    )
    try:
        root: _Element = etree.fromstring(content, parser=parser)
    except etree.XMLSyntaxError as exc:
        msg = f"Not valid XML: {exc}"
        raise KmlParseError(msg) from exc

    strip_namespaces(root)
    return root


def strip_namespaces(root: _Element) -> None:
    """Rewrite every element tag (and attribute name) to its local name in place."""
    for elem in root.iter():
        # Comments and processing instructions have non-string tags.
        if not isinstance(elem.tag, str):
            continue
        elem.tag = etree.QName(elem).localname
        for attr_name in list(elem.attrib):
            if attr_name.startswith("{"):
                value = elem.attrib.pop(attr_name)
                elem.attrib[etree.QName(attr_name).localname] = value
    etree.cleanup_namespaces(root)
