"""Content-addressed symbol descriptors for shared KML styles.

A ``SymbolStyle`` pairs a geometry type with the caller's symbol value.
Two descriptors that are structurally equal serialise to the same
canonical JSON and therefore share one style identifier.

Canonical form: object keys sorted, compact separators, integral floats
written as integers (``1.0`` and ``1`` are one value), tuples as lists.
Values JSON cannot represent are tagged with their type so they never
collide with a plain string.
"""

from __future__ import annotations

import hashlib
import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class SymbolStyle:
    """Visual style shared by every feature with the same descriptor.

    Attributes:
        geom_type: GeoJSON geometry type of the styled features.
        symbol: Caller-supplied symbol value (usually a dict such as
            ``{"color": "#ff0000", "width": 2}``).
    """

    geom_type: str
    symbol: Any = None

    def to_dict(self) -> dict[str, object]:
        return {"geomType": self.geom_type, "symbol": self.symbol}

    def canonical_json(self) -> str:
        """Serialise in canonical form (see module docstring)."""
        return json.dumps(
            canonicalize(self.to_dict()),
            sort_keys=True,
            separators=(",", ":"),
        )

    @property
    def style_id(self) -> str:
        """md5 hex digest of the canonical serialisation."""
        return hashlib.md5(self.canonical_json().encode("utf-8")).hexdigest()  # noqa: S324


def canonicalize(value: Any) -> Any:
    """Return *value* rewritten into JSON-native types with one spelling per value."""
    if value is None or isinstance(value, bool | str | int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else value
    if isinstance(value, Mapping):
        return {str(key): canonicalize(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [canonicalize(item) for item in value]
    return {"$type": f"{type(value).__module__}.{type(value).__qualname__}", "value": repr(value)}


#: Style identifier -> descriptor, in first-seen order.
SymbolTable = dict[str, SymbolStyle]
