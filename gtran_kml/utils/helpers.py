"""Shared helper functions used by both conversion directions.

Lenient number parsing is shared by the coordinate parser and the schema
type coercion so that malformed numbers behave the same everywhere:
the longest numeric prefix is used, and text with no numeric prefix
becomes ``float("nan")`` instead of raising.
"""

from __future__ import annotations

import math
import re
from pathlib import Path

from gtran_kml.core.constants import KML_EXTENSION

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)
_INFINITY_PREFIX = re.compile(r"\s*([+-]?)Infinity", re.ASCII)
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)", re.ASCII)

# Characters XML 1.0 does not allow in text or attribute values.
_XML_ILLEGAL = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def parse_float(text: str | None) -> float:
    """Parse the leading floating point number in *text*.

    Returns:
        The parsed value, or ``nan`` if *text* has no numeric prefix.

    Examples:
        >>> parse_float(" 12.5,3")
        12.5
        >>> math.isnan(parse_float("abc"))
        True
    """
    if not text:
        return math.nan
    match = _FLOAT_PREFIX.match(text)
    if match:
        return float(match.group(1))
    match = _INFINITY_PREFIX.match(text)
    if match:
        return -math.inf if match.group(1) == "-" else math.inf
    return math.nan


def parse_int(text: str | None) -> int | float:
    """Parse the leading base-10 integer in *text*, truncating any fraction.

    Returns:
        The parsed integer, or ``nan`` if *text* has no numeric prefix.
    """
    if not text:
        return math.nan
    match = _INT_PREFIX.match(text)
    if match is None:
        return math.nan
    return int(match.group(1))


def ensure_kml_extension(file_name: str | Path) -> str:
    """Append ``.kml`` to *file_name* unless it already ends with it.

    The check is case-insensitive, so ``"Roads.KML"`` is kept as-is.
    """
    name = str(file_name)
    if name.lower().endswith(KML_EXTENSION):
        return name
    return f"{name}{KML_EXTENSION}"


def xml_safe(text: str) -> str:
    """Remove characters that cannot appear in an XML 1.0 document.

    Control characters other than tab, newline and carriage return (and
    lone surrogates) are dropped, so arbitrary property text can always
    be serialised.
    """
    return _XML_ILLEGAL.sub("", text)
