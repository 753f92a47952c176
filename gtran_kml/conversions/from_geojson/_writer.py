"""Persist KML text to disk.

The text is written to a temporary file next to the target and moved
into place with ``os.replace``, so a failed write never leaves a
truncated ``.kml`` behind.
"""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from pathlib import Path

from gtran_kml.core.exceptions import KmlWriteError
from gtran_kml.utils.helpers import ensure_kml_extension

logger = logging.getLogger("gtran_kml.conversions.from_geojson")


def write_kml(kml_text: str, file_name: str | Path) -> str:
    """Write *kml_text* to *file_name*, adding ``.kml`` if missing.

    Returns:
        The filename actually written.

    Raises:
        KmlWriteError: If the file cannot be written.
    """
    target = ensure_kml_extension(file_name)
    directory = Path(target).parent

    tmp_name = ""
    try:
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=directory, suffix=".tmp", delete=False
        ) as handle:
            tmp_name = handle.name
            handle.write(kml_text)
        os.replace(tmp_name, target)
    except OSError as exc:
        if tmp_name:
            with contextlib.suppress(OSError):
                os.unlink(tmp_name)
        msg = f"Cannot write KML file {target}: {exc}"
        raise KmlWriteError(msg) from exc

    logger.info("KML written | path=%s | bytes=%d", target, len(kml_text.encode("utf-8")))
    return target
