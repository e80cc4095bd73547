"""Manifest emission — a one-entry JSON map from original to hashed name."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from bundlehash.writer import write_text

logger = logging.getLogger(__name__)


def generate_manifest(key: str | None, value: str) -> str:
    """Return the JSON text ``{"<key>": "<value>"}``."""
    return json.dumps({key: value})


def write_manifest(path: str | Path, key: str | None, value: str) -> Path:
    """Write the manifest for *key* -> *value* to *path*.

    Missing parent directories are created; an existing manifest is replaced.
    """
    written = write_text(path, generate_manifest(key, value))
    logger.info("Wrote manifest %s", written)
    return written
