"""Filesystem helpers — directory creation, text writes, deletes.

Errors from the OS are not caught here; they reach the caller unchanged.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def ensure_parent_dir(path: str | Path) -> Path:
    """Create the parent directory of *path* and any missing ancestors.

    A directory that already exists is left alone.  Returns the parent.
    """
    parent = Path(path).parent
    parent.mkdir(parents=True, exist_ok=True)
    return parent


def write_text(path: str | Path, content: str) -> Path:
    """Write *content* to *path* as UTF-8, creating dirs if needed.

    An existing file is overwritten.  Newlines are written as given, so the
    bytes on disk are exactly the encoded *content*.  Returns the path written.
    """
    target = Path(path)
    ensure_parent_dir(target)
    with target.open("w", encoding="utf-8", newline="") as f:
        f.write(content)
    logger.debug("Wrote %d characters to %s", len(content), target)
    return target


def remove_file(path: str | Path) -> None:
    """Delete the file at *path*; a missing file raises ``FileNotFoundError``."""
    Path(path).unlink()
    logger.debug("Removed %s", path)
