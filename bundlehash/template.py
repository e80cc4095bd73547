"""Filename templating — substitute a content digest into a destination.

A template carries one placeholder, either ``[hash]`` (full digest)
or ``[hash:N]`` (first *N* characters of the digest).  For an empty
bundle hashed with sha1::

    dist/[hash].js       ->  dist/da39a3ee5e6b4b0d3255bfef95601890afd80709.js
    dist/app.[hash:8].js ->  dist/app.da39a3ee.js
    dist/[hash]/index.js ->  dist/da39a3ee5e6b4b0d3255bfef95601890afd80709/index.js

Only the first placeholder is substituted; any later one is left as-is.
"""

from __future__ import annotations

from bundlehash.config import HASH_PATTERN


def has_template(dest: str) -> bool:
    """Return *True* if *dest* contains a ``[hash]`` placeholder."""
    return HASH_PATTERN.search(dest) is not None


def truncate_digest(digest: str, length: int | None) -> str:
    """Return the first *length* characters of *digest*.

    ``None`` keeps the whole digest, as does a length at or beyond it.
    """
    if length is None:
        return digest
    return digest[: max(length, 0)]


def format_filename(dest: str, digest: str) -> str:
    """Replace the first placeholder in *dest* with *digest*.

    Parameters
    ----------
    dest:
        Destination template, e.g. ``dist/[hash:8].js``.
    digest:
        Lowercase hex digest of the bundle content.

    Returns
    -------
    str
        The resolved path.  *dest* is returned unchanged when it holds no
        placeholder.
    """
    match = HASH_PATTERN.search(dest)
    if match is None:
        return dest

    length = match.group(1)
    segment = truncate_digest(digest, int(length) if length else None)
    return dest[: match.start()] + segment + dest[match.end():]
