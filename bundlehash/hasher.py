"""Content hashing utilities using stdlib hashlib."""

from __future__ import annotations

import hashlib
from pathlib import Path

from bundlehash.config import DEFAULT_ALGORITHM


class Hasher:
    """Hex digests for strings, bytes, and files."""

    @staticmethod
    def hash_bytes(data: bytes, algorithm: str = DEFAULT_ALGORITHM) -> str:
        """Return the lowercase hex digest of *data*."""
        return hashlib.new(algorithm, data).hexdigest()

    @staticmethod
    def hash_string(text: str, algorithm: str = DEFAULT_ALGORITHM) -> str:
        """Return the hex digest of the UTF-8 encoding of *text*."""
        return Hasher.hash_bytes(text.encode("utf-8"), algorithm)

    @staticmethod
    def hash_file(path: str | Path, algorithm: str = DEFAULT_ALGORITHM) -> str:
        """Return the hex digest of the raw bytes of the file at *path*.

        Agrees with :meth:`hash_string` on the decoded content of a UTF-8
        file, line endings included.
        """
        with Path(path).open("rb") as f:
            return hashlib.file_digest(f, algorithm).hexdigest()

    @staticmethod
    def digest_length(algorithm: str = DEFAULT_ALGORITHM) -> int:
        """Natural length of the hex digest for *algorithm*."""
        return hashlib.new(algorithm).digest_size * 2
