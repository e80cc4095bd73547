"""Exceptions raised by bundlehash.

Filesystem failures are deliberately absent: ``OSError`` and its subclasses
propagate unchanged from the I/O layer, as do exceptions raised by a user
callback.
"""

from __future__ import annotations

from bundlehash.config import (
    MSG_NO_ALGORITHM,
    MSG_NO_MANIFEST,
    MSG_NO_MANIFEST_KEY,
    MSG_NO_MANIFEST_SOURCE,
    MSG_NO_TEMPLATE,
)


class HashPluginError(Exception):
    """Base class for errors raised by bundlehash itself."""


class ConfigurationError(HashPluginError):
    """Raised when plugin options fail validation.

    Always raised before any file is created, modified or deleted.
    """

    message: str = "[Hash] Invalid configuration"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class MissingTemplateError(ConfigurationError):
    """Destination is absent or lacks a ``[hash]`` placeholder."""

    message = MSG_NO_TEMPLATE


class UnsupportedAlgorithmError(ConfigurationError):
    """``algorithm`` is not one of the supported digests."""

    message = MSG_NO_ALGORITHM


class InvalidManifestError(ConfigurationError):
    """``manifest`` was given but is not a string."""

    message = MSG_NO_MANIFEST


class InvalidManifestKeyError(ConfigurationError):
    """``manifest_key`` was given but is not a string."""

    message = MSG_NO_MANIFEST_KEY


class MissingManifestSourceError(ConfigurationError):
    """``manifest`` is set but there is neither a manifest key nor a bundle path."""

    message = MSG_NO_MANIFEST_SOURCE
