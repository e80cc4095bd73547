"""Plugin options — validation of the user-supplied option bag.

The option bag is loosely typed on the way in.  :func:`validate_options`
runs the four checks in a fixed order, each raising its own
:class:`~bundlehash.errors.ConfigurationError`, and returns an immutable
:class:`HashOptions` on success.  Nothing here touches the filesystem.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Mapping

from pydantic import BaseModel, ConfigDict

from bundlehash.config import ALGORITHMS, DEFAULT_ALGORITHM, DEFAULT_OPTIONS
from bundlehash.errors import (
    InvalidManifestError,
    InvalidManifestKeyError,
    MissingTemplateError,
    UnsupportedAlgorithmError,
)
from bundlehash.template import has_template

logger = logging.getLogger(__name__)

# camelCase spellings accepted for bundler-style configs
_ALIASES = {"manifestKey": "manifest_key"}

_KNOWN_KEYS = {"dest", "output", "algorithm", "replace", "manifest", "manifest_key", "callback"}


class HashOptions(BaseModel):
    """Validated, read-only plugin configuration."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    dest: str
    algorithm: str = DEFAULT_ALGORITHM
    replace: bool = False
    manifest: str | None = None
    manifest_key: str | None = None
    callback: Callable[[str], Any] | None = None


def normalise_options(raw: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge *raw* over the defaults, folding camelCase aliases."""
    options: dict[str, Any] = dict(DEFAULT_OPTIONS)
    for key, value in (raw or {}).items():
        key = _ALIASES.get(key, key)
        if key not in _KNOWN_KEYS:
            logger.debug("Ignoring unknown option %r", key)
        options[key] = value
    return options


def destination_of(options: Mapping[str, Any]) -> Any:
    """Return the effective destination template.

    ``output.file`` wins over ``dest`` when an ``output`` section is given;
    ``output`` may be a mapping or any object with a ``file`` attribute.
    The value is returned as given, ``Path`` or ``str``.
    """
    output = options.get("output")
    if output:
        if isinstance(output, Mapping):
            return output.get("file")
        return getattr(output, "file", None)
    return options.get("dest")


def validate_options(raw: Mapping[str, Any] | None) -> HashOptions:
    """Validate *raw* and return the resulting :class:`HashOptions`.

    Raises
    ------
    MissingTemplateError
        No destination, or one without a ``[hash]`` placeholder.
    UnsupportedAlgorithmError
        ``algorithm`` outside :data:`~bundlehash.config.ALGORITHMS`.
    InvalidManifestError
        ``manifest`` given but not a string.
    InvalidManifestKeyError
        ``manifest_key`` given but not a string.
    """
    options = normalise_options(raw)

    dest = destination_of(options)
    if isinstance(dest, os.PathLike):
        dest = os.fspath(dest)
    if not dest or not isinstance(dest, str) or not has_template(dest):
        raise MissingTemplateError()

    algorithm = options.get("algorithm")
    if algorithm is None:
        algorithm = DEFAULT_ALGORITHM
    if algorithm not in ALGORITHMS:
        raise UnsupportedAlgorithmError()

    manifest = options.get("manifest")
    if manifest and not isinstance(manifest, str):
        raise InvalidManifestError()

    manifest_key = options.get("manifest_key")
    if manifest_key and not isinstance(manifest_key, str):
        raise InvalidManifestKeyError()

    callback = options.get("callback")
    if callback is not None and not callable(callback):
        logger.warning("Ignoring non-callable callback %r", callback)
        callback = None

    return HashOptions(
        dest=dest,
        algorithm=algorithm,
        replace=bool(options.get("replace")),
        manifest=manifest or None,
        manifest_key=manifest_key or None,
        callback=callback,
    )
