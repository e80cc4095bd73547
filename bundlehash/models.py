"""Data exchanged with the bundler: output options, rendered code, source maps.

The bundler owns these objects; bundlehash reads them and, for a source map,
rewrites only the ``file`` field before emitting it.
"""

from __future__ import annotations

import base64
import json
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from bundlehash.config import SOURCEMAP_URL_PREFIX


class SourceMap(BaseModel):
    """A version 3 source map as produced by the bundler.

    Fields not declared here (``x_google_ignoreList``, ``debugId``, ...) are
    kept and written back after the declared ones.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    version: int = 3
    file: str | None = None
    source_root: str | None = Field(default=None, alias="sourceRoot")
    sources: list[str] = Field(default_factory=list)
    sources_content: list[str | None] = Field(
        default_factory=list, alias="sourcesContent",
    )
    names: list[str] = Field(default_factory=list)
    mappings: str = ""

    def to_string(self) -> str:
        """Serialise as compact JSON, keys in source map order.

        ``sourceRoot`` is omitted when unset.
        """
        data = self.model_dump(by_alias=True)
        if self.source_root is None:
            data.pop("sourceRoot", None)
        return json.dumps(data, separators=(",", ":"))

    def to_url(self) -> str:
        """Return the map embedded in a base64 ``data:`` URL."""
        encoded = base64.b64encode(self.to_string().encode("utf-8")).decode("ascii")
        return SOURCEMAP_URL_PREFIX + encoded

    def __str__(self) -> str:
        return self.to_string()


class OutputOptions(BaseModel):
    """Where the bundler wrote its artifact and how maps were requested."""

    file: str | None = None
    dest: str | None = None
    """Legacy name for ``file``."""

    sourcemap: bool | Literal["inline"] = False

    @property
    def built_file(self) -> str | None:
        """Path of the unhashed artifact on disk."""
        return self.file or self.dest


class RenderedBundle(BaseModel):
    """Code (and optional map) the bundler rendered for one output."""

    code: str
    map: SourceMap | None = None


class HashResult(BaseModel):
    """Outcome of one post-build hashing pass."""

    file_name: str
    digest: str
    manifest: str | None = None
    map_file: str | None = None
    replaced: bool = False
