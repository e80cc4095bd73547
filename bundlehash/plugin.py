"""HashPlugin — post-build hook that writes a content-addressed copy of a bundle.

Once the bundler has written its output, :meth:`HashPlugin.on_write`:

1. validates the options (nothing is written if this fails),
2. hashes the rendered code and resolves the destination template,
3. deletes the unhashed artifact when ``replace`` is set,
4. writes the manifest when ``manifest`` is set,
5. creates the destination's parent directories,
6. emits the source map, inline or as a ``.map`` sibling,
7. writes the hashed bundle,
8. calls ``callback`` with the resolved path.

Steps run in that order and nothing is rolled back if a later one fails.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from bundlehash.config import PLUGIN_NAME, SOURCEMAP_COMMENT, SOURCEMAP_SUFFIX
from bundlehash.errors import MissingManifestSourceError
from bundlehash.hasher import Hasher
from bundlehash.manifest import write_manifest
from bundlehash.models import HashResult, OutputOptions, RenderedBundle, SourceMap
from bundlehash.options import HashOptions, validate_options
from bundlehash.template import format_filename
from bundlehash.writer import ensure_parent_dir, remove_file, write_text

logger = logging.getLogger(__name__)


class HashPlugin:
    """Bundler plugin that renames its output after the content hash.

    Parameters
    ----------
    options:
        Option bag (``dest``/``output``, ``algorithm``, ``replace``,
        ``manifest``, ``manifest_key``, ``callback``).  Keyword arguments
        are merged on top.  The bag is copied here and validated on every
        :meth:`on_write`.
    """

    name = PLUGIN_NAME

    def __init__(self, options: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        merged = dict(options or {})
        merged.update(kwargs)
        self._options = merged

    @property
    def options(self) -> dict[str, Any]:
        return dict(self._options)

    def validate(self) -> HashOptions:
        """Validate the captured options without writing anything."""
        return validate_options(self._options)

    def on_write(
        self,
        output: OutputOptions | Mapping[str, Any],
        data: RenderedBundle | Mapping[str, Any],
    ) -> HashResult:
        """Hash *data* and write it under the resolved destination.

        Parameters
        ----------
        output:
            Output options the bundler wrote with (``file``, ``sourcemap``).
        data:
            Rendered code and optional source map.

        Returns
        -------
        HashResult
            Resolved path and what else was written.

        Raises
        ------
        ConfigurationError
            Invalid options; raised before any filesystem change.
        OSError
            Any filesystem failure, unwrapped.
        """
        options = self.validate()
        if not isinstance(output, OutputOptions):
            output = OutputOptions.model_validate(output)
        if not isinstance(data, RenderedBundle):
            data = RenderedBundle.model_validate(data)

        built_file = output.built_file
        if options.manifest and not (options.manifest_key or built_file):
            raise MissingManifestSourceError()

        digest = Hasher.hash_string(data.code, options.algorithm)
        file_name = format_filename(options.dest, digest)
        logger.debug("Resolved %s -> %s (%s)", options.dest, file_name, options.algorithm)

        if options.replace:
            if built_file is None:
                raise FileNotFoundError("No built file to replace")
            remove_file(built_file)
            logger.info("Removed original bundle %s", built_file)

        if options.manifest:
            write_manifest(options.manifest, options.manifest_key or built_file, file_name)

        ensure_parent_dir(file_name)

        code = data.code
        map_file = None
        if output.sourcemap and data.map is not None:
            code, map_file = self._emit_sourcemap(code, data.map, file_name, output.sourcemap)

        write_text(file_name, code)
        logger.info("Wrote hashed bundle %s", file_name)

        if options.callback is not None:
            options.callback(file_name)

        return HashResult(
            file_name=file_name,
            digest=digest,
            manifest=options.manifest,
            map_file=map_file,
            replaced=options.replace,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _emit_sourcemap(
        code: str,
        source_map: SourceMap,
        file_name: str,
        mode: bool | str,
    ) -> tuple[str, str | None]:
        """Point *source_map* at *file_name* and append its comment to *code*."""
        basename = Path(file_name).name
        source_map.file = basename

        if mode == "inline":
            url = source_map.to_url()
            map_file = None
        else:
            url = basename + SOURCEMAP_SUFFIX
            map_file = file_name + SOURCEMAP_SUFFIX
            write_text(map_file, source_map.to_string())
            logger.info("Wrote source map %s", map_file)

        return code + SOURCEMAP_COMMENT.format(url=url), map_file


def hash_plugin(options: Mapping[str, Any] | None = None, **kwargs: Any) -> HashPlugin:
    """Create a :class:`HashPlugin`; the usual entry point from a bundler config."""
    return HashPlugin(options, **kwargs)


def hash_built_file(
    bundle_path: str | Path,
    *,
    map_path: str | Path | None = None,
    sourcemap: bool | str = False,
    **options: Any,
) -> HashResult:
    """Run the hashing pass on a bundle that is already on disk.

    Parameters
    ----------
    bundle_path:
        The bundler's output file; used as ``output.file``.
    map_path:
        Optional source map JSON for the bundle.
    sourcemap:
        ``False``, ``True`` (sibling ``.map`` file) or ``"inline"``.
    **options:
        Plugin options, as for :class:`HashPlugin`.
    """
    plugin = HashPlugin(options)
    # Options are checked before the bundle is read.
    plugin.validate()

    bundle = Path(bundle_path)
    # Raw bytes: CRLF line endings stay part of the hashed content.
    code = bundle.read_bytes().decode("utf-8")

    source_map = None
    if map_path is not None:
        source_map = SourceMap.model_validate(
            json.loads(Path(map_path).read_bytes().decode("utf-8"))
        )

    output = OutputOptions(file=str(bundle_path), sourcemap=sourcemap)
    return plugin.on_write(output, RenderedBundle(code=code, map=source_map))
