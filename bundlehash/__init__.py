"""bundlehash — content-hashed filenames for bundler output."""

__version__ = "1.0.0"

from bundlehash.errors import (
    ConfigurationError,
    HashPluginError,
    InvalidManifestError,
    InvalidManifestKeyError,
    MissingManifestSourceError,
    MissingTemplateError,
    UnsupportedAlgorithmError,
)
from bundlehash.hasher import Hasher
from bundlehash.manifest import generate_manifest, write_manifest
from bundlehash.models import HashResult, OutputOptions, RenderedBundle, SourceMap
from bundlehash.options import HashOptions, validate_options
from bundlehash.plugin import HashPlugin, hash_built_file, hash_plugin
from bundlehash.settings import ConfigManager
from bundlehash.template import format_filename, has_template

__all__ = [
    "__version__",
    # Plugin
    "HashPlugin",
    "hash_built_file",
    "hash_plugin",
    # Options
    "ConfigManager",
    "HashOptions",
    "validate_options",
    # Data
    "HashResult",
    "OutputOptions",
    "RenderedBundle",
    "SourceMap",
    # Helpers
    "Hasher",
    "format_filename",
    "generate_manifest",
    "has_template",
    "write_manifest",
    # Errors
    "ConfigurationError",
    "HashPluginError",
    "InvalidManifestError",
    "InvalidManifestKeyError",
    "MissingManifestSourceError",
    "MissingTemplateError",
    "UnsupportedAlgorithmError",
]
