"""Global configuration: constants, defaults, messages."""

import re

# Name reported to the bundler's plugin host
PLUGIN_NAME = "hash"

# Digest algorithms accepted in the ``algorithm`` option
ALGORITHMS = ("md5", "sha1", "sha256", "sha512")

DEFAULT_ALGORITHM = "sha1"

DEFAULT_OPTIONS = {
    "algorithm": DEFAULT_ALGORITHM,
    "replace": False,
}

# ``[hash]`` or ``[hash:N]``; only the first match in a template is substituted.
HASH_PATTERN = re.compile(r"\[hash(?::(\d+))?\]")

# Source map emission
SOURCEMAP_SUFFIX = ".map"
SOURCEMAP_COMMENT = "\n//# sourceMappingURL={url}"
SOURCEMAP_URL_PREFIX = "data:application/json;charset=utf-8;base64,"

# Fixed error messages, one per validation check
MSG_NO_TEMPLATE = "[Hash] Destination filename must contain `[hash]` template."
MSG_NO_ALGORITHM = "[Hash] Algorithm can only be one of: " + ", ".join(ALGORITHMS)
MSG_NO_MANIFEST = "[Hash] Manifest filename must be a string"
MSG_NO_MANIFEST_KEY = "[Hash] Key for manifest filename must be a string"
MSG_NO_MANIFEST_SOURCE = "[Hash] Manifest needs a manifest key when the bundle has no output file"
