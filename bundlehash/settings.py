"""ConfigManager — layered plugin settings and logging setup."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from bundlehash.writer import write_text

logger = logging.getLogger(__name__)

CONFIG_FILE = "bundlehash.json"
ENV_FILE = ".env"

# All known configuration keys with defaults
_CONFIG_KEYS: dict[str, dict[str, Any]] = {
    "BUNDLEHASH_DEST": {"default": "", "description": "Destination template containing [hash] or [hash:N]"},
    "BUNDLEHASH_ALGORITHM": {"default": "sha1", "description": "Digest algorithm: md5, sha1, sha256, sha512"},
    "BUNDLEHASH_REPLACE": {"default": "false", "description": "Delete the unhashed bundle after writing"},
    "BUNDLEHASH_MANIFEST": {"default": "", "description": "Manifest JSON path"},
    "BUNDLEHASH_MANIFEST_KEY": {"default": "", "description": "Manifest key (defaults to the bundle path)"},
    "BUNDLEHASH_LOG_LEVEL": {"default": "INFO", "description": "Logging level"},
}

# Config key -> plugin option name
_OPTION_KEYS = {
    "BUNDLEHASH_DEST": "dest",
    "BUNDLEHASH_ALGORITHM": "algorithm",
    "BUNDLEHASH_REPLACE": "replace",
    "BUNDLEHASH_MANIFEST": "manifest",
    "BUNDLEHASH_MANIFEST_KEY": "manifest_key",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}


def parse_bool(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


def render_env_template() -> str:
    """Return ``.env`` text listing every key, its plugin option and default."""
    lines = ["# bundlehash settings; copy to .env", ""]
    for key, info in _CONFIG_KEYS.items():
        option = _OPTION_KEYS.get(key)
        note = f" (plugin option: {option})" if option else ""
        lines.append(f"# {info['description']}{note}")
        lines.append(f"{key}={info['default']}")
        lines.append("")
    return "\n".join(lines)


class ConfigManager:
    """Resolve bundlehash settings for a project directory."""

    def generate_env_template(self, project_path: str | Path) -> Path:
        """Write ``.env.example`` under *project_path* and return its path."""
        env_path = write_text(Path(project_path) / ".env.example", render_env_template())
        logger.info("Wrote config template %s", env_path)
        return env_path

    def load_config(self, project_path: str | Path) -> dict[str, str]:
        """Load merged config: defaults -> bundlehash.json -> .env -> env vars.

        ``bundlehash.json`` may use either the ``BUNDLEHASH_*`` keys or the
        plugin option names (``dest``, ``algorithm``, ...).
        Returns a flat dict of configuration values.
        """
        root = Path(project_path)
        config: dict[str, str] = {}

        # 1. Defaults
        for key, info in _CONFIG_KEYS.items():
            config[key] = str(info["default"])

        # 2. bundlehash.json
        config_json = root / CONFIG_FILE
        if config_json.is_file():
            try:
                data = json.loads(config_json.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, OSError):
                logger.warning("Could not read %s", config_json, exc_info=True)
            else:
                by_option = {v: k for k, v in _OPTION_KEYS.items()}
                by_option["manifestKey"] = "BUNDLEHASH_MANIFEST_KEY"
                for k, v in data.items():
                    k = by_option.get(k, k)
                    config[k] = str(v).lower() if isinstance(v, bool) else str(v)

        # 3. .env file
        env_file = root / ENV_FILE
        if env_file.is_file():
            for line in env_file.read_text(encoding="utf-8").splitlines():
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if "=" in line:
                    k, v = line.split("=", 1)
                    config[k.strip()] = v.strip()

        # 4. Environment variables override all
        for key in _CONFIG_KEYS:
            env_val = os.environ.get(key)
            if env_val is not None:
                config[key] = env_val

        return config

    def load_options(self, project_path: str | Path, **overrides: Any) -> dict[str, Any]:
        """Return a plugin option bag built from config plus *overrides*.

        Empty values are dropped so the plugin's own defaults apply.
        Overrides that are ``None`` are ignored.  The result is not
        validated here; :class:`~bundlehash.plugin.HashPlugin` does that.
        """
        config = self.load_config(project_path)
        options: dict[str, Any] = {}
        for key, option in _OPTION_KEYS.items():
            value = config.get(key, "")
            if value == "":
                continue
            options[option] = parse_bool(value) if option == "replace" else value

        for option, value in overrides.items():
            if value is not None:
                options[option] = value
        return options


def configure_logging(level: str | int = "INFO") -> None:
    """Configure root logging for command-line use."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
