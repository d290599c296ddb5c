"""
Config — optional TOML defaults for pack/unpack naming and framing.

Looked up at ``~/.pngpacker/config.toml`` unless a path is given. A missing
file means built-in defaults; a broken one is reported and ignored.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pngpacker import OUTPUT_SUFFIX, PACKED_SUFFIX, PNG_EXTENSION

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".pngpacker" / "config.toml"

# Default config
DEFAULT_CONFIG = {
    "include_header": True,  # pack signature + stored names
    "packed_suffix": PACKED_SUFFIX,
    "output_suffix": OUTPUT_SUFFIX,
    "extension": PNG_EXTENSION,
}

_TYPES = {
    "include_header": bool,
    "packed_suffix": str,
    "output_suffix": str,
    "extension": str,
}


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from TOML file, falling back to defaults."""
    config = dict(DEFAULT_CONFIG)

    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if not path.is_file():
        if config_path:
            log.warning("Config file %s not found, using defaults", path)
        return config

    try:
        import tomllib
    except ImportError:
        import tomli as tomllib

    try:
        with open(path, "rb") as f:
            file_config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        log.warning("Failed to load config from %s: %s", path, e)
        return config

    for key, value in file_config.items():
        expected = _TYPES.get(key)
        if expected is None:
            log.warning("Ignoring unknown config key %r in %s", key, path)
            continue
        if not isinstance(value, expected):
            log.warning(
                "Ignoring config key %r in %s: expected %s, got %s",
                key, path, expected.__name__, type(value).__name__,
            )
            continue
        config[key] = value

    log.debug("Loaded config from %s", path)
    return config
