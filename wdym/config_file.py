"""
Optional config file support for wdym.

Reads ~/.config/wdym/config.toml if it exists.
Missing config or invalid values fall back to defaults.
"""

import logging
import sys
import tomllib
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

CONFIG_PATH = Path.home() / ".config" / "wdym" / "config.toml"

DEFAULTS: Dict[str, Any] = {
    "model": None,  # None means use env var or built-in default
    "base_url": None,
    "preview_chars": 500,
    "diff_lines": 5,
    "debug": False,
}

_config: Dict[str, Any] = {}
_loaded = False


def _validate_int(value: Any, key: str, minimum: int = 1) -> int | None:
    """Validate an integer config value. Returns None if invalid."""
    if isinstance(value, bool):
        print(f"wdym: config '{key}' must be an integer, ignoring", file=sys.stderr)
        return None
    try:
        val = int(value)
        if val < minimum:
            print(f"wdym: config '{key}' must be >= {minimum}, ignoring", file=sys.stderr)
            return None
        return val
    except (TypeError, ValueError):
        print(f"wdym: config '{key}' must be an integer, ignoring", file=sys.stderr)
        return None


def _validate_str(value: Any, key: str) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    print(f"wdym: config '{key}' must be a non-empty string, ignoring", file=sys.stderr)
    return None


def load_config() -> Dict[str, Any]:
    """
    Load config from TOML file, merging with defaults.

    Returns a dict with keys: model, base_url, preview_chars,
    diff_lines, debug.
    """
    global _config, _loaded

    if _loaded:
        return _config

    _config = dict(DEFAULTS)
    _loaded = True

    if not CONFIG_PATH.exists():
        logger.debug("No config file at %s, using defaults", CONFIG_PATH)
        return _config

    try:
        with open(CONFIG_PATH, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        print(f"wdym: error reading config: {e}", file=sys.stderr)
        return _config

    # [provider] section
    provider_section = data.get("provider", {})
    if isinstance(provider_section, dict):
        for key in ("model", "base_url"):
            value = provider_section.get(key)
            if value is not None:
                val = _validate_str(value, key)
                if val is not None:
                    _config[key] = val

    # [display] section
    display_section = data.get("display", {})
    if isinstance(display_section, dict):
        preview_chars = display_section.get("preview_chars")
        if preview_chars is not None:
            val = _validate_int(preview_chars, "preview_chars", minimum=50)
            if val is not None:
                _config["preview_chars"] = val

        diff_lines = display_section.get("diff_lines")
        if diff_lines is not None:
            val = _validate_int(diff_lines, "diff_lines")
            if val is not None:
                _config["diff_lines"] = val

    # [debug] section
    debug_section = data.get("debug", {})
    if isinstance(debug_section, dict):
        enabled = debug_section.get("enabled")
        if isinstance(enabled, bool):
            _config["debug"] = enabled

    logger.debug("Loaded config: %s", _config)
    return _config


def get(key: str) -> Any:
    """Get a config value by key."""
    cfg = load_config()
    return cfg.get(key, DEFAULTS.get(key))


def reset():
    """Reset loaded config (for testing)."""
    global _config, _loaded
    _config = {}
    _loaded = False
