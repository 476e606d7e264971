"""
Configuration for wdym.

Loads the API key and model settings from the environment (optionally a
.env file), with overrides from ~/.config/wdym/config.toml. Everything a
run needs is assembled once into an immutable Settings.
"""

import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from . import config_file

logger = logging.getLogger(__name__)

API_KEY_ENV = "GEMINI_API_KEY"

DEFAULT_MODEL = "gemini-1.5-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"

# Load .env from project root (wdym/config.py -> wdym/ -> project root)
_env_paths = [
    Path(__file__).parent.parent / ".env",
    Path.cwd() / ".env",
]


def load_env() -> bool:
    """Load the first .env found. Existing environment variables win."""
    for env_path in _env_paths:
        if env_path.exists():
            load_dotenv(dotenv_path=env_path)
            logger.debug(f"Loaded .env from {env_path}")
            return True
    logger.debug(".env not found; using environment variables if set.")
    return False


@dataclass(frozen=True)
class Settings:
    """Flags, arguments and connection settings for a single run."""

    api_key: str
    query: str = ""
    file_path: str = ""
    shell: bool = False
    write: bool = False
    code: bool = False
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None


def resolve_model(environ: Mapping[str, str]) -> str:
    """config.toml overrides env vars, which override the built-in default."""
    return config_file.get("model") or environ.get("WDYM_MODEL") or DEFAULT_MODEL


def resolve_base_url(environ: Mapping[str, str]) -> str:
    return config_file.get("base_url") or environ.get("WDYM_BASE_URL") or DEFAULT_BASE_URL


def resolve_timeout(environ: Mapping[str, str]) -> Optional[float]:
    """No timeout unless WDYM_TIMEOUT is set to a positive number."""
    raw = environ.get("WDYM_TIMEOUT", "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid WDYM_TIMEOUT: {raw!r}")
        return None
    return value if value > 0 else None
