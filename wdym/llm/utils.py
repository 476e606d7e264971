"""
Utility functions for the AI client.

Response text extraction and the optional request/response debug log.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from .. import config_file

logger = logging.getLogger(__name__)

# Debug log directory
DEBUG_LOG_DIR = Path.home() / ".local" / "share" / "wdym"
DEBUG_LOG_FILE = DEBUG_LOG_DIR / "debug.log"


def extract_text_from_content(content: Any) -> str:
    """
    Concatenate the text parts of a message content.

    Content is either a plain string or a list of parts; parts that are not
    text (images, tool calls, ...) are ignored.
    """
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        text_parts = []
        for item in content:
            if isinstance(item, dict):
                if item.get("type") == "text":
                    text_parts.append(item.get("text") or "")
            elif getattr(item, "type", None) == "text":
                text_parts.append(getattr(item, "text", "") or "")
        return "".join(text_parts)
    return str(content)


def debug_log(label: str, data: Any) -> None:
    """Append a timestamped entry to the debug log file."""
    if not config_file.get("debug"):
        return
    try:
        DEBUG_LOG_DIR.mkdir(parents=True, exist_ok=True)
        with open(DEBUG_LOG_FILE, "a") as f:
            ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
            f.write(f"\n{'='*72}\n")
            f.write(f"[{ts}] {label}\n")
            f.write(f"{'='*72}\n")
            if isinstance(data, (dict, list)):
                f.write(json.dumps(data, indent=2, default=str))
            else:
                f.write(str(data))
            f.write("\n")
    except OSError as e:
        # never break the CLI for debug logging
        logger.debug(f"Could not write debug log: {e}")
