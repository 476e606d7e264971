"""AI client modules for wdym."""

from .client import GeminiClient

__all__ = ["GeminiClient"]
