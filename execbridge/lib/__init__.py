"""Core library modules for execbridge."""

from execbridge.lib.config import Settings, get_settings
from execbridge.lib.logging import get_logger

__all__ = [
    "Settings",
    "get_settings",
    "get_logger",
]
