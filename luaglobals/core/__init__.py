"""Core functionality"""

from .config import get_settings, set_settings, clear_settings_cache
from .logging import setup_logging, get_logger

__all__ = [
    "get_settings",
    "set_settings",
    "clear_settings_cache",
    "setup_logging",
    "get_logger",
]
