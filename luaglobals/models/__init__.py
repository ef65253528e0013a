"""Data models"""

from .config import RuntimeSettings

__all__ = ["RuntimeSettings"]
