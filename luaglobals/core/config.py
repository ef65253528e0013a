"""Configuration management for luaglobals.

Settings are read from environment variables, optionally through a .env file.
"""

import os
from typing import Optional

from dotenv import load_dotenv

from luaglobals.models.config import RuntimeSettings

load_dotenv()


def _str_to_bool(value: str) -> bool:
    """Convert string to boolean. Accepts: 'true', '1', 'yes', 'on' (case-insensitive)"""
    return value.lower() in ("true", "1", "yes", "on")


class EnvConfig:
    """Settings from environment variables"""

    def __init__(self):
        self.sandbox: bool = _str_to_bool(
            os.environ.get("LUAGLOBALS_SANDBOX", "true")
        )
        self.log_level: str = os.environ.get("LUAGLOBALS_LOG_LEVEL", "INFO")
        self.log_file: Optional[str] = os.environ.get("LUAGLOBALS_LOG_FILE")

    @classmethod
    def from_env(cls) -> "EnvConfig":
        """Load configuration from environment variables"""
        return cls()

    def to_settings(self) -> RuntimeSettings:
        return RuntimeSettings(
            sandbox=self.sandbox, log_level=self.log_level, log_file=self.log_file
        )


_cached_settings: Optional[RuntimeSettings] = None


def set_settings(settings: RuntimeSettings) -> None:
    """Override the runtime settings"""
    global _cached_settings
    _cached_settings = settings


def clear_settings_cache() -> None:
    """Clear the settings cache"""
    global _cached_settings
    _cached_settings = None


def get_settings() -> RuntimeSettings:
    """Get current runtime settings, loading them from the environment on first use"""
    global _cached_settings
    if _cached_settings is None:
        _cached_settings = EnvConfig.from_env().to_settings()
    return _cached_settings
