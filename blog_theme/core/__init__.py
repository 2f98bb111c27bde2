"""Core primitives: enums, errors, configuration and pure view building."""

from .config import AppConfig, get_config, reset_config, set_config
from .enums import DisplayMode, ThemeEvent
from .exceptions import InvalidPersistedValue, StorageUnavailable, ThemePreferenceError

__all__ = [
    "AppConfig",
    "DisplayMode",
    "InvalidPersistedValue",
    "StorageUnavailable",
    "ThemeEvent",
    "ThemePreferenceError",
    "get_config",
    "reset_config",
    "set_config",
]
