"""Core enums."""

from .display_mode import DisplayMode
from .theme_event import ThemeEvent

__all__ = [
    "DisplayMode",
    "ThemeEvent",
]
