"""Theme event enum for display mode notifications."""

from enum import Enum, auto


class ThemeEvent(Enum):
    """Display mode event types."""

    MODE_INITIALIZED = auto()
    MODE_CHANGED = auto()
