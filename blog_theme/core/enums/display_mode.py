"""Display mode enum for the light/dark theme preference."""

from __future__ import annotations

from blog_theme.core.exceptions import InvalidPersistedValue

from .compat import StrEnum


class DisplayMode(StrEnum):
    """The two visual themes a reader can pick between."""

    LIGHT = "light"
    DARK = "dark"

    @property
    def other(self) -> DisplayMode:
        """The mode a toggle switches to."""
        return DisplayMode.DARK if self is DisplayMode.LIGHT else DisplayMode.LIGHT

    @classmethod
    def parse(cls, value: str) -> DisplayMode:
        """Parse a persisted literal, raising InvalidPersistedValue for anything else."""
        for mode in cls:
            if value == mode.value:
                return mode
        raise InvalidPersistedValue(value)
