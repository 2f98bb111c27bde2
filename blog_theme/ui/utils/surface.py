"""Rendered surfaces the display mode is applied to."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from blog_theme.core.enums.display_mode import DisplayMode
from blog_theme.utils.logger import get_logger

logger = get_logger(__name__)


@runtime_checkable
class RenderedSurface(Protocol):
    """Root element whose mode attribute external styling rules key off."""

    def apply_mode(self, attribute: str, mode: DisplayMode) -> None:
        ...


class RootElementSurface:
    """A root element described by its attributes and class list.

    After ``apply_mode`` the attribute holds the mode value and the class list
    contains exactly one of the mode names.
    """

    def __init__(self, tag: str = "html"):
        self.tag = tag
        self.attributes: dict[str, str] = {}
        self.class_list: list[str] = []

    def apply_mode(self, attribute: str, mode: DisplayMode) -> None:
        self.attributes[attribute] = mode.value
        mode_names = {m.value for m in DisplayMode}
        self.class_list = [c for c in self.class_list if c not in mode_names]
        self.class_list.append(mode.value)

    def render_open_tag(self) -> str:
        attrs = "".join(f' {name}="{value}"' for name, value in sorted(self.attributes.items()))
        classes = f' class="{" ".join(self.class_list)}"' if self.class_list else ""
        return f"<{self.tag}{attrs}{classes}>"
