from __future__ import annotations

import customtkinter as ctk

from blog_theme.core.enums.display_mode import DisplayMode
from blog_theme.utils.logger import get_logger

logger = get_logger(__name__)


class CTkAppearanceSurface:
    """customtkinter's global appearance mode, the surface every CTk widget draws from."""

    def __init__(self, root=None):
        self._root = root
        self.attributes: dict[str, str] = {}

    def apply_mode(self, attribute: str, mode: DisplayMode) -> None:
        ctk.set_appearance_mode(mode.value)
        self.attributes[attribute] = mode.value
        if self._root is not None:
            self._root.update_idletasks()
        logger.debug(f"[SURFACE] Appearance mode set to {mode.value}")
