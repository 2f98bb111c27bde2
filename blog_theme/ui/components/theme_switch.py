from __future__ import annotations

import customtkinter as ctk

from blog_theme.core.enums.display_mode import DisplayMode
from blog_theme.core.enums.theme_event import ThemeEvent
from blog_theme.core.views import build_theme_switch
from blog_theme.ui.utils.theme_controller import ThemePreferenceController
from blog_theme.utils.logger import get_logger

logger = get_logger(__name__)


class ThemeSwitch(ctk.CTkFrame):
    def __init__(self, master, controller: ThemePreferenceController):
        super().__init__(master, fg_color="transparent")

        self._controller = controller
        self._controller.subscribe(ThemeEvent.MODE_CHANGED, self._on_mode_changed)

        self.appearance_switch = ctk.CTkSwitch(
            self,
            text="",
            command=self._on_toggle,
            font=("Roboto", 11),
            width=90,
        )
        self.appearance_switch.grid(row=0, column=0, padx=(0, 15))

        self._render(self._controller.current_mode)

    def _render(self, mode: DisplayMode) -> None:
        view = build_theme_switch(mode)
        self.appearance_switch.configure(text=view.label)
        if view.checked:
            self.appearance_switch.select()
        else:
            self.appearance_switch.deselect()

    def _on_toggle(self) -> None:
        new_mode = self._controller.toggle()
        logger.info(f"[THEME_SWITCH] Switched to {new_mode.value}")

    def _on_mode_changed(self, mode: DisplayMode) -> None:
        self._render(mode)

    def destroy(self):
        self._controller.unsubscribe(ThemeEvent.MODE_CHANGED, self._on_mode_changed)
        super().destroy()
