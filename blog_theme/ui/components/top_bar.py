from __future__ import annotations

import customtkinter as ctk

from blog_theme.core.views import build_top_bar
from blog_theme.ui.components.theme_switch import ThemeSwitch
from blog_theme.ui.utils.theme_controller import ThemePreferenceController


class TopBar(ctk.CTkFrame):
    """Home link (hidden on the landing page) and the theme switch."""

    def __init__(
        self,
        master,
        controller: ThemePreferenceController,
        title: str,
        current_path: str,
        root_path: str = "/",
        on_navigate=None,
    ):
        super().__init__(master, fg_color="transparent")
        self.grid_columnconfigure(0, weight=1)

        self.view = build_top_bar(title, current_path, root_path)
        self._on_navigate = on_navigate

        self.home_link = None
        if self.view.home_link is not None:
            self.home_link = ctk.CTkButton(
                self,
                text=self.view.home_link.text,
                command=self._go_home,
                font=("Roboto", 14, "bold"),
                fg_color="transparent",
                anchor="w",
            )
            self.home_link.grid(row=0, column=0, sticky="w", padx=(10, 0))

        self.theme_switch = ThemeSwitch(self, controller)
        self.theme_switch.grid(row=0, column=1, sticky="e")

    def _go_home(self) -> None:
        if self._on_navigate is not None and self.view.home_link is not None:
            self._on_navigate(self.view.home_link.href)
