from __future__ import annotations

import customtkinter as ctk

from blog_theme.core.config import SiteConfig
from blog_theme.core.views import build_footer
from blog_theme.ui.components.social_icon import GitHubIcon


class Footer(ctk.CTkFrame):
    def __init__(self, master, site: SiteConfig):
        super().__init__(master, fg_color="transparent")

        self.view = build_footer(site)
        self.icons = []
        for column, icon_view in enumerate(self.view.icons):
            icon = GitHubIcon(self, icon_view.handle)
            icon.grid(row=0, column=column, padx=5, pady=5)
            self.icons.append(icon)
