from __future__ import annotations

import webbrowser

import customtkinter as ctk

from blog_theme.core.views import SocialIconView, build_social_icon
from blog_theme.utils.logger import get_logger

logger = get_logger(__name__)


class SocialIcon(ctk.CTkButton):
    """Button linking to a social profile."""

    def __init__(self, master, view: SocialIconView):
        super().__init__(
            master,
            text=view.label,
            command=self._open,
            font=("Roboto", 11),
            width=80,
            height=28,
        )
        self.view = view

    def _open(self) -> None:
        logger.info(f"[SOCIAL_ICON] Opening {self.view.href}")
        webbrowser.open(self.view.href)


class GitHubIcon(SocialIcon):
    def __init__(self, master, handle: str):
        view = build_social_icon("github", handle)
        if view is None:
            raise ValueError("GitHubIcon needs a GitHub handle")
        super().__init__(master, view)
