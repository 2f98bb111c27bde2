import argparse
import sys

from blog_theme.utils.common import ensure_gui_available
from blog_theme.utils.logger import get_logger

logger = get_logger(__name__)


ensure_gui_available()

import customtkinter as ctk  # noqa: E402

from blog_theme.core.config import get_config  # noqa: E402
from blog_theme.services.storage import create_storage  # noqa: E402
from blog_theme.ui.components import Footer, TopBar  # noqa: E402
from blog_theme.ui.utils.ctk_surface import CTkAppearanceSurface  # noqa: E402
from blog_theme.ui.utils.theme_controller import get_theme_controller  # noqa: E402


class BlogThemeApp(ctk.CTk):
    def __init__(self, current_path: str | None = None):
        super().__init__()

        self.config = get_config()
        self.site = self.config.site

        self.title(self.site.title)
        self.geometry("720x420")

        self.controller = get_theme_controller(
            create_storage(self.config.storage),
            CTkAppearanceSurface(self),
            self.config.theme,
        )
        self.controller.initialize()

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self.top_bar = None
        self._show_top_bar(current_path or self.site.root_path)

        self.intro_label = ctk.CTkLabel(
            self, text=self.site.introduction, font=("Roboto", 13), wraplength=600
        )
        self.intro_label.grid(row=1, column=0, sticky="nsew", padx=20)

        self.footer = Footer(self, self.site)
        self.footer.grid(row=2, column=0, pady=(0, 10))

        logger.info("Blog theme preview initialized")

    def _show_top_bar(self, current_path: str) -> None:
        if self.top_bar is not None:
            self.top_bar.destroy()

        self.current_path = current_path
        self.top_bar = TopBar(
            self,
            self.controller,
            title=self.site.title,
            current_path=current_path,
            root_path=self.site.root_path,
            on_navigate=self._navigate,
        )
        self.top_bar.grid(row=0, column=0, sticky="ew", padx=10, pady=(10, 0))

    def _navigate(self, href: str) -> None:
        logger.info(f"[MAIN_APP] Navigating to {href}")
        self._show_top_bar(href)


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="blog-theme", description="Preview the blog chrome and its light/dark switch."
    )
    parser.add_argument(
        "--path",
        default=None,
        help="Page path being previewed; the home link is hidden on the root path",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    try:
        logger.info("[MAIN_APP] Starting blog theme preview")
        app = BlogThemeApp(args.path)
        app.mainloop()
    except Exception as e:
        logger.error(f"[MAIN_APP] Unexpected error - exiting: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
