"""Tests for the customtkinter site chrome widgets, with Tk patched out."""

from unittest.mock import Mock, patch

import pytest

from blog_theme.core.config import SiteConfig, SocialConfig
from blog_theme.core.enums import DisplayMode
from blog_theme.services.storage import InMemoryStorage
from blog_theme.ui.utils.surface import RootElementSurface
from blog_theme.ui.utils.theme_controller import ThemePreferenceController

ctk = pytest.importorskip("customtkinter")

from blog_theme.ui.components.footer import Footer  # noqa: E402
from blog_theme.ui.components.social_icon import GitHubIcon  # noqa: E402
from blog_theme.ui.components.theme_switch import ThemeSwitch  # noqa: E402
from blog_theme.ui.components.top_bar import TopBar  # noqa: E402


@pytest.fixture
def frame_mocks():
    """Let CTkFrame subclasses be built without a Tk root."""
    with patch.object(ctk.CTkFrame, "__init__", return_value=None), patch.object(
        ctk.CTkFrame, "grid"
    ) as grid, patch.object(ctk.CTkFrame, "grid_columnconfigure"), patch.object(
        ctk.CTkFrame, "destroy"
    ) as destroy:
        yield Mock(grid=grid, destroy=destroy)


@pytest.fixture
def mock_switch():
    with patch("customtkinter.CTkSwitch") as switch_cls:
        yield switch_cls.return_value


def _controller(stored=None):
    storage = InMemoryStorage({"theme": stored} if stored else None)
    controller = ThemePreferenceController(storage, RootElementSurface())
    controller.initialize()
    return controller, storage


class TestThemeSwitch:
    def test_renders_current_mode(self, frame_mocks, mock_switch):
        controller, _ = _controller("dark")

        ThemeSwitch(None, controller)

        mock_switch.configure.assert_called_with(text="🌙 Dark")
        mock_switch.select.assert_called_once()

    def test_click_toggles_controller(self, frame_mocks, mock_switch):
        controller, storage = _controller()
        switch = ThemeSwitch(None, controller)
        mock_switch.deselect.assert_called_once()

        switch._on_toggle()

        assert controller.current_mode == DisplayMode.DARK
        assert storage.get("theme") == "dark"
        mock_switch.configure.assert_called_with(text="🌙 Dark")
        mock_switch.select.assert_called_once()

    def test_rerenders_when_mode_changes_elsewhere(self, frame_mocks, mock_switch):
        controller, _ = _controller("dark")
        ThemeSwitch(None, controller)

        controller.toggle()

        mock_switch.configure.assert_called_with(text="☀️ Light")

    def test_destroy_unsubscribes(self, frame_mocks, mock_switch):
        controller, _ = _controller()
        switch = ThemeSwitch(None, controller)
        calls_before = mock_switch.configure.call_count

        switch.destroy()
        controller.toggle()

        assert mock_switch.configure.call_count == calls_before
        frame_mocks.destroy.assert_called_once()


class TestTopBar:
    def test_root_page_has_no_home_button(self, frame_mocks, mock_switch):
        controller, _ = _controller()

        with patch("customtkinter.CTkButton") as button_cls:
            bar = TopBar(None, controller, title="⚡maddev", current_path="/", root_path="/")

        assert bar.home_link is None
        button_cls.assert_not_called()
        assert isinstance(bar.theme_switch, ThemeSwitch)

    def test_home_button_navigates_to_root(self, frame_mocks, mock_switch):
        controller, _ = _controller()
        on_navigate = Mock()

        with patch("customtkinter.CTkButton") as button_cls:
            bar = TopBar(
                None,
                controller,
                title="notes",
                current_path="/blog/posts/hello",
                root_path="/blog",
                on_navigate=on_navigate,
            )

        assert button_cls.call_args.kwargs["text"] == "notes"
        bar._go_home()
        on_navigate.assert_called_once_with("/blog")


class TestFooter:
    def test_github_icon_created(self, frame_mocks):
        with patch("blog_theme.ui.components.footer.GitHubIcon") as icon_cls:
            footer = Footer(None, SiteConfig())

        icon_cls.assert_called_once_with(footer, "ferdelamad")
        assert footer.icons == [icon_cls.return_value]

    def test_no_icon_without_github_handle(self, frame_mocks):
        with patch("blog_theme.ui.components.footer.GitHubIcon") as icon_cls:
            footer = Footer(None, SiteConfig(social=SocialConfig(github="")))

        icon_cls.assert_not_called()
        assert footer.icons == []


class TestGitHubIcon:
    @patch("blog_theme.ui.components.social_icon.webbrowser.open")
    def test_opens_profile(self, mock_open):
        with patch.object(ctk.CTkButton, "__init__", return_value=None):
            icon = GitHubIcon(None, "ferdelamad")

        icon._open()

        mock_open.assert_called_once_with("https://github.com/ferdelamad")

    def test_requires_handle(self):
        with pytest.raises(ValueError):
            GitHubIcon(None, "  ")
