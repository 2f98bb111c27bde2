"""Declarative view models for the site chrome.

Builders here are pure: they take configuration and the current mode or path
and return immutable view descriptions. The customtkinter widgets in
``blog_theme.ui.components`` only render what these builders produce.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from blog_theme.core.config import SiteConfig
from blog_theme.core.enums.display_mode import DisplayMode
from blog_theme.core.navigation import is_root

_MODE_ICONS = {
    DisplayMode.LIGHT: "☀️",
    DisplayMode.DARK: "🌙",
}

_PROFILE_URLS = {
    "github": "https://github.com/{handle}",
    "twitter": "https://twitter.com/{handle}",
    "medium": "https://medium.com/@{handle}",
    "facebook": "https://www.facebook.com/{handle}",
}


class _View(BaseModel):
    model_config = ConfigDict(frozen=True)


class LinkView(_View):
    text: str
    href: str


class SocialIconView(_View):
    network: str
    handle: str
    href: str
    label: str


class ThemeSwitchView(_View):
    mode: DisplayMode
    icon: str
    label: str
    checked: bool = Field(description="Switch is on when dark mode is active")


class TopBarView(_View):
    home_link: LinkView | None = None
    show_theme_switch: bool = True


class FooterView(_View):
    icons: tuple[SocialIconView, ...] = ()


def build_theme_switch(mode: DisplayMode) -> ThemeSwitchView:
    return ThemeSwitchView(
        mode=mode,
        icon=_MODE_ICONS[mode],
        label=f"{_MODE_ICONS[mode]} {mode.value.capitalize()}",
        checked=mode is DisplayMode.DARK,
    )


def build_top_bar(title: str, current_path: str, root_path: str) -> TopBarView:
    """Top navigation: a home link everywhere except the landing page, then the theme switch."""
    if is_root(current_path, root_path):
        return TopBarView()
    return TopBarView(home_link=LinkView(text=title, href=root_path))


def build_social_icon(network: str, handle: str) -> SocialIconView | None:
    handle = handle.strip().lstrip("@")
    if not handle:
        return None
    template = _PROFILE_URLS[network]
    return SocialIconView(
        network=network,
        handle=handle,
        href=template.format(handle=handle),
        label=network.capitalize(),
    )


def build_social_icons(site: SiteConfig) -> list[SocialIconView]:
    icons = []
    for network in _PROFILE_URLS:
        icon = build_social_icon(network, getattr(site.social, network))
        if icon is not None:
            icons.append(icon)
    return icons


def build_footer(site: SiteConfig) -> FooterView:
    github = build_social_icon("github", site.social.github)
    return FooterView(icons=(github,) if github else ())
