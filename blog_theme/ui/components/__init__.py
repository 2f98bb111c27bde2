from .footer import Footer
from .social_icon import GitHubIcon, SocialIcon
from .theme_switch import ThemeSwitch
from .top_bar import TopBar

__all__ = [
    "Footer",
    "GitHubIcon",
    "SocialIcon",
    "ThemeSwitch",
    "TopBar",
]
