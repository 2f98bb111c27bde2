"""Application configuration using Pydantic Settings with YAML/JSON file support."""

import json
from functools import cache
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from blog_theme.core.enums.display_mode import DisplayMode
from blog_theme.utils.logger import get_logger

logger = get_logger(__name__)

CONFIG_DIR_NAME = ".blog_theme"


def _default_config_dir() -> Path:
    return Path.home() / CONFIG_DIR_NAME


class _SiteSection(BaseModel):
    """Base for site metadata sections: accepts camelCase keys from the blog's meta config."""

    model_config = ConfigDict(populate_by_name=True)


class SocialConfig(_SiteSection):
    """Social handles shown on the site."""

    twitter: str = Field(default="@fermaddev", description="Twitter handle, with or without @")
    github: str = Field(default="ferdelamad", description="GitHub user name")
    medium: str = Field(default="", description="Medium user name")
    facebook: str = Field(default="", description="Facebook user name")


class CommentConfig(_SiteSection):
    """Comment widget identifiers."""

    disqus_short_name: str = Field(
        default="", alias="disqusShortName", description="Disqus short name"
    )
    utterances: str = Field(
        default="ferdelamad/maddev", description="Repository used to archive comments"
    )


class PostListConfig(_SiteSection):
    """Post list settings."""

    count_of_initial_post: int = Field(
        default=10,
        ge=1,
        alias="countOfInitialPost",
        description="Number of posts listed before paging",
    )


class SponsorConfig(_SiteSection):
    buy_me_a_coffee_id: str = Field(default="jbee", alias="buyMeACoffeeId")


class ShareConfig(_SiteSection):
    facebook_app_id: str = Field(default="", alias="facebookAppId")


class SiteConfig(_SiteSection):
    """Static site metadata handed to the site generator unchanged.

    Example config file section:
        site:
          title: ⚡maddev
          siteUrl: https://maddev.netlify.com
          social:
            github: ferdelamad
          configs:
            countOfInitialPost: 10
    """

    title: str = Field(default="⚡maddev", description="Site title, also the home link text")
    description: str = Field(default="Blog posted about ...")
    author: str = Field(default="fermaddev")
    introduction: str = Field(
        default="I build stuff with computers and on my spare time I'm a Software Engineer."
    )
    site_url: str = Field(default="https://maddev.netlify.com", alias="siteUrl")
    social: SocialConfig = Field(default_factory=SocialConfig)
    icon: str = Field(default="content/assets/felog.png", description="Favicon path")
    keywords: list[str] = Field(
        default_factory=lambda: ["blog", "tech blog", "javascript blog"]
    )
    comment: CommentConfig = Field(default_factory=CommentConfig)
    configs: PostListConfig = Field(default_factory=PostListConfig)
    sponsor: SponsorConfig = Field(default_factory=SponsorConfig)
    share: ShareConfig = Field(default_factory=ShareConfig)
    ga: str = Field(default="", description="Google Analytics tracking ID")
    root_path: str = Field(default="/", alias="rootPath", description="Path of the landing page")

    def as_meta_config(self) -> dict:
        """Return the metadata in the camelCase shape the site generator reads."""
        return self.model_dump(mode="json", by_alias=True)


class ThemeConfig(BaseModel):
    """Display mode preference configuration."""

    storage_key: str = Field(default="theme", description="Key holding the persisted mode")
    surface_attribute: str = Field(
        default="data-theme", description="Root element attribute styling rules read"
    )
    default_mode: DisplayMode = Field(
        default=DisplayMode.LIGHT, description="Mode used when nothing valid is persisted"
    )

    @field_serializer("default_mode", mode="plain")
    def serialize_mode(self, value: DisplayMode) -> str:
        return value.value

    @field_validator("storage_key", "surface_attribute")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class StorageConfig(BaseModel):
    """Where the display mode preference is persisted."""

    backend: str = Field(default="file", description="'file' or 'memory'")
    preferences_file: Path = Field(
        default_factory=lambda: _default_config_dir() / "preferences.json",
        description="JSON file used by the file backend",
    )

    @field_validator("backend")
    @classmethod
    def validate_backend(cls, v: str) -> str:
        v = v.lower()
        if v not in ("file", "memory"):
            raise ValueError(f"unknown storage backend {v!r}")
        return v

    @field_validator("preferences_file", mode="before")
    @classmethod
    def validate_path(cls, v):
        """Convert string paths to Path objects."""
        if isinstance(v, str):
            return Path(v).expanduser()
        return v


class AppConfig(BaseSettings):
    """Main application configuration.

    Supports YAML and JSON config files. Looks for config.yaml or config.json in:
    1. Current directory
    2. User config directory (~/.blog_theme/)
    3. Environment variables (BLOG_*), e.g. BLOG_THEME__DEFAULT_MODE=dark
    """

    model_config = SettingsConfigDict(
        env_prefix="BLOG_",
        case_sensitive=False,
        env_nested_delimiter="__",
    )

    site: SiteConfig = Field(default_factory=SiteConfig)
    theme: ThemeConfig = Field(default_factory=ThemeConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)

    @classmethod
    def _config_files(cls) -> list[Path]:
        config_dir = _default_config_dir()
        return [
            Path("config.yaml"),
            Path("config.json"),
            config_dir / "config.yaml",
            config_dir / "config.json",
        ]

    @classmethod
    def _load_config_file(cls) -> dict | None:
        """Load configuration from a single YAML or JSON file.

        Returns:
            Dictionary with config values or None if no file found
        """
        for config_file in cls._config_files():
            if not config_file.exists():
                continue
            try:
                with open(config_file, encoding="utf-8") as f:
                    if config_file.suffix in (".yaml", ".yml"):
                        data = yaml.safe_load(f)
                    else:
                        data = json.load(f)
            except (OSError, ValueError, yaml.YAMLError) as e:
                logger.warning(f"[CONFIG] Skipping unreadable config file {config_file}: {e}")
                continue
            if isinstance(data, dict):
                logger.info(f"[CONFIG] Loaded configuration from {config_file}")
                return data
            logger.warning(f"[CONFIG] Ignoring {config_file}: top level is not a mapping")

        return None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """Customize settings sources to include YAML/JSON file.

        Environment variables take priority over the file.
        """
        config_dict = cls._load_config_file()

        def file_settings():
            return config_dict or {}

        return (
            init_settings,
            env_settings,
            file_settings,
            dotenv_settings,
            file_secret_settings,
        )


# Singleton instance
_config_instance: AppConfig | None = None


@cache
def _load_default_config() -> AppConfig:
    return AppConfig()


def get_config() -> AppConfig:
    """Get the singleton configuration instance.

    Returns:
        The application configuration instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = _load_default_config()
    return _config_instance


def set_config(config: AppConfig) -> None:
    """Set the configuration instance (mainly for testing).

    Args:
        config: The configuration instance to set
    """
    global _config_instance
    _config_instance = config


def reset_config() -> None:
    """Reset the configuration instance (mainly for testing)."""
    global _config_instance
    _config_instance = None
    _load_default_config.cache_clear()
