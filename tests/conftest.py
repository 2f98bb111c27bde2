"""Pytest configuration and fixtures."""

import os

import pytest

from blog_theme.core.config import AppConfig, ThemeConfig, reset_config
from blog_theme.services.storage import InMemoryStorage
from blog_theme.ui.utils.surface import RootElementSurface
from blog_theme.ui.utils.theme_controller import (
    ThemePreferenceController,
    reset_theme_controller,
)


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def surface():
    return RootElementSurface()


@pytest.fixture
def theme_config():
    return ThemeConfig()


@pytest.fixture
def controller(storage, surface, theme_config):
    return ThemePreferenceController(storage, surface, theme_config)


@pytest.fixture
def isolated_config_files(tmp_path, monkeypatch):
    """Point config discovery at a temp dir and clear BLOG_* env vars."""
    for name in list(os.environ):
        if name.upper().startswith("BLOG_"):
            monkeypatch.delenv(name, raising=False)

    candidates = [tmp_path / "config.yaml", tmp_path / "config.json"]
    monkeypatch.setattr(AppConfig, "_config_files", classmethod(lambda cls: candidates))
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_singletons():
    yield
    reset_config()
    reset_theme_controller()
