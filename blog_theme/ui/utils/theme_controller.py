from __future__ import annotations

from typing import Any, Callable

from blog_theme.core.config import ThemeConfig
from blog_theme.core.enums.display_mode import DisplayMode
from blog_theme.core.enums.theme_event import ThemeEvent
from blog_theme.core.exceptions import InvalidPersistedValue, StorageUnavailable
from blog_theme.services.events.event_bus import EventBus
from blog_theme.services.storage.base import KeyValueStorage
from blog_theme.ui.utils.surface import RenderedSurface
from blog_theme.utils.logger import get_logger

logger = get_logger(__name__)

_theme_controller_instance: ThemePreferenceController | None = None


class ThemePreferenceController:
    """Owns the active display mode and keeps storage and the surface in step with it.

    Storage problems never escape: an unreadable or invalid persisted value
    falls back to the default mode, and a failed write leaves the preference
    in memory only for this session.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        surface: RenderedSurface,
        config: ThemeConfig | None = None,
    ):
        self._storage = storage
        self._surface = surface
        self.config = config or ThemeConfig()
        self._events: EventBus[ThemeEvent] = EventBus(ThemeEvent)
        self._current_mode: DisplayMode | None = None

    @property
    def current_mode(self) -> DisplayMode:
        if self._current_mode is None:
            raise RuntimeError("ThemePreferenceController.initialize() has not been called")
        return self._current_mode

    @property
    def is_dark(self) -> bool:
        return self.current_mode is DisplayMode.DARK

    @property
    def initialized(self) -> bool:
        return self._current_mode is not None

    def subscribe(self, event: ThemeEvent, callback: Callable[..., Any]) -> None:
        self._events.subscribe(event, callback)

    def unsubscribe(self, event: ThemeEvent, callback: Callable[..., Any]) -> None:
        self._events.unsubscribe(event, callback)

    def initialize(self) -> DisplayMode:
        mode = self._read_persisted()
        if mode is None:
            mode = self.config.default_mode
            logger.info(f"[THEME_CONTROLLER] No stored preference, using default {mode.value}")

        self._current_mode = mode
        self._apply(mode)

        self._events.publish(ThemeEvent.MODE_INITIALIZED, mode=mode)
        logger.info(f"[THEME_CONTROLLER] Initialized with {mode.value}")
        return mode

    def toggle(self) -> DisplayMode:
        if self._current_mode is None:
            self.initialize()

        new_mode = self.current_mode.other
        self._persist(new_mode)

        self._current_mode = new_mode
        self._apply(new_mode)

        self._events.publish(ThemeEvent.MODE_CHANGED, mode=new_mode)
        logger.info(f"[THEME_CONTROLLER] Mode changed to {new_mode.value}")
        return new_mode

    def _read_persisted(self) -> DisplayMode | None:
        key = self.config.storage_key
        try:
            raw = self._storage.get(key)
        except StorageUnavailable as e:
            logger.warning(f"[THEME_CONTROLLER] Storage unavailable, treating as empty: {e}")
            return None

        if raw is None:
            return None

        try:
            return DisplayMode.parse(raw)
        except InvalidPersistedValue as e:
            logger.warning(f"[THEME_CONTROLLER] Discarding stored {key}: {e}")
            return None

    def _persist(self, mode: DisplayMode) -> None:
        try:
            self._storage.set(self.config.storage_key, mode.value)
        except StorageUnavailable as e:
            logger.error(
                f"[THEME_CONTROLLER] Failed to persist {mode.value}, "
                f"preference will not survive this session: {e}"
            )

    def _apply(self, mode: DisplayMode) -> None:
        self._surface.apply_mode(self.config.surface_attribute, mode)


def get_theme_controller(
    storage: KeyValueStorage | None = None,
    surface: RenderedSurface | None = None,
    config: ThemeConfig | None = None,
) -> ThemePreferenceController:
    """Process-wide controller for the desktop app.

    The first call must supply storage and surface; later calls return the
    same instance.
    """
    global _theme_controller_instance  # noqa: PLW0603

    if _theme_controller_instance is None:
        if storage is None or surface is None:
            raise RuntimeError("get_theme_controller() needs storage and surface on first use")
        _theme_controller_instance = ThemePreferenceController(storage, surface, config)

    return _theme_controller_instance


def reset_theme_controller() -> None:
    """Forget the process-wide controller (mainly for testing)."""
    global _theme_controller_instance  # noqa: PLW0603
    _theme_controller_instance = None
