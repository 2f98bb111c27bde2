"""Persisted key-value storage backends."""

from blog_theme.core.config import StorageConfig
from blog_theme.utils.logger import get_logger

from .base import KeyValueStorage
from .json_file import JsonFileStorage
from .memory import InMemoryStorage

logger = get_logger(__name__)


def create_storage(config: StorageConfig) -> KeyValueStorage:
    """Build the backend named by the storage configuration."""
    if config.backend == "memory":
        logger.info("[STORAGE] Using in-memory storage, preference will not survive restarts")
        return InMemoryStorage()
    return JsonFileStorage(config.preferences_file)


__all__ = [
    "InMemoryStorage",
    "JsonFileStorage",
    "KeyValueStorage",
    "create_storage",
]
