from blog_theme.core.exceptions import StorageUnavailable
from blog_theme.utils.logger import get_logger

logger = get_logger(__name__)


class InMemoryStorage:
    """Dict-backed storage. Set ``available=False`` to behave like disabled storage."""

    def __init__(self, initial: dict[str, str] | None = None, available: bool = True):
        self._values: dict[str, str] = dict(initial or {})
        self.available = available
        self.write_count = 0

    def get(self, key: str) -> str | None:
        if not self.available:
            raise StorageUnavailable("storage is disabled", key=key)
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        if not self.available:
            raise StorageUnavailable("storage is disabled", key=key)
        self._values[key] = value
        self.write_count += 1
        logger.debug(f"[STORAGE] {key} = {value!r} (memory)")
