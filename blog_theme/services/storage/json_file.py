"""Preference storage kept in a small JSON object on disk."""

from __future__ import annotations

import contextlib
import json
from pathlib import Path
from typing import Any

from blog_theme.core.exceptions import StorageUnavailable
from blog_theme.utils.logger import get_logger

logger = get_logger(__name__)


class JsonFileStorage:
    """Stores string values in a JSON object file, one key per preference.

    A missing file reads as empty storage. A file that cannot be opened is
    reported as StorageUnavailable. A file that opens but does not hold a JSON
    object is unreadable for ``get`` and is overwritten by ``set``.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def _load(self, key: str, discard_corrupt: bool = False) -> dict[str, Any]:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise StorageUnavailable(f"cannot read {self.path}: {e}", key=key) from e
        except ValueError as e:
            if discard_corrupt:
                logger.warning(f"[STORAGE] Overwriting undecodable {self.path}: {e}")
                return {}
            raise StorageUnavailable(f"cannot decode {self.path}: {e}", key=key) from e

        if not isinstance(data, dict):
            if discard_corrupt:
                logger.warning(f"[STORAGE] Overwriting {self.path}: not a JSON object")
                return {}
            raise StorageUnavailable(f"{self.path} does not hold a JSON object", key=key)
        return data

    def get(self, key: str) -> str | None:
        value = self._load(key).get(key)
        if value is None:
            return None
        # Non-string values are handed back as text so the caller can reject them
        return value if isinstance(value, str) else json.dumps(value)

    def set(self, key: str, value: str) -> None:
        data = self._load(key, discard_corrupt=True)
        data[key] = value

        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            tmp_path.replace(self.path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp_path.unlink()
            raise StorageUnavailable(f"cannot write {self.path}: {e}", key=key) from e

        logger.info(f"[STORAGE] Saved {key} to {self.path}")
