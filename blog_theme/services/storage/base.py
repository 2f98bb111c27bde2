from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStorage(Protocol):
    """Durable string-keyed storage for the display mode preference.

    Implementations raise StorageUnavailable when the backend cannot be read
    or written. A missing key reads as None.
    """

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...
