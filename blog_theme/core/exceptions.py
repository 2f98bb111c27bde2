"""Errors raised while reading or writing the display mode preference."""


class ThemePreferenceError(Exception):
    """Base class for display mode preference errors."""


class StorageUnavailable(ThemePreferenceError):
    """Exception raised when persisted storage cannot be read or written."""

    def __init__(self, message: str, key: str = ""):
        """
        Initialize storage error.

        Args:
            message: Error message
            key: Storage key being accessed when the failure happened
        """
        self.message = message
        self.key = key
        super().__init__(f"{key}: {message}" if key else message)


class InvalidPersistedValue(ThemePreferenceError):
    """Exception raised when the stored value is not a recognised display mode."""

    def __init__(self, value: object):
        self.value = value
        self.message = f"Unrecognised display mode {value!r}"
        super().__init__(self.message)
