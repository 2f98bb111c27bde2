"""Services backing the display mode preference."""
