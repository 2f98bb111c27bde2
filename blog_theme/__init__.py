"""Blog theme: display-mode preference controller and site chrome components."""

__version__ = "0.1.0"
