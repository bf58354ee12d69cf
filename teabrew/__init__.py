"""Terminal tea brewing timer."""

__version__ = "0.1.0"
