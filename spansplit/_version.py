"""Version information for spansplit."""

__version__ = "0.1.0"
