"""Version information for neo-appcheck."""

__version__ = "1.0.0"
