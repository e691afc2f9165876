"""Version information for neo-validators."""

__version__ = "0.1.0"
