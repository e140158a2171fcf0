"""Version information for compandauth."""

__version__ = "0.1.0"
