"""CI automation for the curated repository catalog."""

__version__ = "1.0.0"
