"""Build-time HTML event cards for the static site."""

__version__ = "0.1.0"
