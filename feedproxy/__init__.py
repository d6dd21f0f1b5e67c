"""Local proxy that strips Shorts from YouTube channel feeds."""

__version__ = "0.1.0"
