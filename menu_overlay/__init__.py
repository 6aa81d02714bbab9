"""Menu overlay layout: place a context menu next to its preview inside a viewport."""

__version__ = "0.1.0"
