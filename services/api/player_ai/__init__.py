"""Player performance tracking and suitability prediction service."""

__version__ = "0.1.0"
