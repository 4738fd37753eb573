"""URL shortener web service with click analytics and JSON-file storage."""

__version__ = "0.1.0"
__all__ = ["__version__"]