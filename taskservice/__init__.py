"""Task tracking HTTP service with a JSON API and SQLite storage."""

__version__ = "0.1.0"