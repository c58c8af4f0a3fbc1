"""Store directory service: tag filters and free-text search over a JSON store list."""

__version__ = "0.1.0"
