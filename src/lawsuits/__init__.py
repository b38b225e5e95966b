"""Read-only query service over an in-memory collection of legal lawsuits."""

__version__ = "0.1.0"
