"""In-memory movie/director catalog served over GraphQL."""

__version__ = "0.1.0"
