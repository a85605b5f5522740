"""Exceptions raised by the catalog layer."""
from __future__ import annotations

__all__ = [
    "CatalogError",
    "ConnectionError",
    "CatalogLookupError",
    "DecodeError",
    "FetcherError",
]


class CatalogError(Exception):
    """Base class for every catalog failure."""


class ConnectionError(CatalogError):
    """The store could not be opened or verified."""


class CatalogLookupError(CatalogError, KeyError):
    """A Query has no registered SQL text."""

    def __str__(self) -> str:
        return Exception.__str__(self)


class DecodeError(CatalogError, ValueError):
    """A result row is missing a column or holds a value of the wrong type."""

    def __init__(self, column: str, message: str):
        super().__init__(f"column {column!r}: {message}")
        self.column = column


class FetcherError(CatalogError):
    """A next-char fetcher was handed a mask it cannot extend."""
