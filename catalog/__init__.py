"""Read-only query layer over a SQLite book catalog."""
from __future__ import annotations

import logging

from .api import CatalogApi
from .config import Config
from .constants import Mapper, Query
from .errors import (
    CatalogError,
    CatalogLookupError,
    ConnectionError,
    DecodeError,
    FetcherError,
)
from .models import Author, Book, Serie, Value, format_size
from .search import search_by_mask

__all__ = [
    "Author",
    "Book",
    "CatalogApi",
    "CatalogError",
    "CatalogLookupError",
    "Config",
    "ConnectionError",
    "DecodeError",
    "FetcherError",
    "Mapper",
    "Query",
    "Serie",
    "Value",
    "configure_logging",
    "format_size",
    "search_by_mask",
]


def configure_logging(level: str | int | None = None) -> None:
    """Basic stderr logging for applications embedding the catalog."""
    logging.basicConfig(
        level=level or Config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
