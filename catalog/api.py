"""Read-only query API over a SQLite book catalog."""
from __future__ import annotations

import logging
from typing import Any, Iterable

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from .config import Config
from .constants import Query
from .errors import CatalogError, FetcherError
from .helpers import create_catalog_engine, expanding_list
from .mappers import decode_rows
from .models import Author, Book, Serie, Value
from .queries import get_sql
from .search import search_by_mask

__all__ = ["CatalogApi"]

logger = logging.getLogger(__name__)


class CatalogApi:
    """Main query interface."""

    def __init__(self, database: str | None = None, config: Config | None = None):
        cfg = config or Config()
        self.database = database or cfg.DATABASE
        self.engine = create_catalog_engine(self.database)

    def close(self) -> None:
        self.engine.dispose()

    def __enter__(self) -> CatalogApi:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def is_readonly(self) -> bool:
        with self.engine.connect() as conn:
            return bool(conn.execute(text("PRAGMA query_only")).scalar())

    # === Execution ===

    def _fetch(self, query: Query, params: dict[str, Any] | None = None, ids: Iterable[int] | None = None) -> list:
        """Run ``query`` and decode every row with its mapper."""
        stmt = text(get_sql(query))
        params = dict(params or {})
        if ids is not None:
            bind, values = expanding_list("ids", ids)
            stmt = stmt.bindparams(bind)
            params.update(values)

        logger.debug("%s %r", query.value, params)
        try:
            with self.engine.connect() as conn:
                result = conn.execute(stmt, params)
                return decode_rows(query, result.keys(), result)
        except SQLAlchemyError as e:
            logger.error("%s failed: %s", query.value, e)
            raise CatalogError(f"{query.value} failed: {e}") from e

    def _next_char(self, query: Query, prefix: str) -> list[str]:
        if not isinstance(prefix, str):
            raise FetcherError(f"cannot extend {prefix!r}: not text")
        return self._fetch(query, {"length": len(prefix) + 1, "prefix": prefix})

    # === Genres ===

    def meta_genres(self) -> list[str]:
        return self._fetch(Query.META_GENRES)

    def genres_by_meta(self, meta: str) -> list[Value]:
        return self._fetch(Query.GENRES_BY_META, {"meta": meta})

    # === Authors ===

    def authors_next_char_by_prefix(self, prefix: str) -> list[str]:
        return self._next_char(Query.AUTHOR_NEXT_CHAR_BY_PREFIX, prefix)

    def search_authors_by_prefix(self, prefix: str) -> tuple[list[str], list[str]]:
        """Autocomplete author last names."""
        return search_by_mask(prefix, self.authors_next_char_by_prefix)

    def authors_by_last_name(self, name: str) -> list[Author]:
        return self._fetch(Query.AUTHORS_BY_LAST_NAME, {"name": name})

    def author_by_ids(self, fid: int, mid: int, lid: int) -> list[Author]:
        return self._fetch(Query.AUTHOR_BY_IDS, {"fid": fid, "mid": mid, "lid": lid})

    def authors_by_books_ids(self, ids: Iterable[int]) -> list[Author]:
        return self._fetch(Query.AUTHORS_BY_BOOKS_IDS, ids=ids)

    def authors_by_genre_id(self, genre_id: int) -> list[Author]:
        return self._fetch(Query.AUTHORS_BY_GENRE_ID, {"genre_id": genre_id})

    # === Series ===

    def series_next_char_by_prefix(self, prefix: str) -> list[str]:
        return self._next_char(Query.SERIE_NEXT_CHAR_BY_PREFIX, prefix)

    def search_series_by_prefix(self, prefix: str) -> tuple[list[str], list[str]]:
        """Autocomplete series names."""
        return search_by_mask(prefix, self.series_next_char_by_prefix)

    def series_by_serie_name(self, name: str) -> list[Serie]:
        return self._fetch(Query.SERIES_BY_SERIE_NAME, {"name": name})

    def series_by_ids(self, ids: Iterable[int]) -> list[Serie]:
        return self._fetch(Query.SERIES_BY_IDS, ids=ids)

    def series_by_genre_id(self, genre_id: int) -> list[Serie]:
        return self._fetch(Query.SERIES_BY_GENRE_ID, {"genre_id": genre_id})

    def series_by_author_ids(self, fid: int, mid: int, lid: int) -> list[Serie]:
        return self._fetch(Query.SERIES_BY_AUTHOR_IDS, {"fid": fid, "mid": mid, "lid": lid})

    # === Books ===

    def books_next_char_by_prefix(self, prefix: str) -> list[str]:
        return self._next_char(Query.BOOK_NEXT_CHAR_BY_PREFIX, prefix)

    def search_books_by_prefix(self, prefix: str) -> tuple[list[str], list[str]]:
        """Autocomplete book titles."""
        return search_by_mask(prefix, self.books_next_char_by_prefix)

    def books_by_book_title(self, title: str) -> list[Book]:
        return self._fetch(Query.BOOKS_BY_TITLE, {"title": title})

    def book_by_id(self, book_id: int) -> list[Book]:
        """One entry per author of the book; empty if the id is unknown."""
        return self._fetch(Query.BOOK_BY_ID, {"book_id": book_id})

    def books_by_author_ids(self, fid: int, mid: int, lid: int) -> list[Book]:
        return self._fetch(Query.BOOKS_BY_AUTHOR_IDS, {"fid": fid, "mid": mid, "lid": lid})

    def books_by_author_ids_and_serie_id(self, fid: int, mid: int, lid: int, serie_id: int) -> list[Book]:
        return [b for b in self.books_by_author_ids(fid, mid, lid) if b.sid == serie_id]

    def books_by_author_ids_without_serie(self, fid: int, mid: int, lid: int) -> list[Book]:
        return [b for b in self.books_by_author_ids(fid, mid, lid) if b.sid is None]

    def books_by_serie_id(self, serie_id: int) -> list[Book]:
        return self._fetch(Query.BOOKS_BY_SERIE_ID, {"serie_id": serie_id})

    def books_by_genre_id_and_date(self, genre_id: int, date: str) -> list[Book]:
        """
        Books of a genre added on matching dates.

        Args:
            genre_id: genres.id
            date: SQL LIKE pattern over the added date, e.g. "2024-06-0%"
        """
        return self._fetch(Query.BOOKS_BY_GENRE_ID_AND_DATE, {"genre_id": genre_id, "date": date})
