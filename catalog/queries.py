"""SQL text for every :class:`~catalog.constants.Query`."""
from __future__ import annotations

from .constants import Query
from .errors import CatalogLookupError

__all__ = ["QUERIES", "get_sql"]


# =============================================================================
# Shared fragments
# =============================================================================

_AUTHOR_COLUMNS = """first_names.id AS fid, first_names.value AS fname,
    middle_names.id AS mid, middle_names.value AS mname,
    last_names.id AS lid, last_names.value AS lname"""

_AUTHOR_JOINS = """JOIN first_names ON first_names.id = authors_map.first_name_id
    JOIN middle_names ON middle_names.id = authors_map.middle_name_id
    JOIN last_names ON last_names.id = authors_map.last_name_id"""

_AUTHOR_ORDER = "lname COLLATE opds, fname COLLATE opds, mname COLLATE opds"

_BOOK_COLUMNS = f"""books.book_id AS id,
    titles.value AS name,
    series.id AS sid,
    series_map.serie_num AS idx,
    {_AUTHOR_COLUMNS},
    books.book_size AS size,
    dates.value AS added"""

_BOOK_JOINS = f"""JOIN titles ON titles.id = books.title_id
    JOIN dates ON dates.id = books.date_id
    JOIN authors_map ON authors_map.book_id = books.book_id
    LEFT JOIN series_map ON series_map.book_id = books.book_id
    LEFT JOIN series ON series.id = series_map.serie_id
    {_AUTHOR_JOINS}"""

_BOOK_ORDER = "sid, idx, name COLLATE opds, added"

_SERIE_COLUMNS = f"""series.id AS id,
    series.value AS name,
    COUNT(DISTINCT books.book_id) AS count,
    {_AUTHOR_COLUMNS}"""

_SERIE_GROUP = "GROUP BY series.id, first_names.id, middle_names.id, last_names.id"

_SERIE_ORDER = f"name COLLATE opds, {_AUTHOR_ORDER}"


def _next_char(table: str) -> str:
    return f"""
    SELECT DISTINCT substr(value, 1, :length) AS value
    FROM {table}
    WHERE fold(substr(value, 1, length(:prefix))) = fold(:prefix)
    ORDER BY value COLLATE opds
    """


# =============================================================================
# Catalog
# =============================================================================

QUERIES: dict[Query, str] = {
    Query.AUTHOR_NEXT_CHAR_BY_PREFIX: _next_char("last_names"),
    Query.SERIE_NEXT_CHAR_BY_PREFIX: _next_char("series"),
    Query.BOOK_NEXT_CHAR_BY_PREFIX: _next_char("titles"),
    Query.AUTHORS_BY_LAST_NAME: f"""
    SELECT DISTINCT {_AUTHOR_COLUMNS}
    FROM last_names
    JOIN authors_map ON authors_map.last_name_id = last_names.id
    JOIN first_names ON first_names.id = authors_map.first_name_id
    JOIN middle_names ON middle_names.id = authors_map.middle_name_id
    WHERE last_names.value = :name
    ORDER BY {_AUTHOR_ORDER}
    """,
    Query.AUTHORS_BY_BOOKS_IDS: f"""
    SELECT DISTINCT {_AUTHOR_COLUMNS}
    FROM authors_map
    {_AUTHOR_JOINS}
    WHERE authors_map.book_id IN :ids
    ORDER BY {_AUTHOR_ORDER}
    """,
    Query.AUTHORS_BY_GENRE_ID: f"""
    WITH accepted(id) AS (
        SELECT book_id FROM genres_map WHERE genre_id = :genre_id
    )
    SELECT DISTINCT {_AUTHOR_COLUMNS}
    FROM accepted
    JOIN authors_map ON authors_map.book_id = accepted.id
    {_AUTHOR_JOINS}
    ORDER BY {_AUTHOR_ORDER}
    """,
    Query.AUTHOR_BY_IDS: f"""
    SELECT {_AUTHOR_COLUMNS}
    FROM first_names, middle_names, last_names
    WHERE first_names.id = :fid AND middle_names.id = :mid AND last_names.id = :lid
    """,
    Query.SERIES_BY_IDS: f"""
    SELECT {_SERIE_COLUMNS}
    FROM series
    JOIN series_map ON series_map.serie_id = series.id
    JOIN books ON books.book_id = series_map.book_id
    JOIN authors_map ON authors_map.book_id = books.book_id
    {_AUTHOR_JOINS}
    WHERE series.id IN :ids
    {_SERIE_GROUP}
    ORDER BY {_SERIE_ORDER}
    """,
    Query.SERIES_BY_SERIE_NAME: f"""
    SELECT {_SERIE_COLUMNS}
    FROM series
    JOIN series_map ON series_map.serie_id = series.id
    JOIN books ON books.book_id = series_map.book_id
    JOIN authors_map ON authors_map.book_id = books.book_id
    {_AUTHOR_JOINS}
    WHERE series.value = :name
    {_SERIE_GROUP}
    ORDER BY {_SERIE_ORDER}
    """,
    Query.SERIES_BY_AUTHOR_IDS: f"""
    SELECT {_SERIE_COLUMNS}
    FROM authors_map
    JOIN books ON books.book_id = authors_map.book_id
    JOIN series_map ON series_map.book_id = books.book_id
    JOIN series ON series.id = series_map.serie_id
    {_AUTHOR_JOINS}
    WHERE authors_map.first_name_id = :fid
        AND authors_map.middle_name_id = :mid
        AND authors_map.last_name_id = :lid
        AND series.value IS NOT NULL
    {_SERIE_GROUP}
    ORDER BY {_SERIE_ORDER}
    """,
    Query.SERIES_BY_GENRE_ID: f"""
    WITH accepted(id) AS (
        SELECT book_id FROM genres_map WHERE genre_id = :genre_id
    )
    SELECT {_SERIE_COLUMNS}
    FROM accepted
    JOIN books ON books.book_id = accepted.id
    JOIN series_map ON series_map.book_id = books.book_id
    JOIN series ON series.id = series_map.serie_id
    JOIN authors_map ON authors_map.book_id = books.book_id
    {_AUTHOR_JOINS}
    WHERE series.value IS NOT NULL
    {_SERIE_GROUP}
    ORDER BY {_SERIE_ORDER}
    """,
    Query.BOOK_BY_ID: f"""
    SELECT {_BOOK_COLUMNS}
    FROM books
    {_BOOK_JOINS}
    WHERE books.book_id = :book_id
    ORDER BY {_AUTHOR_ORDER}
    """,
    Query.BOOKS_BY_TITLE: f"""
    SELECT {_BOOK_COLUMNS}
    FROM titles
    JOIN books ON books.title_id = titles.id
    JOIN dates ON dates.id = books.date_id
    JOIN authors_map ON authors_map.book_id = books.book_id
    LEFT JOIN series_map ON series_map.book_id = books.book_id
    LEFT JOIN series ON series.id = series_map.serie_id
    {_AUTHOR_JOINS}
    WHERE titles.value = :title
    ORDER BY {_BOOK_ORDER}
    """,
    Query.BOOKS_BY_AUTHOR_IDS: f"""
    SELECT {_BOOK_COLUMNS}
    FROM books
    {_BOOK_JOINS}
    WHERE authors_map.first_name_id = :fid
        AND authors_map.middle_name_id = :mid
        AND authors_map.last_name_id = :lid
    ORDER BY {_BOOK_ORDER}
    """,
    Query.BOOKS_BY_SERIE_ID: f"""
    SELECT {_BOOK_COLUMNS}
    FROM books
    {_BOOK_JOINS}
    WHERE series.id = :serie_id
    ORDER BY idx, name COLLATE opds, added
    """,
    Query.BOOKS_BY_GENRE_ID_AND_DATE: f"""
    WITH accepted(id) AS (
        SELECT book_id FROM genres_map WHERE genre_id = :genre_id
    )
    SELECT {_BOOK_COLUMNS}
    FROM accepted
    JOIN books ON books.book_id = accepted.id
    {_BOOK_JOINS}
    WHERE dates.value LIKE :date
    ORDER BY {_BOOK_ORDER}
    """,
    Query.META_GENRES: """
    SELECT DISTINCT meta AS value
    FROM genres_def
    ORDER BY value COLLATE opds
    """,
    Query.GENRES_BY_META: """
    SELECT genres.id AS id, genres_def.genre AS value
    FROM genres_def
    JOIN genres ON genres.value = genres_def.code
    WHERE genres_def.meta = :meta
    ORDER BY value COLLATE opds
    """,
}

assert len(QUERIES) == len(Query), "every Query needs SQL text"
assert set(QUERIES) == set(Query)


def get_sql(query: Query) -> str:
    """SQL text for ``query``; a missing entry is a programming error."""
    try:
        return QUERIES[query]
    except KeyError:
        raise CatalogLookupError(f"SQL for {query!r} is not defined") from None
