from enum import Enum

COLLATION = "opds"
FOLD_FUNCTION = "fold"

AUTHOR_COLUMNS = ("fid", "fname", "mid", "mname", "lid", "lname")


class Mapper(str, Enum):
    """Row decoders, one per entity shape."""
    STRING = "string"
    VALUE = "value"
    AUTHOR = "author"
    SERIE = "serie"
    BOOK = "book"


class Query(str, Enum):
    """Every query the catalog knows how to run."""
    AUTHOR_NEXT_CHAR_BY_PREFIX = "author_next_char_by_prefix"
    SERIE_NEXT_CHAR_BY_PREFIX = "serie_next_char_by_prefix"
    BOOK_NEXT_CHAR_BY_PREFIX = "book_next_char_by_prefix"
    AUTHORS_BY_LAST_NAME = "authors_by_last_name"
    SERIES_BY_SERIE_NAME = "series_by_serie_name"
    SERIES_BY_AUTHOR_IDS = "series_by_author_ids"
    AUTHOR_BY_IDS = "author_by_ids"
    BOOK_BY_ID = "book_by_id"
    BOOKS_BY_TITLE = "books_by_title"
    BOOKS_BY_AUTHOR_IDS = "books_by_author_ids"
    BOOKS_BY_SERIE_ID = "books_by_serie_id"
    META_GENRES = "meta_genres"
    GENRES_BY_META = "genres_by_meta"
    SERIES_BY_GENRE_ID = "series_by_genre_id"
    AUTHORS_BY_GENRE_ID = "authors_by_genre_id"
    BOOKS_BY_GENRE_ID_AND_DATE = "books_by_genre_id_and_date"
    AUTHORS_BY_BOOKS_IDS = "authors_by_books_ids"
    SERIES_BY_IDS = "series_by_ids"

    @property
    def mapper(self) -> Mapper:
        return QUERY_MAPPERS[self]


QUERY_MAPPERS = {
    Query.AUTHOR_NEXT_CHAR_BY_PREFIX: Mapper.STRING,
    Query.SERIE_NEXT_CHAR_BY_PREFIX: Mapper.STRING,
    Query.BOOK_NEXT_CHAR_BY_PREFIX: Mapper.STRING,
    Query.META_GENRES: Mapper.STRING,
    Query.GENRES_BY_META: Mapper.VALUE,
    Query.AUTHOR_BY_IDS: Mapper.AUTHOR,
    Query.AUTHORS_BY_GENRE_ID: Mapper.AUTHOR,
    Query.AUTHORS_BY_LAST_NAME: Mapper.AUTHOR,
    Query.AUTHORS_BY_BOOKS_IDS: Mapper.AUTHOR,
    Query.SERIES_BY_IDS: Mapper.SERIE,
    Query.SERIES_BY_GENRE_ID: Mapper.SERIE,
    Query.SERIES_BY_SERIE_NAME: Mapper.SERIE,
    Query.SERIES_BY_AUTHOR_IDS: Mapper.SERIE,
    Query.BOOK_BY_ID: Mapper.BOOK,
    Query.BOOKS_BY_TITLE: Mapper.BOOK,
    Query.BOOKS_BY_SERIE_ID: Mapper.BOOK,
    Query.BOOKS_BY_AUTHOR_IDS: Mapper.BOOK,
    Query.BOOKS_BY_GENRE_ID_AND_DATE: Mapper.BOOK,
}

assert set(QUERY_MAPPERS) == set(Query), "every Query needs a Mapper"
