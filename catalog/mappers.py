"""
Row decoders.

Each decoder turns one result row into one entity. Columns are addressed by
name through a :class:`~catalog.helpers.ColumnIndex` built once for the
whole result set. Serie and Book rows embed an author, so they always need
the six author columns as well.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable

from .constants import Mapper, Query
from .errors import DecodeError
from .helpers import ColumnIndex
from .models import Author, Book, Serie, Value

__all__ = ["MAPPERS", "decode_row", "decode_rows"]


def _int(row, columns: ColumnIndex, name: str) -> int:
    value = columns.get(row, name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(name, f"expected integer, got {value!r}")
    return value


def _optional_int(row, columns: ColumnIndex, name: str) -> int | None:
    if columns.get(row, name) is None:
        return None
    return _int(row, columns, name)


def _str(row, columns: ColumnIndex, name: str) -> str:
    value = columns.get(row, name)
    if not isinstance(value, str):
        raise DecodeError(name, f"expected text, got {value!r}")
    return value


def map_to_string(row, columns: ColumnIndex) -> str:
    return _str(row, columns, "value")


def map_to_value(row, columns: ColumnIndex) -> Value:
    return Value(_int(row, columns, "id"), _str(row, columns, "value"))


def map_to_author(row, columns: ColumnIndex) -> Author:
    return Author(
        Value(_int(row, columns, "fid"), _str(row, columns, "fname")),
        Value(_int(row, columns, "mid"), _str(row, columns, "mname")),
        Value(_int(row, columns, "lid"), _str(row, columns, "lname")),
    )


def map_to_serie(row, columns: ColumnIndex) -> Serie:
    return Serie(
        id=_int(row, columns, "id"),
        name=_str(row, columns, "name"),
        count=_int(row, columns, "count"),
        author=map_to_author(row, columns),
    )


def map_to_book(row, columns: ColumnIndex) -> Book:
    sid = _optional_int(row, columns, "sid")
    # a book outside any series has no index; an unnumbered series book keeps its sid
    idx = _optional_int(row, columns, "idx") if sid is not None else None
    return Book(
        id=_int(row, columns, "id"),
        name=_str(row, columns, "name"),
        sid=sid,
        idx=idx,
        author=map_to_author(row, columns),
        size=_int(row, columns, "size"),
        added=_str(row, columns, "added"),
    )


MAPPERS: dict[Mapper, Callable[[Any, ColumnIndex], Any]] = {
    Mapper.STRING: map_to_string,
    Mapper.VALUE: map_to_value,
    Mapper.AUTHOR: map_to_author,
    Mapper.SERIE: map_to_serie,
    Mapper.BOOK: map_to_book,
}

assert set(MAPPERS) == set(Mapper), "every Mapper needs a decoder"


def decode_row(query: Query, row, columns: ColumnIndex | Iterable[str]) -> Any:
    """Decode a single row of ``query``'s result set."""
    if not isinstance(columns, ColumnIndex):
        columns = ColumnIndex(columns)
    return MAPPERS[query.mapper](row, columns)


def decode_rows(query: Query, keys: Iterable[str], rows: Iterable) -> list:
    """Decode a whole result set; ``keys`` are its column names."""
    columns = ColumnIndex(keys)
    mapper = MAPPERS[query.mapper]
    return [mapper(row, columns) for row in rows]
