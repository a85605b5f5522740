import logging
from typing import Any, Iterable

from sqlalchemy import bindparam, create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import DBAPIError

from .collation import compare, fold
from .config import Config
from .constants import COLLATION, FOLD_FUNCTION
from .errors import CatalogError, ConnectionError, DecodeError

logger = logging.getLogger(__name__)


class ColumnIndex:
    """
    Name -> position lookup, built once per result set.

    Rows are then read by index while callers keep addressing columns by
    name, so query text can add or reorder columns freely.
    """

    def __init__(self, keys: Iterable[str]):
        self._index = {name: i for i, name in enumerate(keys)}

    def __contains__(self, name: str) -> bool:
        return name in self._index

    def __getitem__(self, name: str) -> int:
        try:
            return self._index[name]
        except KeyError:
            raise DecodeError(name, "missing from result set") from None

    def get(self, row, name: str) -> Any:
        return row[self[name]]


def expanding_list(name: str, values: Iterable[int]) -> tuple[Any, dict[str, list[int]]]:
    """
    Bind a list of ints to a single ``IN :name`` parameter.

    Returns the bindparam to attach to the statement and the matching params.
    """
    values = list(values)
    try:
        ids = [int(v) for v in values]
    except (TypeError, ValueError) as e:
        raise CatalogError(f"{name} must be integer ids, got {values!r}") from e
    return bindparam(name, expanding=True), {name: ids}


def _register_functions(dbapi_connection, connection_record) -> None:
    dbapi_connection.create_collation(COLLATION, compare)
    dbapi_connection.create_function(FOLD_FUNCTION, 1, fold, deterministic=True)


def _enable_query_only(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA query_only = ON")
    finally:
        cursor.close()


def create_catalog_engine(database: str) -> Engine:
    """
    Read-only engine over a SQLite catalog file.

    Every pooled DBAPI connection gets the ``opds`` collation and the
    ``fold`` function before it runs its first query.
    """
    url = Config.database_url(database)
    engine = create_engine(url, connect_args={"check_same_thread": False})
    event.listen(engine, "connect", _register_functions)
    event.listen(engine, "connect", _enable_query_only)

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT count(*) FROM sqlite_master")).scalar()
    except DBAPIError as e:
        logger.error("cannot open catalog %s: %s", database, e)
        engine.dispose()
        raise ConnectionError(f"cannot open catalog {database!r}: {e.orig}") from e

    logger.info("opened catalog %s", database)
    return engine
