"""Configuration management."""
import os
from pathlib import Path
from urllib.parse import quote

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Catalog configuration, read from the environment (and a .env file)."""

    DATABASE = os.getenv("CATALOG_DATABASE", "books.db")
    LOG_LEVEL = os.getenv("CATALOG_LOG_LEVEL", "WARNING")

    @staticmethod
    def database_url(database: str) -> str:
        """SQLAlchemy URL opening a SQLite file read-only through a URI filename."""
        # '?', '#' and '%' in the path would otherwise end or escape the URI path
        path = quote(Path(database).expanduser().resolve().as_posix())
        return f"sqlite+pysqlite:///file:{path}?mode=ro&uri=true"
