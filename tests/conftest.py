"""
Shared fixtures: a small SQLite catalog with the production table layout.

Authors (first, middle, last ids):
  (2, 1, 1) Анна Велес          (3, 1, 2) Говард Пайл
  (4, 2, 3) Павел Сергеевич Иевлев
  (5, 1, 4) Адель Кейн          (6, 1, 4) Рэйчел Кейн
  (1, 1, 5) Фрост
"""

from __future__ import annotations

import sqlite3

import pytest

from catalog import CatalogApi

SCHEMA = """
CREATE TABLE first_names (id INTEGER PRIMARY KEY, value TEXT NOT NULL);
CREATE TABLE middle_names (id INTEGER PRIMARY KEY, value TEXT NOT NULL);
CREATE TABLE last_names (id INTEGER PRIMARY KEY, value TEXT NOT NULL);
CREATE TABLE titles (id INTEGER PRIMARY KEY, value TEXT NOT NULL);
CREATE TABLE dates (id INTEGER PRIMARY KEY, value TEXT NOT NULL);
CREATE TABLE books (
    book_id INTEGER PRIMARY KEY,
    title_id INTEGER NOT NULL,
    date_id INTEGER NOT NULL,
    book_size INTEGER NOT NULL
);
CREATE TABLE authors_map (
    book_id INTEGER NOT NULL,
    first_name_id INTEGER NOT NULL,
    middle_name_id INTEGER NOT NULL,
    last_name_id INTEGER NOT NULL
);
CREATE TABLE series (id INTEGER PRIMARY KEY, value TEXT NOT NULL);
CREATE TABLE series_map (book_id INTEGER NOT NULL, serie_id INTEGER NOT NULL, serie_num INTEGER);
CREATE TABLE genres (id INTEGER PRIMARY KEY, value TEXT NOT NULL);
CREATE TABLE genres_def (code TEXT NOT NULL, meta TEXT NOT NULL, genre TEXT NOT NULL);
CREATE TABLE genres_map (book_id INTEGER NOT NULL, genre_id INTEGER NOT NULL);
"""

FIRST_NAMES = [(1, ""), (2, "Анна"), (3, "Говард"), (4, "Павел"), (5, "Адель"), (6, "Рэйчел")]
MIDDLE_NAMES = [(1, ""), (2, "Сергеевич")]
LAST_NAMES = [(1, "Велес"), (2, "Пайл"), (3, "Иевлев"), (4, "Кейн"), (5, "Фрост")]

# book_id, title, added, size, [(fid, mid, lid)], (serie_id, serie_num) | None, [genre_id]
BOOKS = [
    (101, "День писателя", "2024-06-18", 999619, [(2, 1, 1)], None, []),
    (102, "Хозяин мрачного замка", "2024-06-05", 2002780, [(2, 1, 1)], (30, 2), []),
    (103, "Рыцари, закованные в сталь", "2024-06-01", 2579497, [(3, 1, 2)], None, [24]),
    (104, "Стальной рассвет", "2024-05-10", 1000, [(4, 2, 3)], (40, 1), [24]),
    (105, "Стальной закат", "2024-05-11", 2048, [(4, 2, 3)], (40, 2), []),
    (106, "Авиатрисы", "2024-06-30", 512, [(5, 1, 4), (6, 1, 4)], (50, 1), [47]),
    (107, "Warhammer 40000", "2024-07-01", 100, [(1, 1, 5)], (60, 1), []),
    (108, "warhammer fantasy", "2024-07-02", 200, [(1, 1, 5)], (61, 1), []),
]

SERIES = [
    (30, "Тёмный замок"),
    (40, "Кровь на воздух"),
    (50, "Аврора [Кауфман]"),
    (60, "Warhammer 40000"),
    (61, "warhammer fantasy"),
]

GENRES = [(24, "adv_history"), (44, "sci_marketing"), (47, "job_hunting")]
GENRES_DEF = [
    ("adv_history", "Приключения", "Исторические приключения"),
    ("sci_marketing", "Деловая литература", "Маркетинг, PR"),
    ("job_hunting", "Деловая литература", "Карьера, кадры"),
]


def build_catalog(path) -> None:
    conn = sqlite3.connect(str(path))
    try:
        conn.executescript(SCHEMA)
        conn.executemany("INSERT INTO first_names VALUES (?, ?)", FIRST_NAMES)
        conn.executemany("INSERT INTO middle_names VALUES (?, ?)", MIDDLE_NAMES)
        conn.executemany("INSERT INTO last_names VALUES (?, ?)", LAST_NAMES)
        conn.executemany("INSERT INTO series VALUES (?, ?)", SERIES)
        conn.executemany("INSERT INTO genres VALUES (?, ?)", GENRES)
        conn.executemany("INSERT INTO genres_def VALUES (?, ?, ?)", GENRES_DEF)
        for n, (book_id, title, added, size, authors, serie, genres) in enumerate(BOOKS, start=1):
            conn.execute("INSERT INTO titles VALUES (?, ?)", (n, title))
            conn.execute("INSERT INTO dates VALUES (?, ?)", (n, added))
            conn.execute("INSERT INTO books VALUES (?, ?, ?, ?)", (book_id, n, n, size))
            for fid, mid, lid in authors:
                conn.execute("INSERT INTO authors_map VALUES (?, ?, ?, ?)", (book_id, fid, mid, lid))
            if serie:
                conn.execute("INSERT INTO series_map VALUES (?, ?, ?)", (book_id, *serie))
            for genre_id in genres:
                conn.execute("INSERT INTO genres_map VALUES (?, ?)", (book_id, genre_id))
        conn.commit()
    finally:
        conn.close()


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def catalog_path(tmp_path_factory):
    path = tmp_path_factory.mktemp("catalog") / "books.db"
    build_catalog(path)
    return path


@pytest.fixture
def make_catalog(tmp_path):
    """Build a fresh fixture catalog at ``tmp_path / relpath``."""

    def make(relpath="books.db"):
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        build_catalog(path)
        return path

    return make


@pytest.fixture
def api(catalog_path):
    with CatalogApi(str(catalog_path)) as api:
        yield api
