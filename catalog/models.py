from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "Author",
    "Book",
    "Serie",
    "Value",
    "format_size",
]

_KB = 1024.0
_MB = 1024.0 * _KB


def format_size(size: int) -> str:
    """Human readable size: 156 -> '156 B', 2450 -> '2.39 KB', 4050000 -> '3.86 MB'."""
    if size >= _MB:
        return f"{size / _MB:.2f} MB"
    if size >= _KB:
        return f"{size / _KB:.2f} KB"
    return f"{size} B"


@dataclass(frozen=True, order=True)
class Value:
    """An identified catalog term: a genre, a name component, a series."""
    id: int
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Author:
    first_name: Value
    middle_name: Value
    last_name: Value

    @property
    def ids(self) -> tuple[int, int, int]:
        return self.first_name.id, self.middle_name.id, self.last_name.id

    def __str__(self) -> str:
        parts = (self.first_name.value, self.middle_name.value, self.last_name.value)
        return " ".join(p.strip() for p in parts if p and p.strip())


@dataclass(frozen=True, order=True)
class Serie:
    id: int
    name: str
    count: int
    author: Author

    def __str__(self) -> str:
        return f"{self.name} [{self.author}] ({self.count})"


@dataclass(frozen=True)
class Book:
    id: int
    name: str
    sid: int | None
    idx: int | None
    author: Author
    size: int
    added: str

    def __str__(self) -> str:
        out = f"{self.idx} {self.name}" if self.idx is not None else self.name
        author = str(self.author)
        if author:
            out += f" - {author}"
        return f"{out} ({self.added}) [{format_size(self.size)}]"
