"""
Ordering used by ``ORDER BY ... COLLATE opds``.

Letters compare case-insensitively first, so "Warhammer " and "warhammer "
end up next to each other. Ties are broken lowercase first and finally on
the raw text, which keeps the order total.
"""
from __future__ import annotations

__all__ = ["collation_key", "compare", "fold"]

# ё sorts with е; code points would put it after я.
_PRIMARY = str.maketrans({"ё": "е"})


def fold(text: str | None) -> str | None:
    """Case folding used by prefix lookups; NULL stays NULL."""
    if text is None:
        return None
    return text.casefold()


def collation_key(text: str) -> tuple[str, str, str]:
    return text.casefold().translate(_PRIMARY), text.swapcase(), text


def compare(a: str, b: str) -> int:
    """sqlite3 collation callable: negative, zero or positive."""
    ka, kb = collation_key(a), collation_key(b)
    if ka < kb:
        return -1
    if ka > kb:
        return 1
    return 0
