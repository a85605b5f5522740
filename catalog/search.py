from __future__ import annotations

import logging
from typing import Callable

__all__ = ["Fetcher", "search_by_mask"]

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], list[str]]


def _case_variants(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()


def search_by_mask(mask: str, fetcher: Fetcher) -> tuple[list[str], list[str]]:
    """
    Extend ``mask`` one character at a time while the stored strings agree.

    ``fetcher(mask)`` returns every distinct ``len(mask) + 1`` prefix of the
    stored strings that start with ``mask`` (case-insensitively). A stored
    string no longer than ``mask`` comes back whole, which is how ``mask``
    itself, or a case variant of it, is recognised as a complete value.

    Returns ``(complete, incomplete)``:
      - complete: stored strings met on the way, verbatim
      - incomplete: the branches of the fork the walk stopped at

    Two candidates that only differ by case are one path, not a fork.
    Errors raised by ``fetcher`` propagate untouched.
    """
    complete: list[str] = []
    incomplete: list[str] = []

    while True:
        candidates = fetcher(mask)
        # anything not longer than the mask is a stored value, not an extension
        done = [c for c in candidates if len(c) <= len(mask)]
        tail = [c for c in candidates if len(c) > len(mask)]
        complete.extend(done)
        logger.debug("mask %r: complete=%r tail=%r", mask, done, tail)

        if not tail:
            break
        if len(tail) == 1:
            mask = tail[0]
        elif len(tail) == 2 and _case_variants(*tail):
            mask = tail[0]
        else:
            incomplete.extend(tail)
            break

    return complete, incomplete
