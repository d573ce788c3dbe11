"""Splitting a sequence of results into fixed-size pages."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any


class Page:
    """A contiguous slice of results."""

    def __init__(self, items: Iterable[Any]) -> None:
        self._items = tuple(items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return "".join(str(item) for item in self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Page):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Page({list(self._items)!r})"


class Paginator:
    """Pages over a sequence; the last page may be shorter than the rest."""

    def __init__(self, items: Iterable[Any], page_size: int) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        seq: Sequence[Any] = items if isinstance(items, Sequence) else list(items)
        self._pages = [
            Page(seq[start:start + page_size]) for start in range(0, len(seq), page_size)
        ]

    def __iter__(self) -> Iterator[Page]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)


def paginate(items: Iterable[Any], page_size: int) -> Paginator:
    """Split items into pages of at most page_size elements."""
    return Paginator(items, page_size)