"""Application pagination – Page."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Callable, Generic, Iterator, TypeVar

from mp_search.application.pagination.page_request import PageRequest

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class Page(Generic[T]):
    """Offset-based page of results with computed navigation properties.

    ``total`` counts the whole result set and stays authoritative even when
    ``items`` is empty. Builders keep ``len(items) <= size`` and
    ``total >= len(items)``; the constructor does not check them.
    """

    items: list[T]
    total: int
    page: int
    size: int

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def total_pages(self) -> int:
        if self.size <= 0 or self.total <= 0:
            return 0
        return math.ceil(self.total / self.size)

    @property
    def has_content(self) -> bool:
        return bool(self.items)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def map(self, fn: Callable[[T], Any]) -> "Page[Any]":
        """Return a new :class:`Page` with each item transformed by *fn*."""
        return Page(
            items=[fn(item) for item in self.items],
            total=self.total,
            page=self.page,
            size=self.size,
        )

    @classmethod
    def of(cls, all_items: list[T], request: PageRequest) -> "Page[T]":
        """Build a page by slicing *all_items* with *request*."""
        total = len(all_items)
        start = request.offset
        end = start + request.size
        return cls(
            items=all_items[start:end],
            total=total,
            page=request.page,
            size=request.size,
        )

    @classmethod
    def empty(cls, request: PageRequest) -> "Page[T]":
        return cls(items=[], total=0, page=request.page, size=request.size)


__all__ = ["Page"]
