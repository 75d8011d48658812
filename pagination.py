"""
pagination.py
Paged window over a live list (tables in the UI show one page at a time).
"""

from __future__ import annotations

import math
from typing import Callable, Generic, TypeVar

import config

T = TypeVar("T")


class Paginator(Generic[T]):
    """
    `source` is called on every read so the page always reflects the current
    collection. If the list shrinks below the current page, the paginator
    falls back to page 1.
    """

    def __init__(self, source: Callable[[], list[T]], per_page: int = config.DEFAULT_PAGE_SIZE):
        if per_page < 1:
            raise ValueError("per_page must be at least 1.")
        self.source = source
        self.per_page = per_page
        self._page = 1

    @property
    def total_items(self) -> int:
        return len(self.source())

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total_items / self.per_page))

    @property
    def current_page(self) -> int:
        if self._page > self.total_pages:
            self._page = 1
        return self._page

    @property
    def items(self) -> list[T]:
        start = (self.current_page - 1) * self.per_page
        return self.source()[start : start + self.per_page]

    @property
    def start_index(self) -> int:
        if self.total_items == 0:
            return 0
        return (self.current_page - 1) * self.per_page + 1

    @property
    def end_index(self) -> int:
        return min(self.current_page * self.per_page, self.total_items)

    @property
    def visible_pages(self) -> list[int]:
        """At most five page numbers around the current page."""
        total = self.total_pages
        current = self.current_page
        if total <= 5:
            return list(range(1, total + 1))
        if current <= 3:
            return [1, 2, 3, 4, 5]
        if current >= total - 2:
            return list(range(total - 4, total + 1))
        return list(range(current - 2, current + 3))

    def go_to_page(self, page: int) -> None:
        if 1 <= page <= self.total_pages:
            self._page = page

    def next_page(self) -> None:
        if self.current_page < self.total_pages:
            self._page += 1

    def prev_page(self) -> None:
        if self.current_page > 1:
            self._page -= 1
