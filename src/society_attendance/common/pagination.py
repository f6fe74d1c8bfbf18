from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Optional, Sequence, TypeVar

T = TypeVar("T")

# Marker used in page-link windows where pages are elided.
ELLIPSIS = None


@dataclass(frozen=True)
class Page(Generic[T]):
    items: Sequence[T]
    number: int
    total_pages: int
    total_items: int

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages

    @property
    def links(self) -> list[Optional[int]]:
        return page_window(self.number, self.total_pages)


def paginate(items: Sequence[T], page: int, per_page: int) -> Page[T]:
    total_pages = math.ceil(len(items) / per_page) if items else 0
    number = min(max(1, int(page)), max(1, total_pages))
    start = (number - 1) * per_page
    return Page(
        items=list(items[start : start + per_page]),
        number=number,
        total_pages=total_pages,
        total_items=len(items),
    )


def page_window(current: int, total_pages: int) -> list[Optional[int]]:
    """Page links: first, last and current±1, with ``None`` standing in for current±2."""
    out: list[Optional[int]] = []
    for page in range(1, total_pages + 1):
        if page == 1 or page == total_pages or current - 1 <= page <= current + 1:
            out.append(page)
        elif page in (current - 2, current + 2):
            out.append(ELLIPSIS)
    return out
