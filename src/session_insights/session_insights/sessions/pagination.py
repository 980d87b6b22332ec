from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence, TypeVar

from ..core.constants import DEFAULT_PAGE_SIZE
from ..core.enums import Bucket
from .model import Selection

T = TypeVar("T")


class PaginationWindow:
    """Page cursor over one result table.

    The three tables each own an instance; only `PaginationSet` couples them.
    """

    def __init__(self, *, page_size: int = DEFAULT_PAGE_SIZE, total_count: int = 0, current_page: int = 1):
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        self._page_size = int(page_size)
        self._total_count = max(0, int(total_count))
        self._current_page = 1
        self.go_to(current_page)

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def total_count(self) -> int:
        return self._total_count

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self._total_count / self._page_size))

    @property
    def start_index(self) -> int:
        return (self._current_page - 1) * self._page_size

    @property
    def end_index(self) -> int:
        return self.start_index + self._page_size

    @property
    def has_next_page(self) -> bool:
        return self._current_page < self.total_pages

    @property
    def has_prev_page(self) -> bool:
        return self._current_page > 1

    @property
    def page_numbers(self) -> list[int]:
        return list(range(1, self.total_pages + 1))

    def go_to(self, page: int) -> bool:
        if page < 1 or page > self.total_pages:
            return False
        self._current_page = int(page)
        return True

    def next(self) -> bool:
        if not self.has_next_page:
            return False
        self._current_page += 1
        return True

    def prev(self) -> bool:
        if not self.has_prev_page:
            return False
        self._current_page -= 1
        return True

    def reset(self) -> None:
        self._current_page = 1

    def update_total(self, total_count: int) -> None:
        """Set a new item count; the cursor is left alone.

        A cursor beyond the last page yields an empty slice until the caller
        navigates or resets, mirroring the rendered table.
        """
        self._total_count = max(0, int(total_count))

    def slice(self, items: Sequence[T]) -> list[T]:
        return list(items[self.start_index:self.end_index])

    def as_dict(self) -> dict:
        return {
            "current_page": self.current_page,
            "page_size": self.page_size,
            "total_count": self.total_count,
            "total_pages": self.total_pages,
            "start_index": self.start_index,
            "end_index": self.end_index,
            "has_next_page": self.has_next_page,
            "has_prev_page": self.has_prev_page,
            "page_numbers": self.page_numbers,
        }


class PagePopup:
    """Page-number picker of one table: CLOSED <-> OPEN."""

    def __init__(self) -> None:
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    def toggle(self, total_pages: int) -> None:
        if self._open:
            self._open = False
        elif total_pages > 1:
            self._open = True

    def pick(self, window: PaginationWindow, page: int) -> bool:
        moved = window.go_to(page)
        self._open = False
        return moved

    def close(self) -> None:
        self._open = False

    def sync(self, total_pages: int) -> None:
        if total_pages <= 1:
            self._open = False


@dataclass
class PaginationSet:
    attended: PaginationWindow
    absent: PaginationWindow
    aiac: PaginationWindow

    @classmethod
    def create(cls, *, page_size: int = DEFAULT_PAGE_SIZE) -> "PaginationSet":
        return cls(
            attended=PaginationWindow(page_size=page_size),
            absent=PaginationWindow(page_size=page_size),
            aiac=PaginationWindow(page_size=page_size),
        )

    def get(self, bucket: Bucket) -> PaginationWindow:
        return {
            Bucket.MAIN_CENTER_ATTENDED: self.attended,
            Bucket.ABSENT: self.absent,
            Bucket.ATTENDED_ELSEWHERE: self.aiac,
        }[bucket]

    def windows(self) -> tuple[PaginationWindow, PaginationWindow, PaginationWindow]:
        return (self.attended, self.absent, self.aiac)

    def reset_all(self) -> None:
        for w in self.windows():
            w.reset()

    def on_selection_change(self, old: Optional[Selection], new: Selection) -> bool:
        """Reset every cursor when grade, center or week changed."""

        if old is not None and old == new:
            return False
        self.reset_all()
        return True
