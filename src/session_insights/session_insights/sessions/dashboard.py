from __future__ import annotations

from typing import Optional

from ..core.constants import DEFAULT_PAGE_SIZE
from ..core.enums import Bucket, FilterField
from .model import Selection, WeekToken
from .pagination import PagePopup, PaginationSet
from .selection_store import SelectionMemory


class FilterDropdowns:
    """Grade/center/week dropdowns: at most one is open at a time."""

    def __init__(self) -> None:
        self._open: Optional[FilterField] = None

    @property
    def open_dropdown(self) -> Optional[FilterField]:
        return self._open

    def is_open(self, field: FilterField) -> bool:
        return self._open == field

    def toggle(self, field: FilterField) -> None:
        self._open = None if self._open == field else field

    def open(self, field: FilterField) -> None:
        self._open = field

    def close_all(self) -> None:
        self._open = None


class DashboardState:
    """Mutable state of one session-info view: selection, cursors, popups.

    Single writer; every selection change funnels through `_apply` so the
    page cursors can never outlive the filters they were computed for.
    """

    def __init__(
        self,
        *,
        memory: Optional[SelectionMemory] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        selection: Optional[Selection] = None,
    ):
        self._memory = memory
        self.selection = selection or (memory.restore() if memory else Selection())
        self.pages = PaginationSet.create(page_size=page_size)
        self.dropdowns = FilterDropdowns()
        self.popups = {b: PagePopup() for b in Bucket}

    def select_grade(self, grade: Optional[str]) -> bool:
        return self._apply(FilterField.GRADE, grade)

    def select_center(self, center: Optional[str]) -> bool:
        return self._apply(FilterField.CENTER, center)

    def select_week(self, week: WeekToken) -> bool:
        return self._apply(FilterField.WEEK, week)

    def clear(self, field: FilterField) -> bool:
        return self._apply(field, None)

    def _apply(self, field: FilterField, value: WeekToken) -> bool:
        new = self.selection.with_value(field, value)
        self.dropdowns.close_all()
        if self._memory is not None:
            self._memory.remember(field, new.get(field))

        old, self.selection = self.selection, new
        return self.pages.on_selection_change(old, new)

    def sync_totals(self, counts: dict[Bucket, int]) -> None:
        for bucket, count in counts.items():
            window = self.pages.get(bucket)
            window.update_total(count)
            self.popups[bucket].sync(window.total_pages)

    def toggle_popup(self, bucket: Bucket) -> None:
        self.popups[bucket].toggle(self.pages.get(bucket).total_pages)

    def pick_page(self, bucket: Bucket, page: int) -> bool:
        return self.popups[bucket].pick(self.pages.get(bucket), page)

    def outside_click(self) -> None:
        self.dropdowns.close_all()
        for popup in self.popups.values():
            popup.close()
