from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Mapping, Optional

from ..core.constants import DEFAULT_PAGE_SIZE
from ..core.enums import Bucket, DetailCategory, FilterField
from ..core.exceptions import NotFoundError
from ..students.repository import RosterSource, find_student
from .dashboard import DashboardState
from .details import LessonDetails, detail_count, lesson_details
from .model import ClassifiedBuckets, ClassifiedStudent, Selection
from .pipeline import FilterPipeline
from .selection_store import SelectionMemory
from .stats import SessionStats, StatsAggregator


@dataclass(frozen=True)
class TablePage:
    items: list[dict]
    pagination: dict


@dataclass(frozen=True)
class SessionInfoView:
    """Payload handed to the table renderer."""

    selection: dict
    all_filters_selected: bool
    stats: dict
    ring: list[dict]
    tables: dict[str, TablePage]

    def as_dict(self) -> dict:
        return {
            "selection": self.selection,
            "all_filters_selected": self.all_filters_selected,
            "stats": self.stats,
            "ring": self.ring,
            "tables": {name: {"items": t.items, "pagination": t.pagination} for name, t in self.tables.items()},
        }


class SessionInfoService:
    """Use case: session-info analytics for one grade/center/week."""

    def __init__(
        self,
        roster: RosterSource,
        *,
        pipeline: Optional[FilterPipeline] = None,
        aggregator: Optional[StatsAggregator] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self._roster = roster
        self._pipeline = pipeline or FilterPipeline()
        self._aggregator = aggregator or StatsAggregator(self._pipeline.classifier.resolver)
        self._page_size = int(page_size)

    @property
    def page_size(self) -> int:
        return self._page_size

    def classify(self, selection: Selection) -> ClassifiedBuckets:
        if not selection.all_filters_selected:
            # Skip the roster fetch entirely; nothing would be shown.
            return self._pipeline.run((), selection)
        return self._pipeline.run(self._roster.get_all_students(), selection)

    def stats(self, selection: Selection) -> SessionStats:
        return self._aggregator.aggregate(self.classify(selection))

    def open_state(
        self,
        memory: SelectionMemory,
        *,
        changes: Optional[Mapping[FilterField, object]] = None,
    ) -> tuple[DashboardState, bool]:
        """Restore the remembered selection and apply requested changes.

        Returns the state and whether any filter actually changed.
        """

        state = DashboardState(memory=memory, page_size=self._page_size)
        changed = False
        for field, value in (changes or {}).items():
            if field == FilterField.GRADE:
                changed = state.select_grade(value) or changed
            elif field == FilterField.CENTER:
                changed = state.select_center(value) or changed
            else:
                changed = state.select_week(value) or changed
        return state, changed

    def build_view(self, state: DashboardState, *, pages: Optional[Mapping[Bucket, int]] = None) -> SessionInfoView:
        buckets = self.classify(state.selection)
        stats = self._aggregator.aggregate(buckets)

        state.sync_totals({b: len(buckets.get(b)) for b in Bucket})
        for bucket, page in (pages or {}).items():
            state.pages.get(bucket).go_to(page)

        tables: dict[str, TablePage] = {}
        for bucket in Bucket:
            window = state.pages.get(bucket)
            tables[bucket.value] = TablePage(
                items=[self.to_row(c) for c in window.slice(buckets.get(bucket))],
                pagination=window.as_dict(),
            )

        return SessionInfoView(
            selection=state.selection.as_dict(),
            all_filters_selected=state.selection.all_filters_selected,
            stats=stats.as_dict(),
            ring=[asdict(r) for r in stats.ring()],
            tables=tables,
        )

    def bucket_rows(self, selection: Selection, bucket: Bucket) -> list[dict]:
        return [self.to_row(c) for c in self.classify(selection).get(bucket)]

    def lesson_details(self, student_id: int, category: DetailCategory) -> LessonDetails:
        student = find_student(self._roster.get_all_students(), int(student_id))
        if student is None:
            raise NotFoundError(f"Student {student_id} not found")
        return lesson_details(student, category)

    def to_row(self, c: ClassifiedStudent) -> dict:
        s = c.student
        snap = c.display or self._pipeline.classifier.resolver.resolve(s, None)
        return {
            "id": s.student_id,
            "name": s.name,
            "grade": s.grade or "",
            "main_center": s.main_center or "",
            "school": s.school or "",
            "phone": s.phone or "",
            "parent_phone": s.parent_phone or "",
            "main_comment": s.main_comment or "",
            "bucket": c.bucket.value,
            "week": snap.current_week_number,
            "attended": snap.attended,
            "attendance_center": snap.last_attendance_center or "",
            "last_attendance": snap.last_attendance or "",
            "hw_done": snap.hw_done,
            "quiz_degree": snap.quiz_degree,
            "comment": snap.comment or "",
            "message_state": snap.message_state,
            "absences": detail_count(s, DetailCategory.ABSENT),
            "missing_hw": detail_count(s, DetailCategory.HW),
            "unattended_quizzes": detail_count(s, DetailCategory.QUIZ),
        }
