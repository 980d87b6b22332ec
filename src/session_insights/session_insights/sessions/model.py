from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from ..common.validators import is_all_weeks, optional_text, parse_week_number
from ..core.constants import ALL_WEEKS_TOKEN
from ..core.enums import Bucket, FilterField
from ..students.model import HwDone, Student

WeekToken = Union[str, int, None]


@dataclass(frozen=True)
class Selection:
    """Grade / center / week chosen on the session-info view.

    `week` keeps the raw token: a number ("3", "week 03", 3) or the
    aggregate token "n/a" meaning "every week".
    """

    grade: Optional[str] = None
    center: Optional[str] = None
    week: WeekToken = None

    @classmethod
    def of(cls, *, grade: Optional[str] = None, center: Optional[str] = None, week: WeekToken = None) -> "Selection":
        if isinstance(week, str):
            week = optional_text(week)
            if week is not None and is_all_weeks(week):
                week = ALL_WEEKS_TOKEN
        parse_week_number(week)  # raises ValidationError on a malformed token
        return cls(grade=optional_text(grade), center=optional_text(center), week=week)

    @property
    def week_number(self) -> Optional[int]:
        return parse_week_number(self.week)

    @property
    def is_aggregate(self) -> bool:
        return self.week is not None and self.week_number is None

    @property
    def all_filters_selected(self) -> bool:
        return bool(self.grade and self.center and self.week is not None and self.week != "")

    def get(self, name: FilterField) -> WeekToken:
        return getattr(self, name.value)

    def with_value(self, name: FilterField, value: WeekToken) -> "Selection":
        return Selection.of(**{**self.as_dict(), name.value: value})

    def as_dict(self) -> dict:
        return {"grade": self.grade, "center": self.center, "week": self.week}


@dataclass(frozen=True)
class WeekSnapshot:
    """Display values of one student for one week (or aggregated)."""

    attended: bool
    last_attendance_center: Optional[str] = None
    last_attendance: Optional[str] = None
    hw_done: HwDone = False
    quiz_degree: Optional[str] = None
    comment: Optional[str] = None
    message_state: bool = False
    current_week_number: Optional[int] = None


@dataclass(frozen=True)
class ClassifiedStudent:
    student: Student
    bucket: Bucket
    display: Optional[WeekSnapshot] = None


@dataclass(frozen=True)
class ClassifiedBuckets:
    selection: Selection
    attended: tuple[ClassifiedStudent, ...] = field(default_factory=tuple)
    absent: tuple[ClassifiedStudent, ...] = field(default_factory=tuple)
    aiac: tuple[ClassifiedStudent, ...] = field(default_factory=tuple)
    # Deactivation-filtered roster the buckets were drawn from (empty when gated).
    active: tuple[Student, ...] = field(default_factory=tuple)

    def get(self, bucket: Bucket) -> tuple[ClassifiedStudent, ...]:
        return {
            Bucket.MAIN_CENTER_ATTENDED: self.attended,
            Bucket.ABSENT: self.absent,
            Bucket.ATTENDED_ELSEWHERE: self.aiac,
        }[bucket]
