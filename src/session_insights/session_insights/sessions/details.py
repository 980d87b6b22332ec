from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from ..core.constants import QUIZ_NOT_ATTENDED
from ..core.enums import DetailCategory
from ..students.model import HwDone, Student, WeekRecord
from .stats import is_hw_missing


@dataclass(frozen=True)
class DetailWeek:
    week: int
    attended: bool
    hw_done: HwDone
    quiz_degree: Optional[str]
    last_attendance: Optional[str]
    center: Optional[str]


@dataclass(frozen=True)
class LessonDetails:
    student_id: int
    category: DetailCategory
    title: str
    weeks: tuple[DetailWeek, ...]


def _is_absent(w: WeekRecord) -> bool:
    return not w.attended


def _is_quiz_unattended(w: WeekRecord) -> bool:
    return w.quiz_degree is None or w.quiz_degree == QUIZ_NOT_ATTENDED


_RULES: dict[DetailCategory, tuple[str, Callable[[WeekRecord], bool]]] = {
    DetailCategory.ABSENT: ("Absent Sessions", _is_absent),
    DetailCategory.HW: ("Missing Homework", lambda w: is_hw_missing(w.hw_done)),
    DetailCategory.QUIZ: ("Unattended Quizzes", _is_quiz_unattended),
}


def detail_weeks(student: Student, category: DetailCategory) -> tuple[DetailWeek, ...]:
    """Weeks of a student that fall in a detail category.

    Empty week slots are skipped; the label is the record's own week number
    when the roster stored one, else its position.
    """

    _, rule = _RULES[category]
    out: list[DetailWeek] = []
    for idx, w in enumerate(student.weeks):
        if w is None or not rule(w):
            continue
        out.append(
            DetailWeek(
                week=w.week if w.week is not None else idx + 1,
                attended=w.attended,
                hw_done=w.hw_done,
                quiz_degree=w.quiz_degree,
                last_attendance=w.last_attendance,
                center=w.last_attendance_center,
            )
        )
    return tuple(out)


def detail_count(student: Student, category: DetailCategory) -> int:
    return len(detail_weeks(student, category))


def lesson_details(student: Student, category: DetailCategory) -> LessonDetails:
    label, _ = _RULES[category]
    who = student.name or str(student.student_id)
    return LessonDetails(
        student_id=student.student_id,
        category=category,
        title=f"{label} for {who} • ID: {student.student_id}",
        weeks=detail_weeks(student, category),
    )
