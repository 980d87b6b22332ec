from __future__ import annotations

from typing import Optional, Sequence

from src.session_insights.session_insights.core.enums import AccountState
from src.session_insights.session_insights.students.model import Student, WeekRecord


class InMemoryRoster:
    def __init__(self, students: Sequence[Student]):
        self._students = list(students)
        self.calls = 0

    def get_all_students(self) -> Sequence[Student]:
        self.calls += 1
        return list(self._students)


def make_week(attended: bool = True, center: Optional[str] = None, **kwargs) -> WeekRecord:
    return WeekRecord(attended=attended, last_attendance_center=center, **kwargs)


def make_student(
    student_id: int,
    *,
    grade: Optional[str] = "2nd",
    main_center: Optional[str] = "Nasr City Center",
    weeks=(),
    account_state: AccountState = AccountState.ACTIVE,
    name: Optional[str] = None,
) -> Student:
    return Student(
        student_id=student_id,
        name=name or f"Student {student_id}",
        grade=grade,
        main_center=main_center,
        account_state=account_state,
        weeks=tuple(weeks),
    )
