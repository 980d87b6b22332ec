from __future__ import annotations

from typing import Optional

from ..common.matching import center_match
from ..students.model import Student, WeekRecord
from .model import WeekSnapshot


class WeeklyRecordResolver:
    """Extract (or synthesize) one week's attendance snapshot for a student.

    Pure and total: sparse rosters degrade to "not attended, no data".
    """

    def week_record(self, student: Student, week_number: Optional[int]) -> Optional[WeekRecord]:
        if week_number is None:
            return None
        return student.week_at(week_number)

    def attended_any(self, student: Student) -> bool:
        return any(w is not None and w.attended for w in student.weeks)

    def attended_any_in_center(self, student: Student, center: Optional[str]) -> bool:
        return any(
            w is not None and w.attended and center_match(w.last_attendance_center, center)
            for w in student.weeks
        )

    def resolve(self, student: Student, week_number: Optional[int]) -> WeekSnapshot:
        if week_number is None:
            # Aggregate mode: no single center is meaningful here.
            return WeekSnapshot(attended=self.attended_any(student))

        record = self.week_record(student, week_number)
        if record is None:
            return WeekSnapshot(
                attended=False,
                last_attendance_center=None,
                hw_done=False,
                quiz_degree=None,
                comment=None,
                message_state=False,
                current_week_number=week_number,
            )

        return WeekSnapshot(
            attended=record.attended,
            last_attendance_center=record.last_attendance_center,
            last_attendance=record.last_attendance,
            hw_done=record.hw_done,
            quiz_degree=record.quiz_degree,
            comment=record.comment,
            message_state=record.message_state,
            current_week_number=week_number,
        )
