from __future__ import annotations

from ...common.matching import center_match, grade_match
from ...core.enums import Bucket
from ...students.model import Student
from ..model import Selection
from .base import BucketStrategy


class MainCenterAttendedStrategy(BucketStrategy):
    """Attended in the selected center, whatever the student's main center."""

    bucket = Bucket.MAIN_CENTER_ATTENDED

    def matches(self, student: Student, selection: Selection) -> bool:
        if not grade_match(student.grade, selection.grade):
            return False

        week_number = selection.week_number
        if week_number is None:
            return self._resolver.attended_any_in_center(student, selection.center)

        record = self._resolver.week_record(student, week_number)
        return bool(record and record.attended and center_match(record.last_attendance_center, selection.center))
