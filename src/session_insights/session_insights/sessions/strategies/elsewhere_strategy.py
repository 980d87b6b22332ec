from __future__ import annotations

from ...common.matching import center_match, grade_match
from ...core.enums import Bucket
from ...students.model import Student
from ..model import Selection
from .base import BucketStrategy


class AttendedElsewhereStrategy(BucketStrategy):
    """Enrolled in the selected center, attended the week somewhere else.

    Only defined for a specific week; the aggregate selection never matches.
    """

    bucket = Bucket.ATTENDED_ELSEWHERE

    def matches(self, student: Student, selection: Selection) -> bool:
        week_number = selection.week_number
        if week_number is None:
            return False
        if not grade_match(student.grade, selection.grade):
            return False
        if not center_match(student.main_center, selection.center):
            return False

        record = self._resolver.week_record(student, week_number)
        if record is None or not record.attended:
            return False
        return not center_match(record.last_attendance_center, selection.center)
