from __future__ import annotations

from ...common.matching import center_match, grade_match
from ...core.enums import Bucket
from ...students.model import Student
from ..model import Selection
from .base import BucketStrategy


class AbsentStrategy(BucketStrategy):
    """Enrolled in the selected center but did not attend."""

    bucket = Bucket.ABSENT

    def matches(self, student: Student, selection: Selection) -> bool:
        if not grade_match(student.grade, selection.grade):
            return False
        if not center_match(student.main_center, selection.center):
            return False

        week_number = selection.week_number
        if week_number is None:
            return not self._resolver.attended_any(student)

        record = self._resolver.week_record(student, week_number)
        return record is None or not record.attended
