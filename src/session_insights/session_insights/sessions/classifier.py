from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.enums import Bucket
from ..students.model import Student
from .model import Selection
from .resolver import WeeklyRecordResolver
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import BucketStrategy
from .strategies.elsewhere_strategy import AttendedElsewhereStrategy
from .strategies.main_center_strategy import MainCenterAttendedStrategy


def default_strategies(resolver: WeeklyRecordResolver) -> tuple[BucketStrategy, ...]:
    return (
        MainCenterAttendedStrategy(resolver),
        AbsentStrategy(resolver),
        AttendedElsewhereStrategy(resolver),
    )


class AttendanceClassifier:
    """Assign students to buckets for a grade/center/week selection.

    Buckets are evaluated independently: a student may sit in none of them.
    """

    def __init__(
        self,
        resolver: WeeklyRecordResolver | None = None,
        *,
        strategies: Optional[Sequence[BucketStrategy]] = None,
    ):
        self._resolver = resolver or WeeklyRecordResolver()
        chosen = strategies if strategies is not None else default_strategies(self._resolver)
        self._strategies = {s.bucket: s for s in chosen}

    @property
    def resolver(self) -> WeeklyRecordResolver:
        return self._resolver

    def is_member(self, student: Student, selection: Selection, bucket: Bucket) -> bool:
        strategy = self._strategies.get(bucket)
        return bool(strategy and strategy.matches(student, selection))

    def classify(self, student: Student, selection: Selection) -> frozenset[Bucket]:
        return frozenset(b for b, s in self._strategies.items() if s.matches(student, selection))

    def members(self, roster: Iterable[Student], selection: Selection, bucket: Bucket) -> list[Student]:
        return [s for s in roster if self.is_member(s, selection, bucket)]
