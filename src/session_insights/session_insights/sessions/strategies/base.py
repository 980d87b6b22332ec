from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import Bucket
from ...students.model import Student
from ..model import Selection
from ..resolver import WeeklyRecordResolver


class BucketStrategy(ABC):
    """Strategy Pattern: one membership rule per result table."""

    bucket: Bucket

    def __init__(self, resolver: WeeklyRecordResolver | None = None):
        self._resolver = resolver or WeeklyRecordResolver()

    @abstractmethod
    def matches(self, student: Student, selection: Selection) -> bool:
        raise NotImplementedError
