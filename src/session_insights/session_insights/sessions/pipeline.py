from __future__ import annotations

import logging
from typing import Iterable

from ..core.enums import Bucket
from ..students.model import Student
from .classifier import AttendanceClassifier
from .model import ClassifiedBuckets, ClassifiedStudent, Selection

logger = logging.getLogger(__name__)


def active_students(roster: Iterable[Student]) -> tuple[Student, ...]:
    return tuple(s for s in roster if not s.is_deactivated)


class FilterPipeline:
    """Gate on complete filters, drop deactivated accounts, classify the rest."""

    def __init__(self, classifier: AttendanceClassifier | None = None):
        self._classifier = classifier or AttendanceClassifier()

    @property
    def classifier(self) -> AttendanceClassifier:
        return self._classifier

    def run(self, roster: Iterable[Student], selection: Selection) -> ClassifiedBuckets:
        if not selection.all_filters_selected:
            # Incomplete filters show nothing, not the unfiltered roster.
            return ClassifiedBuckets(selection=selection)

        active = active_students(roster)
        result = ClassifiedBuckets(
            selection=selection,
            attended=self._bucket(active, selection, Bucket.MAIN_CENTER_ATTENDED),
            absent=self._bucket(active, selection, Bucket.ABSENT),
            aiac=self._bucket(active, selection, Bucket.ATTENDED_ELSEWHERE),
            active=active,
        )
        logger.debug(
            "Classified %d active students for %s: attended=%d absent=%d aiac=%d",
            len(active),
            selection.as_dict(),
            len(result.attended),
            len(result.absent),
            len(result.aiac),
        )
        return result

    def _bucket(self, active: tuple[Student, ...], selection: Selection, bucket: Bucket) -> tuple[ClassifiedStudent, ...]:
        week_number = selection.week_number
        resolver = self._classifier.resolver
        return tuple(
            ClassifiedStudent(
                student=s,
                bucket=bucket,
                # Display columns follow the selected week, not the latest state.
                display=resolver.resolve(s, week_number) if week_number is not None else None,
            )
            for s in self._classifier.members(active, selection, bucket)
        )
