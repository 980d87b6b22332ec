from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field

from ..common.matching import center_match, grade_match
from ..core.constants import HW_NOT_COMPLETED
from ..students.model import HwDone
from .model import ClassifiedBuckets
from .resolver import WeeklyRecordResolver


def percentage(value: int, denominator: int) -> int:
    """Whole-number percent, rounding halves up; 0 when the denominator is 0."""
    if denominator <= 0:
        return 0
    return int(math.floor(value / denominator * 100 + 0.5))


def is_hw_missing(hw_done: HwDone) -> bool:
    if hw_done is False:
        return True
    return isinstance(hw_done, str) and hw_done.strip().lower() == HW_NOT_COMPLETED


@dataclass(frozen=True)
class RingStat:
    label: str
    stats: str
    progress: int
    color: str


@dataclass(frozen=True)
class SessionStats:
    mc: int = 0
    nmc: int = 0
    main_center_total: int = 0
    attended_count: int = 0
    not_attended_count: int = 0
    hw_done_count: int = 0
    hw_not_done_count: int = 0
    center_counts: dict[str, int] = field(default_factory=dict)

    @property
    def total_attended(self) -> int:
        return self.mc + self.nmc

    @property
    def mc_percent(self) -> int:
        return percentage(self.mc, self.main_center_total)

    @property
    def nmc_percent(self) -> int:
        return percentage(self.nmc, self.total_attended)

    def ring(self) -> list[RingStat]:
        return [
            RingStat("Main Center", f"{self.mc} / {self.main_center_total}", self.mc_percent, "teal"),
            RingStat("Not Main Center", str(self.nmc), self.nmc_percent, "red"),
            RingStat("Total Attended", str(self.total_attended), 100 if self.total_attended > 0 else 0, "blue"),
        ]

    def as_dict(self) -> dict:
        return {
            "mc": self.mc,
            "nmc": self.nmc,
            "main_center_total": self.main_center_total,
            "total_attended": self.total_attended,
            "mc_percent": self.mc_percent,
            "nmc_percent": self.nmc_percent,
            "attended_count": self.attended_count,
            "not_attended_count": self.not_attended_count,
            "hw_done_count": self.hw_done_count,
            "hw_not_done_count": self.hw_not_done_count,
            "center_counts": dict(self.center_counts),
        }


class StatsAggregator:
    def __init__(self, resolver: WeeklyRecordResolver | None = None):
        self._resolver = resolver or WeeklyRecordResolver()

    def aggregate(self, buckets: ClassifiedBuckets) -> SessionStats:
        selection = buckets.selection
        if not selection.all_filters_selected:
            return SessionStats()

        center = selection.center
        # MAIN_CENTER_ATTENDED already holds "attended in the target center";
        # split it by enrollment.
        mc = sum(1 for c in buckets.attended if center_match(c.student.main_center, center))
        nmc = len(buckets.attended) - mc

        graded = [s for s in buckets.active if grade_match(s.grade, selection.grade)]
        main_center_total = sum(1 for s in graded if center_match(s.main_center, center))

        week_number = selection.week_number
        attended_count = 0
        hw_done_count = 0
        hw_not_done_count = 0
        center_counts: Counter[str] = Counter()

        for s in graded:
            if week_number is not None:
                snap = self._resolver.resolve(s, week_number)
                attended = snap.attended
                hw_done = snap.hw_done is True
                hw_not_done = snap.attended and is_hw_missing(snap.hw_done)
                if snap.attended and snap.last_attendance_center:
                    center_counts[snap.last_attendance_center] += 1
            else:
                weeks = [w for w in s.weeks if w is not None]
                attended = any(w.attended for w in weeks)
                hw_done = any(w.hw_done is True for w in weeks)
                hw_not_done = any(w.attended and is_hw_missing(w.hw_done) for w in weeks)
                for w in weeks:
                    if w.attended and w.last_attendance_center:
                        center_counts[w.last_attendance_center] += 1

            attended_count += int(attended)
            hw_done_count += int(hw_done)
            hw_not_done_count += int(hw_not_done)

        return SessionStats(
            mc=mc,
            nmc=nmc,
            main_center_total=main_center_total,
            attended_count=attended_count,
            not_attended_count=len(graded) - attended_count,
            hw_done_count=hw_done_count,
            hw_not_done_count=hw_not_done_count,
            center_counts=dict(center_counts),
        )
