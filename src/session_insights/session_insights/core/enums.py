from __future__ import annotations

from enum import Enum


class AccountState(str, Enum):
    """Account state stored on the roster."""

    ACTIVE = "Active"
    DEACTIVATED = "Deactivated"


class Bucket(str, Enum):
    """Classification outcome; one result table per bucket."""

    MAIN_CENTER_ATTENDED = "attended"
    ABSENT = "absent"
    ATTENDED_ELSEWHERE = "aiac"


class DetailCategory(str, Enum):
    """Lesson detail lists a row can open."""

    ABSENT = "absent"
    HW = "hw"
    QUIZ = "quiz"


class FilterField(str, Enum):
    GRADE = "grade"
    CENTER = "center"
    WEEK = "week"
