from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from ..core.enums import AccountState

HwDone = Union[bool, str, None]


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes"}
    return bool(value)


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _as_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class WeekRecord:
    """One week of a student's attendance history.

    Every field is optional on the roster; missing values fall back to
    "not attended / no data".
    """

    attended: bool = False
    last_attendance_center: Optional[str] = None
    last_attendance: Optional[str] = None
    hw_done: HwDone = None
    quiz_degree: Optional[str] = None
    comment: Optional[str] = None
    message_state: bool = False
    week: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Optional["WeekRecord"]:
        if not data or not isinstance(data, Mapping):
            return None

        hw = data.get("hwDone", data.get("hw_done"))
        if hw is not None and not isinstance(hw, (bool, str)):
            hw = bool(hw)

        quiz = data.get("quizDegree", data.get("quiz_degree"))

        return cls(
            attended=_as_bool(data.get("attended", False)),
            last_attendance_center=_as_text(data.get("lastAttendanceCenter", data.get("last_attendance_center"))),
            last_attendance=_as_text(data.get("lastAttendance", data.get("last_attendance"))),
            hw_done=hw,
            quiz_degree=_as_text(quiz),
            comment=_as_text(data.get("comment")),
            message_state=_as_bool(data.get("message_state", False)),
            week=_as_int(data.get("week")),
        )


@dataclass(frozen=True)
class Student:
    """Domain entity: a roster student (read-only for this system)."""

    student_id: int
    name: str
    grade: Optional[str]
    main_center: Optional[str]
    account_state: AccountState = AccountState.ACTIVE
    weeks: tuple[Optional[WeekRecord], ...] = field(default_factory=tuple)
    phone: Optional[str] = None
    parent_phone: Optional[str] = None
    school: Optional[str] = None
    main_comment: Optional[str] = None

    @property
    def is_deactivated(self) -> bool:
        return self.account_state == AccountState.DEACTIVATED

    def week_at(self, week_number: int) -> Optional[WeekRecord]:
        if week_number < 1 or week_number > len(self.weeks):
            return None
        return self.weeks[week_number - 1]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Student":
        raw_weeks = data.get("weeks")
        if not isinstance(raw_weeks, (list, tuple)):
            raw_weeks = []

        state_raw = data.get("account_state")
        try:
            state = AccountState(state_raw) if state_raw else AccountState.ACTIVE
        except ValueError:
            state = AccountState.ACTIVE

        return cls(
            student_id=_as_int(data.get("id", data.get("student_id"))) or 0,
            name=str(data.get("name") or ""),
            grade=_as_text(data.get("grade")),
            main_center=_as_text(data.get("main_center")),
            account_state=state,
            weeks=tuple(WeekRecord.from_dict(w) for w in raw_weeks),
            phone=_as_text(data.get("phone")),
            parent_phone=_as_text(data.get("parents_phone", data.get("parent_phone"))),
            school=_as_text(data.get("school")),
            main_comment=_as_text(data.get("main_comment")),
        )
