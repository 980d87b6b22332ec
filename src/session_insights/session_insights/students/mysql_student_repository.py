from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import mysql.connector

from ..core.enums import AccountState
from ..core.exceptions import RosterUnavailableError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_bool
from .model import HwDone, Student, WeekRecord
from .repository import RosterSource

logger = logging.getLogger(__name__)


def _hw_done(value: Any) -> HwDone:
    # hw_done is VARCHAR: '1'/'0', 'true'/'false' or free text such as 'Not Completed'.
    if value is None:
        return None
    text = str(value).strip()
    if text.lower() in {"1", "true"}:
        return True
    if text.lower() in {"0", "false"}:
        return False
    return text


class MySQLStudentRepository(RosterSource):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_all_students(self) -> Sequence[Student]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    SELECT student_id, name, grade, main_center, account_state,
                           phone, parent_phone, school, main_comment
                    FROM students
                    ORDER BY student_id ASC
                    """
                )
                students = fetchall(cur)

                cur.execute(
                    """
                    SELECT student_id, week_number, attended, last_attendance_center, last_attendance,
                           hw_done, quiz_degree, comment, message_state
                    FROM student_weeks
                    ORDER BY student_id ASC, week_number ASC
                    """
                )
                week_rows = fetchall(cur)
        except mysql.connector.Error as e:
            logger.error("Failed to load roster from MySQL", exc_info=True)
            raise RosterUnavailableError("Could not load the student roster") from e

        weeks_by_student: dict[int, dict[int, WeekRecord]] = {}
        for r in week_rows:
            week_number = int(r["week_number"])
            if week_number < 1:
                continue
            weeks_by_student.setdefault(int(r["student_id"]), {})[week_number] = WeekRecord(
                attended=bool(normalize_mysql_bool(r.get("attended"))),
                last_attendance_center=r.get("last_attendance_center"),
                last_attendance=str(r["last_attendance"]) if r.get("last_attendance") else None,
                hw_done=_hw_done(r.get("hw_done")),
                quiz_degree=r.get("quiz_degree"),
                comment=r.get("comment"),
                message_state=bool(normalize_mysql_bool(r.get("message_state"))),
                week=week_number,
            )

        return [self._to_student(r, weeks_by_student.get(int(r["student_id"]), {})) for r in students]

    @staticmethod
    def _to_student(r: dict, weeks: dict[int, WeekRecord]) -> Student:
        size = max(weeks) if weeks else 0
        slots: list[Optional[WeekRecord]] = [weeks.get(n) for n in range(1, size + 1)]

        try:
            state = AccountState(r.get("account_state") or AccountState.ACTIVE.value)
        except ValueError:
            state = AccountState.ACTIVE

        return Student(
            student_id=int(r["student_id"]),
            name=r.get("name") or "",
            grade=r.get("grade"),
            main_center=r.get("main_center"),
            account_state=state,
            weeks=tuple(slots),
            phone=r.get("phone"),
            parent_phone=r.get("parent_phone"),
            school=r.get("school"),
            main_comment=r.get("main_comment"),
        )
