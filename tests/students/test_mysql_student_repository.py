import mysql.connector
import pytest

from src.session_insights.session_insights.core.exceptions import RosterUnavailableError
from src.session_insights.session_insights.students.mysql_student_repository import MySQLStudentRepository


class FakeCursor:
    def __init__(self, results):
        self._results = list(results)
        self._current = []

    def execute(self, sql, params=None):
        self._current = self._results.pop(0)

    def fetchall(self):
        return self._current

    def close(self):
        pass


class FakeConn:
    def __init__(self, results):
        self._cursor = FakeCursor(results)
        self.rolled_back = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        pass

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, results=None, error=None):
        self._results = results
        self._error = error

    def connect(self):
        if self._error is not None:
            raise self._error
        return FakeConn(self._results)


def test_rows_become_students_with_sparse_weeks():
    students = [
        {"student_id": 1, "name": "Mariam", "grade": "1st", "main_center": "Rehab Center", "account_state": "Active"},
        {"student_id": 2, "name": "Omar", "grade": "1st", "main_center": "Rehab Center", "account_state": "Deactivated"},
    ]
    weeks = [
        {"student_id": 1, "week_number": 1, "attended": 1, "last_attendance_center": "Rehab Center", "hw_done": "1"},
        {"student_id": 1, "week_number": 3, "attended": 0, "hw_done": "Not Completed", "message_state": b"\x01"},
    ]
    repo = MySQLStudentRepository(FakeConnFactory(results=[students, weeks]))

    roster = repo.get_all_students()

    mariam, omar = roster
    assert len(mariam.weeks) == 3
    assert mariam.week_at(1).attended is True
    assert mariam.week_at(1).hw_done is True
    assert mariam.week_at(2) is None
    assert mariam.week_at(3).hw_done == "Not Completed"
    assert mariam.week_at(3).message_state is True
    assert omar.is_deactivated
    assert omar.weeks == ()


def test_connection_error_becomes_roster_unavailable():
    repo = MySQLStudentRepository(FakeConnFactory(error=mysql.connector.Error("down")))

    with pytest.raises(RosterUnavailableError):
        repo.get_all_students()
