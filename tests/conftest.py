from __future__ import annotations

import pytest

from src.session_insights.session_insights.core.enums import AccountState
from src.session_insights.session_insights.students.model import Student

from tests.factories import make_student, make_week


@pytest.fixture
def s1() -> Student:
    return make_student(
        1,
        weeks=[
            make_week(True, "Nasr City Center", comment="week one", hw_done=True, quiz_degree="9 / 10"),
            make_week(True, "Rehab Center", comment="week two", hw_done="Not Completed"),
        ],
    )


@pytest.fixture
def s2() -> Student:
    return make_student(2, weeks=[])


@pytest.fixture
def roster(s1, s2):
    return [
        s1,
        s2,
        # Enrolled in Rehab, attended week 1 at Nasr City.
        make_student(3, main_center="Rehab Center", weeks=[make_week(True, "nasr city center")]),
        # Deactivated account: never shown.
        make_student(4, weeks=[make_week(True, "Nasr City Center")], account_state=AccountState.DEACTIVATED),
        # Other grade.
        make_student(5, grade="3rd", weeks=[make_week(True, "Nasr City Center")]),
        # Absent in week 1 explicitly.
        make_student(6, weeks=[make_week(False)]),
    ]
