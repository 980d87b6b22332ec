from src.session_insights.session_insights.core.enums import AccountState
from src.session_insights.session_insights.students.model import Student, WeekRecord


def test_from_dict_tolerates_sparse_roster_entries():
    s = Student.from_dict({"id": 7, "name": "Nour"})

    assert s.student_id == 7
    assert s.grade is None
    assert s.weeks == ()
    assert s.account_state == AccountState.ACTIVE


def test_from_dict_keeps_empty_week_slots():
    s = Student.from_dict(
        {
            "id": 1,
            "grade": "1st.",
            "main_center": "Rehab Center",
            "account_state": "Deactivated",
            "weeks": [
                {"attended": True, "lastAttendanceCenter": "Rehab Center", "hwDone": "Not Completed", "week": 1},
                None,
                {"attended": False},
            ],
        }
    )

    assert s.is_deactivated
    assert len(s.weeks) == 3
    assert s.weeks[1] is None
    assert s.week_at(1).hw_done == "Not Completed"
    assert s.week_at(3).attended is False
    assert s.week_at(4) is None
    assert s.week_at(0) is None


def test_week_record_defaults_for_missing_fields():
    w = WeekRecord.from_dict({"attended": 1})

    assert w.attended is True
    assert w.last_attendance_center is None
    assert w.message_state is False
    assert WeekRecord.from_dict(None) is None
    assert WeekRecord.from_dict({}) is None
