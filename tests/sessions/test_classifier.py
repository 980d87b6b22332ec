from src.session_insights.session_insights.core.enums import Bucket
from src.session_insights.session_insights.sessions.classifier import AttendanceClassifier
from src.session_insights.session_insights.sessions.model import Selection

from tests.factories import make_student, make_week

NASR = "Nasr City Center"


def test_s1_attended_main_center_in_week_one(s1):
    buckets = AttendanceClassifier().classify(s1, Selection.of(grade="2nd", center=NASR, week=1))

    assert buckets == frozenset({Bucket.MAIN_CENTER_ATTENDED})


def test_s1_attended_elsewhere_in_week_two(s1):
    buckets = AttendanceClassifier().classify(s1, Selection.of(grade="2nd", center=NASR, week=2))

    assert Bucket.ATTENDED_ELSEWHERE in buckets
    assert Bucket.MAIN_CENTER_ATTENDED not in buckets
    assert Bucket.ABSENT not in buckets


def test_student_without_weeks_is_always_absent(s2):
    classifier = AttendanceClassifier()

    for week in (1, 7, "n/a"):
        buckets = classifier.classify(s2, Selection.of(grade="2nd", center=NASR, week=week))
        assert buckets == frozenset({Bucket.ABSENT})


def test_grade_with_trailing_period_matches():
    student = make_student(1, grade="1st.", weeks=[make_week(True, NASR)])

    assert AttendanceClassifier().is_member(
        student, Selection.of(grade="1st", center=NASR, week=1), Bucket.MAIN_CENTER_ATTENDED
    )


def test_attended_bucket_ignores_main_center():
    student = make_student(1, main_center="Rehab Center", weeks=[make_week(True, NASR)])
    selection = Selection.of(grade="2nd", center=NASR, week=1)

    assert AttendanceClassifier().classify(student, selection) == frozenset({Bucket.MAIN_CENTER_ATTENDED})


def test_student_matching_nothing_is_in_no_bucket():
    # Enrolled elsewhere and absent: not our attendee, not our absentee.
    student = make_student(1, main_center="Rehab Center", weeks=[make_week(False)])

    assert AttendanceClassifier().classify(student, Selection.of(grade="2nd", center=NASR, week=1)) == frozenset()


def test_aggregate_mode_has_no_attended_elsewhere():
    student = make_student(1, weeks=[make_week(True, "Rehab Center")])

    buckets = AttendanceClassifier().classify(student, Selection.of(grade="2nd", center=NASR, week="n/a"))

    assert buckets == frozenset()


def test_aggregate_mode_needs_attendance_and_center_on_same_week():
    student = make_student(
        1,
        weeks=[make_week(False, NASR), make_week(True, "Rehab Center")],
    )
    classifier = AttendanceClassifier()
    selection = Selection.of(grade="2nd", center=NASR, week="n/a")

    assert not classifier.is_member(student, selection, Bucket.MAIN_CENTER_ATTENDED)
    assert not classifier.is_member(student, selection, Bucket.ABSENT)


def test_members_keeps_roster_order(roster):
    classifier = AttendanceClassifier()
    selection = Selection.of(grade="2nd", center=NASR, week=1)

    ids = [s.student_id for s in classifier.members(roster, selection, Bucket.MAIN_CENTER_ATTENDED)]

    # Classifier alone does not drop deactivated accounts; the pipeline does.
    assert ids == [1, 3, 4]
