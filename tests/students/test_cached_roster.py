from src.session_insights.session_insights.students.cached_roster import CachedRosterSource

from tests.factories import InMemoryRoster, make_student


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_snapshot_reused_until_refresh_interval():
    source = InMemoryRoster([make_student(1)])
    clock = FakeClock()
    cached = CachedRosterSource(source, refresh_seconds=1800, clock=clock)

    cached.get_all_students()
    clock.now = 1799
    cached.get_all_students()
    assert source.calls == 1

    clock.now = 1800
    cached.get_all_students()
    assert source.calls == 2


def test_invalidate_forces_refetch():
    source = InMemoryRoster([make_student(1)])
    cached = CachedRosterSource(source, refresh_seconds=1800, clock=FakeClock())

    cached.get_all_students()
    cached.invalidate()
    students = cached.get_all_students()

    assert source.calls == 2
    assert students[0].student_id == 1
