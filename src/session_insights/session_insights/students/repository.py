from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class RosterSource(Protocol):
    """Roster interface consumed by the session-info engine.

    Note (DIP): services depend on this protocol, never on a concrete DB.
    Each call must return one coherent snapshot of the whole roster.
    """

    def get_all_students(self) -> Sequence[Student]:
        raise NotImplementedError


def find_student(roster: Sequence[Student], student_id: int) -> Optional[Student]:
    for s in roster:
        if s.student_id == student_id:
            return s
    return None
