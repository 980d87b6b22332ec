from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Sequence

from ..core.constants import DEFAULT_ROSTER_REFRESH_SECONDS
from .model import Student
from .repository import RosterSource

logger = logging.getLogger(__name__)


class CachedRosterSource(RosterSource):
    """Keep the last roster snapshot for a fixed refresh interval.

    `invalidate()` forces the next call to refetch (window focus / reconnect).
    """

    def __init__(
        self,
        source: RosterSource,
        *,
        refresh_seconds: float = DEFAULT_ROSTER_REFRESH_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._source = source
        self._refresh_seconds = float(refresh_seconds)
        self._clock = clock
        self._snapshot: Optional[tuple[Student, ...]] = None
        self._fetched_at = 0.0

    def get_all_students(self) -> Sequence[Student]:
        now = self._clock()
        if self._snapshot is None or now - self._fetched_at >= self._refresh_seconds:
            self._snapshot = tuple(self._source.get_all_students())
            self._fetched_at = now
            logger.info("Roster refreshed (%d students)", len(self._snapshot))
        return self._snapshot

    def invalidate(self) -> None:
        self._snapshot = None
