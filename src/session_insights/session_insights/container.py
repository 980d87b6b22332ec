from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_PAGE_SIZE, DEFAULT_ROSTER_REFRESH_SECONDS
from .database.connection import DBConfig, DatabaseConnection
from .sessions.service import SessionInfoService
from .students.cached_roster import CachedRosterSource
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import RosterSource


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    students_repo: RosterSource
    roster_cache: CachedRosterSource

    session_info_service: SessionInfoService


def build_container_for(
    roster: RosterSource,
    *,
    conn: Optional[DatabaseConnection] = None,
    page_size: int = DEFAULT_PAGE_SIZE,
    roster_refresh_seconds: float = DEFAULT_ROSTER_REFRESH_SECONDS,
) -> Container:
    roster_cache = CachedRosterSource(roster, refresh_seconds=roster_refresh_seconds)
    session_info_service = SessionInfoService(roster_cache, page_size=page_size)

    return Container(
        conn=conn,
        students_repo=roster,
        roster_cache=roster_cache,
        session_info_service=session_info_service,
    )


def build_container(
    *,
    db_config: dict,
    page_size: int = DEFAULT_PAGE_SIZE,
    roster_refresh_seconds: float = DEFAULT_ROSTER_REFRESH_SECONDS,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_settings(db_config))

    return build_container_for(
        MySQLStudentRepository(conn),
        conn=conn,
        page_size=page_size,
        roster_refresh_seconds=roster_refresh_seconds,
    )
