from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .core.enums import DurationStyle
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import SessionReportService
from .sessions.mysql_session_repository import MySQLSessionRepository
from .sessions.repository import SessionRepository
from .sessions.service import SessionService
from .users.mysql_user_repository import MySQLIdentityRepository
from .users.repository import IdentityRepository
from .users.service import IdentityService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    sessions_repo: SessionRepository
    identities_repo: IdentityRepository

    identity_service: IdentityService
    session_service: SessionService
    report_service: SessionReportService


def assemble(
    *,
    sessions_repo: SessionRepository,
    identities_repo: IdentityRepository,
    conn: Optional[DatabaseConnection] = None,
    clock: Optional[Callable[[], datetime]] = None,
    report_style: DurationStyle = DurationStyle.VERBOSE,
) -> Container:
    identity_service = IdentityService(identities_repo)
    session_service = SessionService(sessions_repo, identity_service, clock=clock)
    report_service = SessionReportService(sessions_repo, style=report_style)

    return Container(
        conn=conn,
        sessions_repo=sessions_repo,
        identities_repo=identities_repo,
        identity_service=identity_service,
        session_service=session_service,
        report_service=report_service,
    )


def build_container(*, db_config: dict, report_style: DurationStyle = DurationStyle.VERBOSE) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection(config)

    return assemble(
        sessions_repo=MySQLSessionRepository(conn),
        identities_repo=MySQLIdentityRepository(conn),
        conn=conn,
        report_style=report_style,
    )
