from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import mysql.connector

from ..core.enums import SessionStatus
from ..core.exceptions import DuplicateKeyError, NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import Session
from .repository import SessionRepository

_COLUMNS = """
    session_key, activity_id, owner_email, subject_name, weekday, calendar_date,
    start_time, end_time, status, status_label, duration, created_at
"""


def _to_session(r: Dict[str, Any]) -> Session:
    return Session(
        session_key=r["session_key"],
        activity_id=r["activity_id"],
        owner_email=r["owner_email"],
        subject_name=r["subject_name"],
        weekday=r["weekday"],
        calendar_date=r["calendar_date"],
        start_time=r["start_time"],
        end_time=r.get("end_time") or None,
        status=SessionStatus(r["status"]),
        status_label=r.get("status_label"),
        duration=r.get("duration") or None,
        created_at=r["created_at"],
    )


class MySQLSessionRepository(SessionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def insert(self, session: Session) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"""
                    INSERT INTO sessions({_COLUMNS})
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        session.session_key,
                        session.activity_id,
                        session.owner_email,
                        session.subject_name,
                        session.weekday,
                        session.calendar_date,
                        session.start_time,
                        session.end_time,
                        session.status.value,
                        session.status_label,
                        session.duration,
                        session.created_at,
                    ),
                )
        except mysql.connector.IntegrityError as e:
            if is_duplicate_key(e):
                raise DuplicateKeyError(f"Sessão {session.session_key} já existe") from e
            raise

    def find_open_by_owner_and_activity(self, owner_email: str, activity_id: str) -> Optional[Session]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM sessions
                WHERE owner_email=%s AND activity_id=%s AND status=%s
                ORDER BY created_at DESC
                LIMIT 1
                """,
                (owner_email, activity_id, SessionStatus.OPEN.value),
            )
            r = fetchone(cur)
            return _to_session(r) if r else None

    def find_all_open_by_owner(self, owner_email: str) -> Sequence[Session]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM sessions
                WHERE owner_email=%s AND status=%s
                ORDER BY created_at
                """,
                (owner_email, SessionStatus.OPEN.value),
            )
            return [_to_session(r) for r in fetchall(cur)]

    def find_all(self) -> Sequence[Session]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM sessions ORDER BY created_at")
            return [_to_session(r) for r in fetchall(cur)]

    def update(self, session: Session, *, expected_status: Optional[SessionStatus] = None) -> None:
        clauses = ["session_key=%s"]
        params: list[object] = [
            session.activity_id,
            session.owner_email,
            session.subject_name,
            session.weekday,
            session.calendar_date,
            session.start_time,
            session.end_time,
            session.status.value,
            session.status_label,
            session.duration,
            session.session_key,
        ]
        if expected_status is not None:
            clauses.append("status=%s")
            params.append(expected_status.value)
        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                UPDATE sessions
                SET activity_id=%s, owner_email=%s, subject_name=%s, weekday=%s, calendar_date=%s,
                    start_time=%s, end_time=%s, status=%s, status_label=%s, duration=%s
                WHERE {where}
                """,
                tuple(params),
            )
            if cur.rowcount == 0:
                raise NotFoundError(f"Sessão {session.session_key} não encontrada")
