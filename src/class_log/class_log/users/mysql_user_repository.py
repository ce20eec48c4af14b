from __future__ import annotations

from typing import Optional

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Identity, ScheduleEntry
from .repository import IdentityRepository


class MySQLIdentityRepository(IdentityRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, email: str) -> Optional[Identity]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT email, username, city, role, position, course
                FROM users
                WHERE email=%s
                """,
                (email,),
            )
            row = fetchone(cur)
            if not row:
                return None

            cur.execute(
                """
                SELECT name, weekday, start_time, end_time
                FROM schedule_entries
                WHERE email=%s
                ORDER BY entry_id
                """,
                (email,),
            )
            schedule = tuple(
                ScheduleEntry(name=r["name"], weekday=r["weekday"], start=r["start_time"], end=r["end_time"])
                for r in fetchall(cur)
            )

            return Identity(
                email=row["email"],
                username=row["username"],
                city=row.get("city"),
                role=Role(row.get("role") or Role.USER.value),
                position=row.get("position"),
                course=row.get("course"),
                schedule=schedule,
            )
