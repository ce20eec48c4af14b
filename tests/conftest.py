from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

import pytest

from src.class_log.class_log.core.enums import SessionStatus
from src.class_log.class_log.core.exceptions import DuplicateKeyError, NotFoundError
from src.class_log.class_log.sessions.model import Session
from src.class_log.class_log.users.model import Identity, ScheduleEntry


class InMemorySessions:
    """Dict-backed session store mirroring the MySQL repository semantics."""

    def __init__(self, sessions=()):
        self._by_key: dict[str, Session] = {}
        for s in sessions:
            self.insert(s)

    def insert(self, session: Session) -> None:
        if session.session_key in self._by_key:
            raise DuplicateKeyError(session.session_key)
        self._by_key[session.session_key] = session

    def get(self, session_key: str) -> Optional[Session]:
        return self._by_key.get(session_key)

    def find_open_by_owner_and_activity(self, owner_email: str, activity_id: str) -> Optional[Session]:
        matches = [
            s
            for s in self._by_key.values()
            if s.owner_email == owner_email and s.activity_id == activity_id and s.status == SessionStatus.OPEN
        ]
        if not matches:
            return None
        return max(matches, key=lambda s: s.created_at)

    def find_all_open_by_owner(self, owner_email: str):
        items = [s for s in self._by_key.values() if s.owner_email == owner_email and s.status == SessionStatus.OPEN]
        return sorted(items, key=lambda s: s.created_at)

    def find_all(self):
        return sorted(self._by_key.values(), key=lambda s: s.created_at)

    def update(self, session: Session, *, expected_status: Optional[SessionStatus] = None) -> None:
        current = self._by_key.get(session.session_key)
        if current is None or (expected_status is not None and current.status != expected_status):
            raise NotFoundError(session.session_key)
        self._by_key[session.session_key] = session


class InMemoryIdentities:
    def __init__(self, identities=()):
        self._by_email = {i.email: i for i in identities}

    def get_by_email(self, email: str) -> Optional[Identity]:
        return self._by_email.get(email)


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 1, 9, 30, 0)


@pytest.fixture
def clock(fixed_now) -> FakeClock:
    return FakeClock(fixed_now)


@pytest.fixture
def sessions_repo() -> InMemorySessions:
    return InMemorySessions()


@pytest.fixture
def identities_repo() -> InMemoryIdentities:
    return InMemoryIdentities(
        [
            Identity(
                email="a@x.com",
                username="Ana",
                city="Recife",
                schedule=(ScheduleEntry(name="Math", weekday="Mon", start="08:00", end="09:30"),),
            ),
            Identity(email="b@x.com", username="Bruno"),
        ]
    )


@pytest.fixture
def make_session():
    def _make(**overrides) -> Session:
        values = dict(
            session_key="MATH101-1709281800000",
            activity_id="MATH101",
            owner_email="a@x.com",
            subject_name="Math",
            weekday="Mon",
            calendar_date="01/03/2024",
            start_time="08:00",
            status=SessionStatus.OPEN,
            status_label="Em Andamento",
            created_at=datetime(2024, 3, 1, 8, 0, 0),
        )
        values.update(overrides)
        return Session(**values)

    return _make


@pytest.fixture
def closed_copy():
    def _close(session: Session, *, end_time: str, duration: str, label: str = "Concluído") -> Session:
        return replace(session, end_time=end_time, duration=duration, status=SessionStatus.CLOSED, status_label=label)

    return _close
