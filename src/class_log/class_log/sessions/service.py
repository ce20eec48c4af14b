from __future__ import annotations

import logging
import threading
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import epoch_millis, format_calendar_date, now_local
from ..common.time_interval import elapsed, format_decimal_hours, parse_time
from ..common.validators import require_calendar_date, require_non_empty
from ..core.constants import DEFAULT_STATUS_LABELS
from ..core.enums import SessionStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..users.service import IdentityService
from .model import Session
from .repository import SessionRepository

logger = logging.getLogger(__name__)

_OPEN_LABELS = {SessionStatus.OPEN.value.casefold(), DEFAULT_STATUS_LABELS[SessionStatus.OPEN].casefold()}


class SessionKeyGenerator:
    """Builds ``{activity_id}-{epoch_millis}`` keys.

    Millis are kept strictly increasing per activity inside the process, so
    two opens landing on the same clock tick still get distinct keys.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._last_millis: dict[str, int] = {}

    def next_key(self, activity_id: str, now: datetime) -> str:
        millis = epoch_millis(now)
        with self._lock:
            last = self._last_millis.get(activity_id)
            if last is not None and millis <= last:
                millis = last + 1
            self._last_millis[activity_id] = millis
        return f"{activity_id}-{millis}"


class SessionService:
    """Use case: open/close class sessions (OPEN -> CLOSED, never back)."""

    def __init__(
        self,
        sessions: SessionRepository,
        identities: Optional[IdentityService] = None,
        *,
        clock: Optional[Callable[[], datetime]] = None,
        key_generator: Optional[SessionKeyGenerator] = None,
    ):
        self._sessions = sessions
        self._identities = identities
        self._clock = clock or now_local
        self._keys = key_generator or SessionKeyGenerator()

    def _ensure_identity(self, owner_email: str) -> None:
        if self._identities:
            self._identities.authenticate(owner_email)

    def open_session(
        self,
        *,
        owner_email: str,
        activity_id: str,
        subject: str,
        weekday: str,
        date: str,
        start_time: str,
    ) -> Session:
        owner_email = require_non_empty(owner_email, "email")
        activity_id = require_non_empty(activity_id, "aula_id")
        subject = require_non_empty(subject, "disciplina")
        weekday = require_non_empty(weekday, "dia")
        date = require_calendar_date(date, "data")
        start = parse_time(require_non_empty(start_time, "horario_inicio"))

        self._ensure_identity(owner_email)

        now = self._clock()
        session = Session(
            session_key=self._keys.next_key(activity_id, now),
            activity_id=activity_id,
            owner_email=owner_email,
            subject_name=subject,
            weekday=weekday,
            calendar_date=date,
            start_time=str(start),
            status=SessionStatus.OPEN,
            status_label=DEFAULT_STATUS_LABELS[SessionStatus.OPEN],
            created_at=now,
        )
        self._sessions.insert(session)
        logger.info("Opened session %s for %s", session.session_key, owner_email)
        return session

    def close_session(
        self,
        *,
        owner_email: str,
        activity_id: str,
        end_time: str,
        date: str,
        status: str,
    ) -> Session:
        owner_email = require_non_empty(owner_email, "email")
        activity_id = require_non_empty(activity_id, "aula_id")
        end_time = require_non_empty(end_time, "horario_fim")
        date = require_non_empty(date, "data")
        label = require_non_empty(status, "status")
        if label.casefold() in _OPEN_LABELS:
            raise ValidationError(f"Status de encerramento inválido: {label}")

        current = self._sessions.find_open_by_owner_and_activity(owner_email, activity_id)
        if not current or not current.is_open:
            raise NotFoundError("Aula em andamento não encontrada")

        if not current.start_time or not current.start_time.strip():
            raise ValidationError("Sessão sem horário de início")

        # Compared with the server's current date, not the session's own date.
        today = format_calendar_date(self._clock().date())
        if date != today:
            logger.warning("Rejected close of %s: date %s is not today (%s)", current.session_key, date, today)
            raise ValidationError(f"A data informada ({date}) não corresponde à data de hoje ({today})")

        end = parse_time(end_time)
        duration = elapsed(current.start_time, end)

        closed = replace(
            current,
            end_time=str(end),
            duration=format_decimal_hours(duration),
            status=SessionStatus.CLOSED,
            status_label=label,
        )
        try:
            self._sessions.update(closed, expected_status=SessionStatus.OPEN)
        except NotFoundError:
            logger.warning("Session %s was closed concurrently", current.session_key)
            raise NotFoundError("Aula em andamento não encontrada") from None

        logger.info("Closed session %s (%s h)", closed.session_key, closed.duration)
        return closed

    def list_open(self, owner_email: str) -> list[Session]:
        owner_email = require_non_empty(owner_email, "email")
        # An owner without an account simply has no open sessions.
        return list(self._sessions.find_all_open_by_owner(owner_email))
