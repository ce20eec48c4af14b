from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.constants import DEFAULT_STATUS_LABELS
from ..core.enums import SessionStatus


@dataclass(frozen=True)
class Session:
    """Domain entity: one open/close attendance record of an activity.

    ``end_time`` and ``duration`` are set together, exactly once, when the
    session is closed.
    """

    session_key: str
    activity_id: str
    owner_email: str
    subject_name: str
    weekday: str
    calendar_date: str
    start_time: str
    status: SessionStatus
    created_at: datetime
    end_time: Optional[str] = None
    duration: Optional[str] = None
    status_label: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.status == SessionStatus.OPEN

    @property
    def display_status(self) -> str:
        return self.status_label or DEFAULT_STATUS_LABELS[self.status]

    def to_dict(self) -> dict:
        return {
            "session_key": self.session_key,
            "activity_id": self.activity_id,
            "owner_email": self.owner_email,
            "subject_name": self.subject_name,
            "weekday": self.weekday,
            "calendar_date": self.calendar_date,
            "start_time": self.start_time,
            "end_time": self.end_time or "",
            "status": self.status.value,
            "status_label": self.display_status,
            "duration": self.duration or "",
            "created_at": self.created_at.isoformat(timespec="milliseconds"),
        }
