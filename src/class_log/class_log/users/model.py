from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class ScheduleEntry:
    """One weekly slot of an activity the identity teaches/attends."""

    name: str
    weekday: str
    start: str
    end: str

    def to_dict(self) -> dict:
        return {"name": self.name, "weekday": self.weekday, "start": self.start, "end": self.end}


@dataclass(frozen=True)
class Identity:
    """Domain entity: account referenced by sessions through ``email``.

    Note: credentials are handled elsewhere; this object never carries them.
    """

    email: str
    username: str
    city: Optional[str] = None
    role: Role = Role.USER
    position: Optional[str] = None
    course: Optional[str] = None
    schedule: tuple[ScheduleEntry, ...] = field(default_factory=tuple)
