from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import SessionStatus
from .model import Session


class SessionRepository(Protocol):
    """Persistent collection of sessions keyed by ``session_key``.

    Every method is atomic for a single record; nothing spans records.
    """

    def insert(self, session: Session) -> None:
        """Store a new session; raises DuplicateKeyError if the key exists."""
        raise NotImplementedError

    def find_open_by_owner_and_activity(self, owner_email: str, activity_id: str) -> Optional[Session]:
        raise NotImplementedError

    def find_all_open_by_owner(self, owner_email: str) -> Sequence[Session]:
        raise NotImplementedError

    def find_all(self) -> Sequence[Session]:
        raise NotImplementedError

    def update(self, session: Session, *, expected_status: Optional[SessionStatus] = None) -> None:
        """Overwrite the stored record with the same key.

        With ``expected_status`` the write only happens while the stored
        record still has that status. Raises NotFoundError when no record
        matched.
        """
        raise NotImplementedError
