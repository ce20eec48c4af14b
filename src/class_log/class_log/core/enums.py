from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role stored with the identity."""

    ADMIN = "admin"
    USER = "user"


class SessionStatus(str, Enum):
    """Lifecycle state persisted for a class session.

    Human-facing labels ("Em Andamento", "Concluído", ...) are kept apart in
    ``status_label``; only these two values are ever stored in ``status``.
    """

    OPEN = "OPEN"
    CLOSED = "CLOSED"


class DurationStyle(str, Enum):
    VERBOSE = "verbose"
    COMPACT = "compact"
