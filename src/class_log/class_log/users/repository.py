from __future__ import annotations

from typing import Optional, Protocol

from .model import Identity


class IdentityRepository(Protocol):
    """Repository interface for identities.

    Services depend on this protocol, never on a concrete database.
    """

    def get_by_email(self, email: str) -> Optional[Identity]:
        raise NotImplementedError
