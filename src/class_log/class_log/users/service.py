from __future__ import annotations

import logging

from ..common.validators import require_non_empty
from ..core.exceptions import IdentityNotFoundError, NotFoundError
from .model import Identity, ScheduleEntry
from .repository import IdentityRepository

logger = logging.getLogger(__name__)


class IdentityService:
    """Use case: resolve the account a session belongs to."""

    def __init__(self, identities: IdentityRepository):
        self._identities = identities

    def authenticate(self, email: str) -> Identity:
        email = require_non_empty(email, "email")
        identity = self._identities.get_by_email(email)
        if not identity:
            logger.warning("Unknown identity %s", email)
            raise IdentityNotFoundError("Usuário não encontrado!")
        return identity

    def get_schedule(self, email: str) -> list[ScheduleEntry]:
        identity = self.authenticate(email)
        if not identity.schedule:
            raise NotFoundError("Nenhuma disciplina encontrada!")
        return list(identity.schedule)
