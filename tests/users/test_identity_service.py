import pytest

from src.class_log.class_log.core.exceptions import IdentityNotFoundError, NotFoundError, ValidationError
from src.class_log.class_log.users.service import IdentityService


def test_authenticate_known_email(identities_repo):
    identity = IdentityService(identities_repo).authenticate("a@x.com")
    assert identity.username == "Ana"


def test_authenticate_unknown_email(identities_repo):
    with pytest.raises(IdentityNotFoundError):
        IdentityService(identities_repo).authenticate("nobody@x.com")


def test_authenticate_requires_email(identities_repo):
    with pytest.raises(ValidationError):
        IdentityService(identities_repo).authenticate("  ")


def test_schedule_lookup(identities_repo):
    svc = IdentityService(identities_repo)
    entries = svc.get_schedule("a@x.com")
    assert [e.name for e in entries] == ["Math"]

    with pytest.raises(NotFoundError):
        svc.get_schedule("b@x.com")
