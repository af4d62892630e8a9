import pytest

from bujo.core.constants import ContentType, Operation
from bujo.core.exceptions import UnauthorizedError
from bujo.services.authorization import AuthorizationService


def test_owner_is_authorized():
    AuthorizationService(admin_users=[]).check_authorized_to_operate_on_content(
        "alice", "alice", ContentType.LABEL, Operation.UPDATE, 1
    )


def test_admin_is_authorized():
    AuthorizationService(admin_users=["root"]).check_authorized_to_operate_on_content(
        "alice", "root", ContentType.LABEL, Operation.DELETE, 1
    )


def test_other_user_is_rejected():
    auth = AuthorizationService(admin_users=["root"])

    with pytest.raises(UnauthorizedError) as excinfo:
        auth.check_authorized_to_operate_on_content("alice", "bob", ContentType.LABEL, Operation.DELETE, 7)

    assert excinfo.value.requester == "bob"
    assert excinfo.value.content_id == 7
    assert "DELETE" in excinfo.value.message


def test_defaults_to_configured_admins(monkeypatch):
    from bujo.config import settings

    monkeypatch.setattr(settings, "admin_users", ["ops"])

    assert AuthorizationService().is_admin("ops")
