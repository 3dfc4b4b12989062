"""AdminUserService unit tests: validation happens before storage; notification is best effort."""

from contextlib import asynccontextmanager
from datetime import UTC, datetime
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from admin_management.application.dtos.admin_user import AdminProfile, AdminUserResult
from admin_management.application.dtos.verification import IssuedVerificationCode
from admin_management.application.services.admin_user_service import AdminUserService
from admin_management.core.locks import KeyedLocks
from admin_management.domain.enums import VerificationPurpose
from admin_management.domain.exceptions import (
    NotificationDeliveryException,
    UnknownPermissionException,
    ValidationException,
)

NOW = datetime(2026, 1, 1, tzinfo=UTC)


def _admin(**overrides) -> AdminUserResult:
    values = {
        "id": "admin-1",
        "email": "a@x.com",
        "is_active": False,
        "profile": AdminProfile(),
        "permissions": (),
        "created_at": NOW,
    }
    values.update(overrides)
    return AdminUserResult(**values)


@pytest.fixture
def repos():
    admin_users = AsyncMock()
    admin_users.create = AsyncMock(return_value=_admin())
    admin_users.get_by_email = AsyncMock(return_value=_admin())
    return SimpleNamespace(admin_users=admin_users, audit_log=AsyncMock())


@pytest.fixture
def verification():
    svc = AsyncMock()
    svc.issue = AsyncMock(
        return_value=IssuedVerificationCode(
            code="ABCDEFGH",
            admin_user_id="admin-1",
            purpose=VerificationPurpose.EMAIL_CONFIRMATION,
            created_at=NOW,
            expires_at=NOW,
        )
    )
    return svc


@pytest.fixture
def notifier():
    return AsyncMock()


@pytest.fixture
def hasher():
    h = MagicMock()
    h.hash_password.return_value = "hashed"
    return h


@pytest.fixture
def service(repos, verification, notifier, hasher):
    @asynccontextmanager
    async def scope():
        yield repos

    return AdminUserService(
        scope, verification, notifier, hasher, KeyedLocks(), page_size_max=50
    )


@pytest.mark.asyncio
async def test_register_hashes_password_and_sends_code(service, repos, notifier, hasher) -> None:
    result = await service.register(AdminProfile(), "a@x.com", "s3cret-pass")

    hasher.hash_password.assert_called_once_with("s3cret-pass")
    repos.admin_users.create.assert_awaited_once_with(AdminProfile(), "a@x.com", "hashed")
    notifier.send.assert_awaited_once_with("admin-1", "ABCDEFGH", "a@x.com")
    assert result.verification_code_expires_at == NOW


@pytest.mark.asyncio
async def test_register_returns_when_notifier_fails(service, notifier) -> None:
    notifier.send.side_effect = NotificationDeliveryException("down")

    result = await service.register(AdminProfile(), "a@x.com", "s3cret-pass")

    assert result.admin.id == "admin-1"


@pytest.mark.asyncio
@pytest.mark.parametrize("email", [None, "", "  ", "no-at-sign", "a@"])
async def test_register_rejects_bad_email_before_storage(service, repos, hasher, email) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await service.register(AdminProfile(), email, "s3cret-pass")
    assert exc_info.value.details["field"] == "email"
    repos.admin_users.create.assert_not_called()
    hasher.hash_password.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("password", [None, "", "short", "x" * 129])
async def test_register_rejects_password_outside_policy(service, repos, password) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await service.register(AdminProfile(), "a@x.com", password)
    assert exc_info.value.details["field"] == "password"
    repos.admin_users.create.assert_not_called()


@pytest.mark.asyncio
async def test_update_permissions_rejects_unknown_before_storage(service, repos) -> None:
    with pytest.raises(UnknownPermissionException):
        await service.update_permissions("admin-1", ["view_admins", "nope"])
    repos.admin_users.set_permissions.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "call",
    [
        lambda s: s.get_by_id(""),
        lambda s: s.get_by_email("  "),
        lambda s: s.get_permissions(None),
        lambda s: s.update_profile("", AdminProfile()),
        lambda s: s.update_permissions(" ", []),
        lambda s: s.reset_password("", "s3cret-pass"),
        lambda s: s.get_audit_trail(""),
        lambda s: s.resend_confirmation(""),
    ],
)
async def test_blank_identifiers_fail_before_storage(service, repos, call) -> None:
    with pytest.raises(ValidationException):
        await call(service)
    assert repos.admin_users.method_calls == []


@pytest.mark.asyncio
async def test_get_paginated_enforces_page_size_max(service, repos) -> None:
    with pytest.raises(ValidationException):
        await service.get_paginated(1, 51)
    repos.admin_users.list_paginated.assert_not_called()


@pytest.mark.asyncio
async def test_get_paginated_wraps_repository_page(service, repos) -> None:
    repos.admin_users.list_paginated = AsyncMock(return_value=([_admin()], 7))

    page = await service.get_paginated(2, 5, active_only=True)

    repos.admin_users.list_paginated.assert_awaited_once_with(2, 5, True)
    assert page.total_count == 7
    assert page.current_page == 2
    assert page.page_size == 5
    assert [a.id for a in page.items] == ["admin-1"]


@pytest.mark.asyncio
async def test_resend_confirmation_returns_new_expiry(service, verification, notifier) -> None:
    assert await service.resend_confirmation("a@x.com") == NOW
    verification.issue.assert_awaited_once_with("admin-1")
    notifier.send.assert_awaited_once()


@pytest.mark.asyncio
async def test_resend_confirmation_rejects_active_admin(service, repos, verification) -> None:
    repos.admin_users.get_by_email.return_value = _admin(is_active=True)

    with pytest.raises(ValidationException):
        await service.resend_confirmation("a@x.com")
    verification.issue.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "profile,field",
    [
        (AdminProfile(company="x" * 256), "company"),
        (AdminProfile(first_name="x" * 256), "first_name"),
        (AdminProfile(phone_number="1" * 65), "phone_number"),
    ],
)
async def test_register_rejects_overlong_profile_fields(
    service, repos, hasher, profile, field
) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await service.register(profile, "a@x.com", "s3cret-pass")
    assert exc_info.value.details["field"] == field
    repos.admin_users.create.assert_not_called()
    hasher.hash_password.assert_not_called()


@pytest.mark.asyncio
async def test_update_profile_rejects_overlong_field_before_storage(service, repos) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await service.update_profile("admin-1", AdminProfile(job_title="x" * 256))
    assert exc_info.value.details["field"] == "job_title"
    repos.admin_users.update_profile.assert_not_called()


@pytest.mark.asyncio
async def test_profile_fields_at_column_width_are_accepted(service, repos) -> None:
    profile = AdminProfile(company="x" * 255, phone_number="1" * 64)

    await service.update_profile("admin-1", profile)

    repos.admin_users.update_profile.assert_awaited_once_with("admin-1", profile, None)


@pytest.mark.asyncio
async def test_password_with_lone_surrogate_is_rejected(service, repos, hasher) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await service.register(AdminProfile(), "a@x.com", "s3cret-\ud800pass")
    assert exc_info.value.details["field"] == "password"
    hasher.hash_password.assert_not_called()
    repos.admin_users.create.assert_not_called()


@pytest.mark.asyncio
async def test_get_paginated_rejects_offset_beyond_bigint(service, repos) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await service.get_paginated(2**62, 50)
    assert exc_info.value.details["field"] == "page"
    repos.admin_users.list_paginated.assert_not_called()
