"""AdminUserService against a real SQLite store: registration, permissions, pagination, lookups."""

import asyncio

import pytest

from admin_management.application.dtos.admin_user import AdminProfile
from admin_management.domain.enums import Permission
from admin_management.domain.exceptions import (
    DuplicateEmailException,
    ResourceNotFoundException,
    UnknownPermissionException,
    ValidationException,
)
from admin_management.shared.enums import AuditAction

pytestmark = pytest.mark.integration


async def _register(services, email="a@x.com", **profile):
    result = await services.admin_users.register(AdminProfile(**profile), email, "s3cret-pass")
    return result.admin


async def _register_active(services, notifier, email):
    admin = await _register(services, email)
    await services.admin_users.confirm_email(notifier.last_code_for(admin.id))
    return admin


@pytest.mark.asyncio
async def test_register_stores_profile_and_hashes_password(services, session_factory) -> None:
    from sqlalchemy import select

    from admin_management.infrastructure.persistence.models import AdminUser

    admin = await _register(services, "  Ann@Acme.io ", first_name="Ann", company="Acme")

    assert admin.email == "Ann@Acme.io"
    assert admin.profile.first_name == "Ann"
    assert admin.profile.company == "Acme"
    assert admin.permissions == ()
    async with session_factory() as session:
        row = (await session.execute(select(AdminUser))).scalar_one()
    assert row.password_hash == "hashed:s3cret-pass"
    assert row.email_normalized == "ann@acme.io"


@pytest.mark.asyncio
async def test_register_duplicate_email_is_case_insensitive(services) -> None:
    await _register(services, "a@x.com")
    with pytest.raises(DuplicateEmailException):
        await _register(services, "A@X.COM")


@pytest.mark.asyncio
async def test_concurrent_registration_of_same_email_creates_one_admin(services) -> None:
    results = await asyncio.gather(
        *(_register(services, "race@x.com") for _ in range(4)), return_exceptions=True
    )

    created = [r for r in results if not isinstance(r, Exception)]
    duplicates = [r for r in results if isinstance(r, DuplicateEmailException)]
    assert len(created) == 1
    assert len(duplicates) == 3
    assert len(await services.admin_users.get_all()) == 1


@pytest.mark.asyncio
async def test_register_survives_notifier_failure(services, notifier) -> None:
    notifier.fail = True

    result = await services.admin_users.register(AdminProfile(), "a@x.com", "s3cret-pass")

    assert result.admin.is_active is False
    assert (await services.admin_users.get_by_email("a@x.com")).id == result.admin.id


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "email,password",
    [
        ("", "s3cret-pass"),
        ("not-an-email", "s3cret-pass"),
        ("a@x.com", "short"),
        ("a@x.com", "   "),
    ],
)
async def test_register_rejects_invalid_input_without_writing(services, email, password) -> None:
    with pytest.raises(ValidationException):
        await services.admin_users.register(AdminProfile(), email, password)
    assert await services.admin_users.get_all() == []


@pytest.mark.asyncio
async def test_get_by_email_active_only_matches_case_insensitively_once_active(
    services, notifier
) -> None:
    admin = await _register(services, "a@x.com")

    with pytest.raises(ResourceNotFoundException):
        await services.admin_users.get_by_email("A@X.COM", active_only=True)
    assert (await services.admin_users.get_by_email("A@X.COM")).id == admin.id

    await services.admin_users.confirm_email(notifier.last_code_for(admin.id))

    found = await services.admin_users.get_by_email("A@X.COM", active_only=True)
    assert found.id == admin.id
    assert found.is_active is True


@pytest.mark.asyncio
async def test_permission_replacement_is_total(services) -> None:
    admin = await _register(services)

    await services.admin_users.update_permissions(
        admin.id, [Permission.MANAGE_ADMINS, "view_reports"]
    )
    result = await services.admin_users.update_permissions(admin.id, ["manage_settings"])

    assert result.permissions == (Permission.MANAGE_SETTINGS,)
    assert await services.admin_users.get_permissions(admin.id) == [Permission.MANAGE_SETTINGS]


@pytest.mark.asyncio
async def test_unknown_permission_leaves_stored_set_unchanged(services) -> None:
    admin = await _register(services)
    await services.admin_users.update_permissions(admin.id, ["view_admins"])

    with pytest.raises(UnknownPermissionException) as exc_info:
        await services.admin_users.update_permissions(
            admin.id, ["manage_admins", "UnknownPerm"]
        )

    assert exc_info.value.error_code == "VALIDATION_ERROR"
    assert exc_info.value.details["unknown_permissions"] == ["UnknownPerm"]
    assert await services.admin_users.get_permissions(admin.id) == [Permission.VIEW_ADMINS]


@pytest.mark.asyncio
async def test_update_permissions_audits_granted_and_revoked(services) -> None:
    admin = await _register(services)
    await services.admin_users.update_permissions(admin.id, ["view_admins", "view_reports"])

    await services.admin_users.update_permissions(admin.id, ["view_reports", "manage_vouchers"])

    trail = await services.admin_users.get_audit_trail(admin.id)
    updates = [e for e in trail if e.action == AuditAction.PERMISSIONS_UPDATED]
    assert len(updates) == 2
    assert updates[-1].metadata == {
        "granted": ["manage_vouchers"],
        "revoked": ["view_admins"],
    }


@pytest.mark.asyncio
async def test_update_permissions_for_missing_admin_raises(services) -> None:
    with pytest.raises(ResourceNotFoundException):
        await services.admin_users.update_permissions("missing", ["view_admins"])


@pytest.mark.asyncio
async def test_pagination_is_stable_and_covers_total(services) -> None:
    emails = [f"admin{i:02d}@x.com" for i in range(25)]
    for email in emails:
        await _register(services, email)

    page2 = await services.admin_users.get_paginated(page=2, page_size=10)
    assert [a.email for a in page2.items] == emails[10:20]
    assert page2.total_count == 25
    assert page2.current_page == 2
    assert page2.page_size == 10

    sizes = []
    for page in range(1, 4):
        result = await services.admin_users.get_paginated(page=page, page_size=10)
        sizes.append(len(result.items))
    assert sizes == [10, 10, 5]
    assert sum(sizes) == 25

    again = await services.admin_users.get_paginated(page=2, page_size=10)
    assert [a.id for a in again.items] == [a.id for a in page2.items]


@pytest.mark.asyncio
async def test_pagination_filters_by_active_flag(services, notifier) -> None:
    await _register(services, "inactive@x.com")
    active = await _register_active(services, notifier, "active@x.com")

    only_active = await services.admin_users.get_paginated(1, 10, active_only=True)
    only_inactive = await services.admin_users.get_paginated(1, 10, active_only=False)
    everyone = await services.admin_users.get_paginated(1, 10)

    assert [a.id for a in only_active.items] == [active.id]
    assert [a.email for a in only_inactive.items] == ["inactive@x.com"]
    assert everyone.total_count == 2


@pytest.mark.asyncio
@pytest.mark.parametrize("page,page_size", [(0, 10), (1, 0), (1, 101)])
async def test_pagination_rejects_out_of_range(services, page, page_size) -> None:
    with pytest.raises(ValidationException):
        await services.admin_users.get_paginated(page, page_size)


@pytest.mark.asyncio
async def test_update_profile_keeps_unset_fields_and_can_deactivate(services, notifier) -> None:
    admin = await _register_active(services, notifier, "a@x.com")
    await services.admin_users.update_profile(
        admin.id, AdminProfile(first_name="Ann", job_title="Manager")
    )

    result = await services.admin_users.update_profile(
        admin.id, AdminProfile(job_title="Director"), is_active=False
    )

    assert result.profile.first_name == "Ann"
    assert result.profile.job_title == "Director"
    assert result.is_active is False
    actions = [e.action for e in await services.admin_users.get_audit_trail(admin.id)]
    assert actions == [
        AuditAction.CREATED,
        AuditAction.ACTIVATED,
        AuditAction.PROFILE_UPDATED,
        AuditAction.PROFILE_UPDATED,
        AuditAction.DEACTIVATED,
    ]


@pytest.mark.asyncio
async def test_resend_confirmation_rejects_active_admin(services, notifier) -> None:
    await _register_active(services, notifier, "a@x.com")
    with pytest.raises(ValidationException):
        await services.admin_users.resend_confirmation("a@x.com")


@pytest.mark.asyncio
async def test_resend_confirmation_for_unknown_email_raises(services) -> None:
    with pytest.raises(ResourceNotFoundException):
        await services.admin_users.resend_confirmation("nobody@x.com")


@pytest.mark.asyncio
async def test_reset_password_stores_new_hash_and_audits(services, session_factory) -> None:
    from sqlalchemy import select

    from admin_management.infrastructure.persistence.models import AdminUser

    admin = await _register(services)

    await services.admin_users.reset_password(admin.id, "another-pass")

    async with session_factory() as session:
        row = (await session.execute(select(AdminUser))).scalar_one()
    assert row.password_hash == "hashed:another-pass"
    trail = await services.admin_users.get_audit_trail(admin.id)
    assert trail[-1].action == AuditAction.PASSWORD_RESET
    assert "password_hash" not in trail[-1].entity_data


@pytest.mark.asyncio
async def test_reset_password_for_missing_admin_raises(services) -> None:
    with pytest.raises(ResourceNotFoundException):
        await services.admin_users.reset_password("missing", "another-pass")


@pytest.mark.asyncio
async def test_get_all_returns_creation_order(services) -> None:
    first = await _register(services, "first@x.com")
    second = await _register(services, "second@x.com")

    assert [a.id for a in await services.admin_users.get_all()] == [first.id, second.id]
