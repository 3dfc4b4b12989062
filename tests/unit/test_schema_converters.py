"""Explicit converters from application DTOs to external schemas."""

from datetime import UTC, datetime

import pytest

from admin_management.application.dtos.admin_user import (
    AdminProfile,
    AdminUserResult,
    AuditEntryResult,
    PaginatedAdminUsers,
    RegistrationResult,
)
from admin_management.application.dtos.verification import Failed, Succeeded
from admin_management.domain.enums import Permission, SuggestedValueType, VerificationCodeError
from admin_management.domain.exceptions import DuplicateEmailException
from admin_management.schemas import (
    AdminUserResponse,
    UpdateAdminRequest,
    profile_from_request,
    to_admin_user_response,
    to_audit_entry_response,
    to_autofill_response,
    to_confirmation_response,
    to_error_response,
    to_paginated_response,
    to_registration_response,
)
from admin_management.shared.enums import AuditAction

NOW = datetime(2026, 1, 1, tzinfo=UTC)

ADMIN = AdminUserResult(
    id="admin-1",
    email="a@x.com",
    is_active=True,
    profile=AdminProfile(
        company="Acme",
        department="Ops",
        first_name="Ann",
        last_name="Lee",
        job_title="Manager",
        phone_number="+1 555",
    ),
    permissions=(Permission.MANAGE_ADMINS, Permission.VIEW_REPORTS),
    created_at=NOW,
)


def test_admin_user_response_copies_every_field() -> None:
    response = to_admin_user_response(ADMIN)

    assert response == AdminUserResponse(
        id="admin-1",
        email="a@x.com",
        is_active=True,
        company="Acme",
        department="Ops",
        first_name="Ann",
        last_name="Lee",
        job_title="Manager",
        phone_number="+1 555",
        permissions=["manage_admins", "view_reports"],
        created_at=NOW,
    )
    assert set(AdminUserResponse.model_fields) == set(response.model_dump())


def test_paginated_and_registration_responses() -> None:
    page = to_paginated_response(
        PaginatedAdminUsers(items=[ADMIN], total_count=11, current_page=2, page_size=10)
    )
    assert page.total_count == 11
    assert page.items[0].id == "admin-1"

    registration = to_registration_response(
        RegistrationResult(admin=ADMIN, verification_code_expires_at=NOW)
    )
    assert registration.admin.email == "a@x.com"
    assert registration.verification_code_expires_at == NOW


@pytest.mark.parametrize(
    "result,expected",
    [
        (Succeeded(expires_at=NOW), {"is_successful": True, "error": None, "expires_at": NOW}),
        (
            Failed(VerificationCodeError.EXPIRED),
            {"is_successful": False, "error": "expired", "expires_at": None},
        ),
        (
            Failed(VerificationCodeError.ALREADY_CONSUMED),
            {"is_successful": False, "error": "already_consumed", "expires_at": None},
        ),
    ],
)
def test_confirmation_response(result, expected) -> None:
    assert to_confirmation_response(result).model_dump() == expected


def test_confirmation_response_rejects_unknown_result() -> None:
    with pytest.raises(TypeError):
        to_confirmation_response(object())


def test_autofill_response_keeps_category_order() -> None:
    response = to_autofill_response(
        {
            SuggestedValueType.COMPANY: ["Acme"],
            SuggestedValueType.DEPARTMENT: [],
            SuggestedValueType.JOB_TITLE: ["Manager", "Analyst"],
        }
    )
    assert [(m.type, m.values) for m in response.values] == [
        (SuggestedValueType.COMPANY, ["Acme"]),
        (SuggestedValueType.DEPARTMENT, []),
        (SuggestedValueType.JOB_TITLE, ["Manager", "Analyst"]),
    ]


def test_audit_entry_response() -> None:
    response = to_audit_entry_response(
        AuditEntryResult(
            id="e1",
            admin_user_id="admin-1",
            action=AuditAction.PERMISSIONS_UPDATED,
            created_at=NOW,
            metadata={"granted": ["view_admins"], "revoked": []},
        )
    )
    assert response.action == "permissions_updated"
    assert response.entity_data == {}
    assert response.metadata == {"granted": ["view_admins"], "revoked": []}


def test_profile_from_update_request_keeps_unset_fields_none() -> None:
    request = UpdateAdminRequest(admin_user_id="admin-1", job_title="Director")
    assert profile_from_request(request) == AdminProfile(job_title="Director")


def test_error_response() -> None:
    response = to_error_response(DuplicateEmailException("a@x.com"))
    assert response.error == "DUPLICATE_EMAIL"
    assert response.details == {"email": "a@x.com"}
