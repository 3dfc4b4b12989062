"""Admin user request/response schemas and their converters.

Converters are written out field by field so a renamed attribute fails
loudly instead of silently dropping data.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, EmailStr, Field

from admin_management.application.dtos.admin_user import (
    AdminProfile,
    AdminUserResult,
    AuditEntryResult,
    PaginatedAdminUsers,
    RegistrationResult,
)


class AdminProfileFields(BaseModel):
    """Profile fields shared by registration and update requests."""

    company: str | None = Field(default=None, max_length=255)
    department: str | None = Field(default=None, max_length=255)
    first_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)
    job_title: str | None = Field(default=None, max_length=255)
    phone_number: str | None = Field(default=None, max_length=64)


class RegistrationRequest(AdminProfileFields):
    """Request body for registering an admin."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class UpdateAdminRequest(AdminProfileFields):
    """Partial update; omitted fields keep their stored values."""

    admin_user_id: str = Field(..., min_length=1)
    is_active: bool | None = None


class UpdatePermissionsRequest(BaseModel):
    """Full replacement of an admin's permissions."""

    admin_user_id: str = Field(..., min_length=1)
    permissions: list[str] = Field(default_factory=list)


class PaginationRequest(BaseModel):
    current_page: int = Field(default=1, ge=1)
    page_size: int = Field(default=50, ge=1)
    active_only: bool | None = None


class ResetPasswordRequest(BaseModel):
    admin_user_id: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AdminUserResponse(BaseModel):
    """Admin user (no password)."""

    id: str
    email: str
    is_active: bool
    company: str | None
    department: str | None
    first_name: str | None
    last_name: str | None
    job_title: str | None
    phone_number: str | None
    permissions: list[str]
    created_at: datetime


class PaginatedAdminUserResponse(BaseModel):
    items: list[AdminUserResponse]
    total_count: int
    current_page: int
    page_size: int


class RegistrationResponse(BaseModel):
    admin: AdminUserResponse
    verification_code_expires_at: datetime


class AuditEntryResponse(BaseModel):
    id: str
    admin_user_id: str
    action: str
    created_at: datetime
    entity_data: dict[str, Any]
    metadata: dict[str, Any]


def profile_from_request(request: AdminProfileFields) -> AdminProfile:
    return AdminProfile(
        company=request.company,
        department=request.department,
        first_name=request.first_name,
        last_name=request.last_name,
        job_title=request.job_title,
        phone_number=request.phone_number,
    )


def to_admin_user_response(admin: AdminUserResult) -> AdminUserResponse:
    return AdminUserResponse(
        id=admin.id,
        email=admin.email,
        is_active=admin.is_active,
        company=admin.profile.company,
        department=admin.profile.department,
        first_name=admin.profile.first_name,
        last_name=admin.profile.last_name,
        job_title=admin.profile.job_title,
        phone_number=admin.profile.phone_number,
        permissions=[p.value for p in admin.permissions],
        created_at=admin.created_at,
    )


def to_paginated_response(page: PaginatedAdminUsers) -> PaginatedAdminUserResponse:
    return PaginatedAdminUserResponse(
        items=[to_admin_user_response(item) for item in page.items],
        total_count=page.total_count,
        current_page=page.current_page,
        page_size=page.page_size,
    )


def to_registration_response(result: RegistrationResult) -> RegistrationResponse:
    return RegistrationResponse(
        admin=to_admin_user_response(result.admin),
        verification_code_expires_at=result.verification_code_expires_at,
    )


def to_audit_entry_response(entry: AuditEntryResult) -> AuditEntryResponse:
    return AuditEntryResponse(
        id=entry.id,
        admin_user_id=entry.admin_user_id,
        action=entry.action.value,
        created_at=entry.created_at,
        entity_data=dict(entry.entity_data),
        metadata=dict(entry.metadata),
    )
