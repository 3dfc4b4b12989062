"""DTOs for admin user use cases (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from admin_management.domain.enums import Permission
from admin_management.shared.enums import AuditAction


@dataclass(frozen=True)
class AdminProfile:
    """Mutable profile fields of an admin. None means "not set" (or "keep" in updates)."""

    company: str | None = None
    department: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    job_title: str | None = None
    phone_number: str | None = None


@dataclass(frozen=True)
class AdminUserResult:
    """Admin user read-model. Never carries the password hash."""

    id: str
    email: str
    is_active: bool
    profile: AdminProfile
    permissions: tuple[Permission, ...]
    created_at: datetime


@dataclass(frozen=True)
class PaginatedAdminUsers:
    """One page of admins plus the total matching count."""

    items: list[AdminUserResult]
    total_count: int
    current_page: int
    page_size: int


@dataclass(frozen=True)
class RegistrationResult:
    """Result of registering an admin. The verification code itself is only sent to the admin."""

    admin: AdminUserResult
    verification_code_expires_at: datetime


@dataclass(frozen=True)
class AuditEntryResult:
    """One entry of an admin's audit trail."""

    id: str
    admin_user_id: str
    action: AuditAction
    created_at: datetime
    entity_data: dict[str, Any] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)
