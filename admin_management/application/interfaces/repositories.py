"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs or domain enums only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Iterable
from contextlib import AbstractAsyncContextManager
from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

from admin_management.domain.enums import (
    Permission,
    SuggestedValueType,
    VerificationPurpose,
)
from admin_management.shared.enums import AuditAction

if TYPE_CHECKING:
    from admin_management.application.dtos.admin_user import (
        AdminProfile,
        AdminUserResult,
        AuditEntryResult,
    )
    from admin_management.application.dtos.verification import StoredVerificationCode


# Admin user store interface
class IAdminUserRepository(Protocol):
    """Protocol for the admin user store (DIP). Missing records raise ResourceNotFoundException."""

    async def create(
        self, profile: AdminProfile, email: str, password_hash: str
    ) -> AdminUserResult:
        """Create an inactive admin with no permissions; DuplicateEmailException on conflict."""

    async def activate(self, admin_user_id: str) -> AdminUserResult:
        """Mark admin active (no-op if already active)."""

    async def update_profile(
        self,
        admin_user_id: str,
        profile: AdminProfile,
        is_active: bool | None = None,
    ) -> AdminUserResult:
        """Apply non-None profile fields and optional active flag."""

    async def set_permissions(
        self, admin_user_id: str, permissions: Iterable[Permission | str]
    ) -> AdminUserResult:
        """Replace the admin's permission set."""

    async def set_password_hash(
        self, admin_user_id: str, password_hash: str
    ) -> AdminUserResult:
        """Store a new password hash."""

    async def get_by_id(self, admin_user_id: str) -> AdminUserResult:
        """Return admin by id."""

    async def get_by_email(
        self, email: str, active_only: bool = False
    ) -> AdminUserResult:
        """Return admin by email (case-insensitive)."""

    async def get_permissions(self, admin_user_id: str) -> list[Permission]:
        """Return the admin's permissions sorted by value."""

    async def list_paginated(
        self, page: int, page_size: int, active_only: bool | None = None
    ) -> tuple[list[AdminUserResult], int]:
        """Return (page items, total count) in stable creation order."""

    async def list_all(self, active_only: bool | None = None) -> list[AdminUserResult]:
        """Return every admin in stable creation order."""


# Verification code interface
class IVerificationCodeRepository(Protocol):
    """Protocol for verification code persistence (DIP)."""

    async def create(
        self,
        admin_user_id: str,
        purpose: VerificationPurpose,
        code: str,
        created_at: datetime,
        expires_at: datetime,
    ) -> StoredVerificationCode:
        """Persist a new code (stored by hash)."""

    async def supersede_active(
        self, admin_user_id: str, purpose: VerificationPurpose, now: datetime
    ) -> int:
        """Mark every active code for (admin_user_id, purpose) consumed; return count."""

    async def get_by_code(self, code: str) -> StoredVerificationCode | None:
        """Return code state by raw value, or None."""

    async def consume(self, code_id: str, now: datetime) -> bool:
        """Set consumed_at if still unconsumed; return True when this call consumed it."""


# Autofill suggestion interface
class ISuggestedValueRepository(Protocol):
    """Protocol for autofill suggestion persistence (DIP)."""

    async def get_all(self) -> list[tuple[SuggestedValueType, str]]:
        """Return (type, value) pairs ordered by type then position."""

    async def replace(self, value_type: SuggestedValueType, values: list[str]) -> None:
        """Replace the ordered values of one category."""


# Audit trail interface
class IAuditLogRepository(Protocol):
    """Protocol for the append-only admin audit trail (DIP)."""

    async def record(
        self,
        admin_user_id: str,
        action: AuditAction,
        entity_data: dict[str, Any],
        metadata: dict[str, Any] | None = None,
    ) -> None:
        """Append one audit entry in the current transaction."""

    async def get_for_admin(self, admin_user_id: str) -> list[AuditEntryResult]:
        """Return the admin's audit entries, oldest first."""


class IRepositories(Protocol):
    """Repositories sharing one transaction."""

    admin_users: IAdminUserRepository
    verification_codes: IVerificationCodeRepository
    suggested_values: ISuggestedValueRepository
    audit_log: IAuditLogRepository


class IRepositoryScope(Protocol):
    """Factory for a transactional scope: commit on normal exit, roll back on error."""

    def __call__(self) -> AbstractAsyncContextManager[IRepositories]:
        """Open a new transaction and return its repositories."""
