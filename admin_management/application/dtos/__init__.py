"""Application DTOs (no dependency on ORM)."""

from admin_management.application.dtos.admin_user import (
    AdminProfile,
    AdminUserResult,
    AuditEntryResult,
    PaginatedAdminUsers,
    RegistrationResult,
)
from admin_management.application.dtos.verification import (
    Failed,
    IssuedVerificationCode,
    StoredVerificationCode,
    Succeeded,
    VerificationCodeResult,
)

__all__ = [
    "AdminProfile",
    "AdminUserResult",
    "AuditEntryResult",
    "Failed",
    "IssuedVerificationCode",
    "PaginatedAdminUsers",
    "RegistrationResult",
    "StoredVerificationCode",
    "Succeeded",
    "VerificationCodeResult",
]
