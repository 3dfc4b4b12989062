"""Application interfaces (ports): repository and service protocols."""

from admin_management.application.interfaces.repositories import (
    IAdminUserRepository,
    IAuditLogRepository,
    IRepositories,
    IRepositoryScope,
    ISuggestedValueRepository,
    IVerificationCodeRepository,
)
from admin_management.application.interfaces.services import (
    IPasswordHasher,
    IVerificationCodeNotifier,
)

__all__ = [
    "IAdminUserRepository",
    "IAuditLogRepository",
    "IPasswordHasher",
    "IRepositories",
    "IRepositoryScope",
    "ISuggestedValueRepository",
    "IVerificationCodeNotifier",
    "IVerificationCodeRepository",
]
