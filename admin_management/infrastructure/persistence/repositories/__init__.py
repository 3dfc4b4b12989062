"""Repository implementations. Each is bound to one AsyncSession."""

from admin_management.infrastructure.persistence.repositories.admin_audit_log_repo import (
    AdminAuditLogRepository,
)
from admin_management.infrastructure.persistence.repositories.admin_user_repo import (
    AdminUserRepository,
    normalize_email,
)
from admin_management.infrastructure.persistence.repositories.base import BaseRepository
from admin_management.infrastructure.persistence.repositories.suggested_value_repo import (
    SuggestedValueRepository,
)
from admin_management.infrastructure.persistence.repositories.verification_code_repo import (
    VerificationCodeRepository,
    hash_code,
)

__all__ = [
    "AdminAuditLogRepository",
    "AdminUserRepository",
    "BaseRepository",
    "SuggestedValueRepository",
    "VerificationCodeRepository",
    "hash_code",
    "normalize_email",
]
