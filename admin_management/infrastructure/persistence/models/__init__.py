"""ORM models. Importing this package registers every table on Base.metadata."""

from admin_management.infrastructure.persistence.models.admin_audit_log import AdminAuditLog
from admin_management.infrastructure.persistence.models.admin_user import AdminUser
from admin_management.infrastructure.persistence.models.admin_user_permission import (
    AdminUserPermission,
)
from admin_management.infrastructure.persistence.models.suggested_value import SuggestedValue
from admin_management.infrastructure.persistence.models.verification_code import (
    VerificationCode,
)

__all__ = [
    "AdminAuditLog",
    "AdminUser",
    "AdminUserPermission",
    "SuggestedValue",
    "VerificationCode",
]
