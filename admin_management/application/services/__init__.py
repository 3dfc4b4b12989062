"""Application services (use cases)."""

from admin_management.application.services.admin_user_service import AdminUserService
from admin_management.application.services.autofill_values_service import (
    AutofillValuesService,
)
from admin_management.application.services.email_verification_service import (
    EmailVerificationService,
)

__all__ = [
    "AdminUserService",
    "AutofillValuesService",
    "EmailVerificationService",
]
