"""Domain layer: enums, exceptions, and the permission catalog.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from admin_management.domain.enums import (
    Permission,
    SuggestedValueType,
    VerificationCodeError,
    VerificationPurpose,
)
from admin_management.domain.exceptions import (
    AdminManagementException,
    DuplicateEmailException,
    NotificationDeliveryException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    UnknownPermissionException,
    ValidationException,
)

__all__ = [
    # Enums
    "Permission",
    "SuggestedValueType",
    "VerificationCodeError",
    "VerificationPurpose",
    # Exceptions
    "AdminManagementException",
    "DuplicateEmailException",
    "NotificationDeliveryException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "UnknownPermissionException",
    "ValidationException",
]
