"""Domain exceptions for the admin management service.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns; a façade
maps them to its own protocol using error_code. Verification outcomes are
not exceptions (see VerificationCodeResult).
"""

from typing import Any


class AdminManagementException(Exception):
    """Base exception for all admin management errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return a serializable error body."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(AdminManagementException):
    """Raised when input validation fails (blank identifier, bad range, bad format)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class UnknownPermissionException(ValidationException):
    """Raised when a permission update names values outside the catalog."""

    def __init__(self, unknown: list[str]) -> None:
        """Initialize with the rejected values.

        Args:
            unknown: Permission values not present in the catalog.
        """
        super().__init__(
            f"Unknown permission(s): {', '.join(unknown)}",
            field="permissions",
        )
        self.details["unknown_permissions"] = unknown


class ResourceNotFoundException(AdminManagementException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'admin_user').
            resource_id: The ID (or email) that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class DuplicateEmailException(AdminManagementException):
    """Raised when registering an admin with an email that is already registered."""

    def __init__(self, email: str) -> None:
        super().__init__(
            "Email is already registered",
            "DUPLICATE_EMAIL",
            {"email": email},
        )


class NotificationDeliveryException(AdminManagementException):
    """Raised by a notifier when a verification code could not be handed off."""

    def __init__(
        self,
        message: str = "Notification delivery failed",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, "NOTIFICATION_DELIVERY_ERROR", details)


class SqlNotConfiguredException(AdminManagementException):
    """Raised when a database session is requested but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
