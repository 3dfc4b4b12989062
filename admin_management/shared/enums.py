"""Shared enumerations for the admin management service.

Cross-cutting enums used by application and infrastructure (e.g. audit).
Domain-specific enums (e.g. Permission) live in admin_management.domain.enums.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class AuditAction(_ValuesMixin, str, Enum):
    """Admin user lifecycle actions recorded in the audit trail."""

    CREATED = "created"
    ACTIVATED = "activated"
    DEACTIVATED = "deactivated"
    PROFILE_UPDATED = "profile_updated"
    PERMISSIONS_UPDATED = "permissions_updated"
    PASSWORD_RESET = "password_reset"
