"""Domain enumerations for the admin management service.

Enums represent fixed sets of domain values: permissions, verification
purposes and outcomes, and autofill field categories.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class Permission(_ValuesMixin, str, Enum):
    """Capability that can be granted to an admin user.

    The service treats permissions as opaque tags: it stores, compares and
    replaces sets of them but never interprets what each one allows.
    """

    MANAGE_ADMINS = "manage_admins"
    VIEW_ADMINS = "view_admins"
    MANAGE_CUSTOMERS = "manage_customers"
    VIEW_CUSTOMERS = "view_customers"
    MANAGE_CAMPAIGNS = "manage_campaigns"
    MANAGE_PARTNERS = "manage_partners"
    MANAGE_VOUCHERS = "manage_vouchers"
    VIEW_REPORTS = "view_reports"
    MANAGE_SETTINGS = "manage_settings"
    VIEW_AUDIT_LOGS = "view_audit_logs"


class VerificationPurpose(_ValuesMixin, str, Enum):
    """What a verification code proves."""

    EMAIL_CONFIRMATION = "email_confirmation"


class VerificationCodeError(_ValuesMixin, str, Enum):
    """Terminal reasons a verification code cannot be confirmed."""

    NOT_FOUND = "not_found"
    EXPIRED = "expired"
    ALREADY_CONSUMED = "already_consumed"


class SuggestedValueType(_ValuesMixin, str, Enum):
    """Profile field categories that have autofill suggestions."""

    COMPANY = "company"
    DEPARTMENT = "department"
    JOB_TITLE = "job_title"
