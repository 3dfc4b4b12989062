"""DTOs for verification codes, including the tagged confirmation result.

Confirmation outcomes are values, not exceptions: callers branch on
Succeeded / Failed and must handle every VerificationCodeError.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from admin_management.domain.enums import VerificationCodeError, VerificationPurpose


@dataclass(frozen=True)
class IssuedVerificationCode:
    """A freshly issued code. `code` is the only copy of the raw value."""

    code: str
    admin_user_id: str
    purpose: VerificationPurpose
    created_at: datetime
    expires_at: datetime


@dataclass(frozen=True)
class StoredVerificationCode:
    """Persisted code state (raw value is not stored)."""

    id: str
    admin_user_id: str
    purpose: VerificationPurpose
    created_at: datetime
    expires_at: datetime
    consumed_at: datetime | None


@dataclass(frozen=True)
class Succeeded:
    """Code was consumed and the owner activated. Carries the expiry that was in force."""

    is_successful: ClassVar[bool] = True

    expires_at: datetime


@dataclass(frozen=True)
class Failed:
    """Code could not be confirmed."""

    is_successful: ClassVar[bool] = False

    error: VerificationCodeError


VerificationCodeResult = Succeeded | Failed
