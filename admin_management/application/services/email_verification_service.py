"""Email verification code engine: issue, supersede, and atomically confirm one-time codes."""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from datetime import datetime, timedelta

from admin_management.application.dtos.verification import (
    Failed,
    IssuedVerificationCode,
    Succeeded,
    VerificationCodeResult,
)
from admin_management.application.interfaces.repositories import IRepositoryScope
from admin_management.core.locks import KeyedLocks
from admin_management.domain.enums import VerificationCodeError, VerificationPurpose
from admin_management.shared.telemetry.logging import get_logger
from admin_management.shared.utils.datetime import utc_now
from admin_management.shared.utils.generators import generate_verification_code

logger = get_logger(__name__)

# Attempts at drawing a code value that is not already stored.
_MAX_ISSUE_ATTEMPTS = 3


def _code_lock_key(code: str) -> str:
    return "code:" + hashlib.sha256(code.encode()).hexdigest()


def _issue_lock_key(admin_user_id: str, purpose: VerificationPurpose) -> str:
    return f"verification:{admin_user_id}:{purpose.value}"


class EmailVerificationService:
    """Issues and confirms verification codes.

    Each operation runs in its own transaction from the repository scope and
    holds a keyed lock until the transaction has committed. At most one code
    per (admin user, purpose) is active: issuing marks the previous active
    code consumed. Expiry is evaluated lazily at confirmation time.
    """

    def __init__(
        self,
        scope: IRepositoryScope,
        locks: KeyedLocks,
        *,
        ttl: timedelta,
        code_length: int = 8,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        if ttl <= timedelta(0):
            raise ValueError("Verification code TTL must be positive")
        self._scope = scope
        self._locks = locks
        self._ttl = ttl
        self._code_length = code_length
        self._clock = clock

    async def issue(
        self,
        admin_user_id: str,
        purpose: VerificationPurpose = VerificationPurpose.EMAIL_CONFIRMATION,
    ) -> IssuedVerificationCode:
        """Supersede any active code for (admin_user_id, purpose) and store a new one.

        Raises:
            ResourceNotFoundException: if the admin does not exist.
        """
        async with self._locks.hold(_issue_lock_key(admin_user_id, purpose)):
            async with self._scope() as repos:
                await repos.admin_users.get_by_id(admin_user_id)
                now = self._clock()
                superseded = await repos.verification_codes.supersede_active(
                    admin_user_id, purpose, now
                )
                expires_at = now + self._ttl
                for attempt in range(1, _MAX_ISSUE_ATTEMPTS + 1):
                    code = generate_verification_code(self._code_length)
                    if await repos.verification_codes.get_by_code(code) is None:
                        break
                    logger.warning(
                        "Verification code collision for admin %s (attempt %d)",
                        admin_user_id,
                        attempt,
                    )
                else:
                    raise RuntimeError("Could not generate a unique verification code")
                await repos.verification_codes.create(
                    admin_user_id, purpose, code, now, expires_at
                )
        logger.info(
            "Issued %s code for admin %s (superseded=%d, expires_at=%s)",
            purpose.value,
            admin_user_id,
            superseded,
            expires_at.isoformat(),
        )
        return IssuedVerificationCode(
            code=code,
            admin_user_id=admin_user_id,
            purpose=purpose,
            created_at=now,
            expires_at=expires_at,
        )

    async def confirm(self, code: str) -> VerificationCodeResult:
        """Consume code and activate its owner, or report why it cannot be used."""
        if code is None or not code.strip():
            return Failed(VerificationCodeError.NOT_FOUND)
        code = code.strip()
        async with self._locks.hold(_code_lock_key(code)):
            async with self._scope() as repos:
                stored = await repos.verification_codes.get_by_code(code)
                if stored is None:
                    return Failed(VerificationCodeError.NOT_FOUND)
                if stored.consumed_at is not None:
                    return Failed(VerificationCodeError.ALREADY_CONSUMED)
                now = self._clock()
                if now > stored.expires_at:
                    logger.info(
                        "Verification code %s for admin %s expired",
                        stored.id,
                        stored.admin_user_id,
                    )
                    return Failed(VerificationCodeError.EXPIRED)
                if not await repos.verification_codes.consume(stored.id, now):
                    return Failed(VerificationCodeError.ALREADY_CONSUMED)
                await repos.admin_users.activate(stored.admin_user_id)
        logger.info(
            "Confirmed %s code %s; admin %s activated",
            stored.purpose.value,
            stored.id,
            stored.admin_user_id,
        )
        return Succeeded(expires_at=stored.expires_at)
