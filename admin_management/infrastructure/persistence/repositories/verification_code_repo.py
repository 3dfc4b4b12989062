"""Verification code repository. Codes are looked up by SHA-256 hash of the raw value."""

from __future__ import annotations

import hashlib
from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from admin_management.application.dtos.verification import StoredVerificationCode
from admin_management.domain.enums import VerificationPurpose
from admin_management.infrastructure.persistence.models.verification_code import (
    VerificationCode,
)
from admin_management.infrastructure.persistence.repositories.base import BaseRepository
from admin_management.shared.utils.datetime import ensure_utc


def hash_code(code: str) -> str:
    """Return SHA-256 hex digest of the raw code value."""
    return hashlib.sha256(code.encode()).hexdigest()


def _code_to_result(row: VerificationCode) -> StoredVerificationCode:
    return StoredVerificationCode(
        id=row.id,
        admin_user_id=row.admin_user_id,
        purpose=VerificationPurpose(row.purpose),
        created_at=ensure_utc(row.created_at),
        expires_at=ensure_utc(row.expires_at),
        consumed_at=ensure_utc(row.consumed_at) if row.consumed_at else None,
    )


class VerificationCodeRepository(BaseRepository[VerificationCode]):
    """Create, supersede, look up, and atomically consume verification codes."""

    resource_type = "verification_code"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, VerificationCode)

    async def create(
        self,
        admin_user_id: str,
        purpose: VerificationPurpose,
        code: str,
        created_at: datetime,
        expires_at: datetime,
    ) -> StoredVerificationCode:
        row = await self.create_model(
            VerificationCode(
                code_hash=hash_code(code),
                admin_user_id=admin_user_id,
                purpose=purpose.value,
                created_at=created_at,
                expires_at=expires_at,
            )
        )
        return _code_to_result(row)

    async def supersede_active(
        self, admin_user_id: str, purpose: VerificationPurpose, now: datetime
    ) -> int:
        """Mark unconsumed, unexpired codes of (admin_user_id, purpose) consumed.

        Expired codes are left as they are so they keep reporting EXPIRED.
        """
        result = await self.db.execute(
            update(VerificationCode)
            .where(
                VerificationCode.admin_user_id == admin_user_id,
                VerificationCode.purpose == purpose.value,
                VerificationCode.consumed_at.is_(None),
                VerificationCode.expires_at > now,
            )
            .values(consumed_at=now)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0

    async def get_by_code(self, code: str) -> StoredVerificationCode | None:
        result = await self.db.execute(
            select(VerificationCode).where(VerificationCode.code_hash == hash_code(code))
        )
        row = result.scalar_one_or_none()
        return _code_to_result(row) if row is not None else None

    async def consume(self, code_id: str, now: datetime) -> bool:
        """Conditional update: only the caller that flips consumed_at gets True."""
        result = await self.db.execute(
            update(VerificationCode)
            .where(
                VerificationCode.id == code_id,
                VerificationCode.consumed_at.is_(None),
            )
            .values(consumed_at=now)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1
