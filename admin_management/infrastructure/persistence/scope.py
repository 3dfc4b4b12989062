"""Transactional repository scope: one session, one transaction, all repositories."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from admin_management.infrastructure.persistence.database import transactional_session
from admin_management.infrastructure.persistence.repositories import (
    AdminAuditLogRepository,
    AdminUserRepository,
    SuggestedValueRepository,
    VerificationCodeRepository,
)


@dataclass(frozen=True)
class SqlAlchemyRepositories:
    """Repositories bound to the same session."""

    session: AsyncSession
    admin_users: AdminUserRepository
    verification_codes: VerificationCodeRepository
    suggested_values: SuggestedValueRepository
    audit_log: AdminAuditLogRepository

    @classmethod
    def for_session(cls, session: AsyncSession) -> SqlAlchemyRepositories:
        audit_log = AdminAuditLogRepository(session)
        return cls(
            session=session,
            admin_users=AdminUserRepository(session, audit_log=audit_log),
            verification_codes=VerificationCodeRepository(session),
            suggested_values=SuggestedValueRepository(session),
            audit_log=audit_log,
        )


class SqlAlchemyRepositoryScope:
    """IRepositoryScope over an async session factory.

    Each call opens a session and transaction; the transaction commits when
    the block exits normally and rolls back when it raises.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession] | None = None) -> None:
        self._session_factory = session_factory

    @asynccontextmanager
    async def __call__(self) -> AsyncIterator[SqlAlchemyRepositories]:
        async with transactional_session(self._session_factory) as session:
            yield SqlAlchemyRepositories.for_session(session)
