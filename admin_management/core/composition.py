"""Composition root: wires repositories, notifier, hasher and services.

Single place that picks infrastructure implementations; callers (a façade,
scripts, tests) receive ready-to-use services.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from admin_management.application.interfaces.services import (
    IPasswordHasher,
    IVerificationCodeNotifier,
)
from admin_management.application.services import (
    AdminUserService,
    AutofillValuesService,
    EmailVerificationService,
)
from admin_management.core.config import Settings, get_settings
from admin_management.core.locks import KeyedLocks
from admin_management.infrastructure.persistence.database import (
    create_engine_and_sessionmaker,
    dispose_engine,
)
from admin_management.infrastructure.persistence.scope import SqlAlchemyRepositoryScope
from admin_management.infrastructure.security.password import BcryptPasswordHasher
from admin_management.infrastructure.services.verification_notifier import (
    LogOnlyVerificationNotifier,
    WebhookVerificationNotifier,
)
from admin_management.shared.telemetry.logging import get_logger
from admin_management.shared.utils.datetime import utc_now

logger = get_logger(__name__)


@dataclass(frozen=True)
class Services:
    """Services sharing one repository scope and one lock table."""

    admin_users: AdminUserService
    verification: EmailVerificationService
    autofill: AutofillValuesService
    scope: SqlAlchemyRepositoryScope
    locks: KeyedLocks
    engine: Any = None


def build_notifier(settings: Settings) -> IVerificationCodeNotifier:
    """Webhook notifier when NOTIFICATION_WEBHOOK_URL is set, otherwise log-only."""
    if settings.notification_webhook_url:
        return WebhookVerificationNotifier(
            settings.notification_webhook_url,
            timeout_seconds=settings.notification_timeout_seconds,
        )
    logger.info("NOTIFICATION_WEBHOOK_URL not set; verification codes are only logged")
    return LogOnlyVerificationNotifier()


def build_services(
    settings: Settings | None = None,
    *,
    session_factory: async_sessionmaker[AsyncSession] | None = None,
    notifier: IVerificationCodeNotifier | None = None,
    password_hasher: IPasswordHasher | None = None,
    clock: Callable[[], datetime] = utc_now,
) -> Services:
    """Build the service graph.

    With explicit settings and no session_factory, a dedicated engine is built
    from settings and returned on Services.engine (the caller disposes it).
    Without settings, the process-wide engine from get_settings() is used.
    """
    engine = None
    if settings is None:
        settings = get_settings()
    elif session_factory is None:
        engine, session_factory = create_engine_and_sessionmaker(
            settings.database_url,
            echo=settings.database_echo,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
        )
    scope = SqlAlchemyRepositoryScope(session_factory)
    locks = KeyedLocks()
    verification = EmailVerificationService(
        scope,
        locks,
        ttl=settings.verification_code_ttl,
        code_length=settings.verification_code_length,
        clock=clock,
    )
    admin_users = AdminUserService(
        scope,
        verification,
        notifier or build_notifier(settings),
        password_hasher or BcryptPasswordHasher(),
        locks,
        page_size_max=settings.page_size_max,
        password_min_length=settings.password_min_length,
        password_max_length=settings.password_max_length,
    )
    return Services(
        admin_users=admin_users,
        verification=verification,
        autofill=AutofillValuesService(scope),
        scope=scope,
        locks=locks,
        engine=engine,
    )


@asynccontextmanager
async def service_lifespan(settings: Settings | None = None) -> AsyncIterator[Services]:
    """Yield services; dispose their engine on exit."""
    services = build_services(settings)
    try:
        yield services
    finally:
        if services.engine is not None:
            await services.engine.dispose()
            logger.info("Database engine disposed")
        else:
            await dispose_engine()
