"""Pytest configuration and fixtures for admin management.

Integration fixtures run the real repositories against a temporary SQLite
file through aiosqlite, with tables created from Base.metadata. Password
hashing and notification are replaced by fast in-memory fakes.
"""

from datetime import datetime, timedelta

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

import admin_management.infrastructure.persistence.models  # noqa: F401  (registers tables)
from admin_management.core.composition import Services, build_services
from admin_management.core.config import Settings
from admin_management.domain.exceptions import NotificationDeliveryException
from admin_management.infrastructure.persistence.database import (
    Base,
    create_engine_and_sessionmaker,
)
from admin_management.infrastructure.persistence.scope import SqlAlchemyRepositoryScope
from admin_management.shared.utils.datetime import utc_now


class FakeClock:
    """Controllable clock for verification expiry."""

    def __init__(self, now: datetime | None = None) -> None:
        self.now = now or utc_now()

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


class RecordingNotifier:
    """IVerificationCodeNotifier that keeps every sent code; can be told to fail."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, str, str]] = []
        self.fail = False

    async def send(self, admin_user_id: str, code: str, destination_email: str) -> None:
        if self.fail:
            raise NotificationDeliveryException("webhook down")
        self.sent.append((admin_user_id, code, destination_email))

    def last_code_for(self, admin_user_id: str) -> str:
        codes = [code for owner, code, _ in self.sent if owner == admin_user_id]
        assert codes, f"no code sent to {admin_user_id}"
        return codes[-1]


class FakePasswordHasher:
    """Reversible stand-in for bcrypt so tests stay fast."""

    def hash_password(self, password: str) -> str:
        return "hashed:" + password

    def verify_password(self, password: str, password_hash: str) -> bool:
        return password_hash == "hashed:" + password


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a per-test SQLite file."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'admin_management.db'}",
        verification_code_ttl_seconds=3600,
        verification_code_length=8,
        page_size_max=100,
    )


@pytest.fixture
async def session_factory(settings: Settings) -> async_sessionmaker[AsyncSession]:
    """Session factory on a fresh schema; engine disposed after the test."""
    engine, factory = create_engine_and_sessionmaker(settings.database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield factory
    await engine.dispose()


@pytest.fixture
def scope(session_factory) -> SqlAlchemyRepositoryScope:
    return SqlAlchemyRepositoryScope(session_factory)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def services(settings, session_factory, notifier, clock) -> Services:
    """Fully wired services over the test database."""
    return build_services(
        settings,
        session_factory=session_factory,
        notifier=notifier,
        password_hasher=FakePasswordHasher(),
        clock=clock,
    )
