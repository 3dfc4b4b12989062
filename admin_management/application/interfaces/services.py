"""Service interfaces (ports) for the application layer."""

from __future__ import annotations

from typing import Protocol


class IVerificationCodeNotifier(Protocol):
    """Delivers a verification code to its owner (e.g. email, webhook).

    The service does not wait for or verify delivery; implementations
    raise NotificationDeliveryException when they cannot hand off the code.
    """

    async def send(self, admin_user_id: str, code: str, destination_email: str) -> None:
        """Hand off the code for delivery to destination_email."""


class IPasswordHasher(Protocol):
    """One-way password hashing (blocking; call from a worker thread)."""

    def hash_password(self, password: str) -> str:
        """Return a salted, non-reversible hash of password."""

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Return True if password matches password_hash."""
