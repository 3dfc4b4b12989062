"""Admin user application service: registration, confirmation, profile, permissions, lookups."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from datetime import datetime

from email_validator import EmailNotValidError, validate_email

from admin_management.application.dtos.admin_user import (
    AdminProfile,
    AdminUserResult,
    AuditEntryResult,
    PaginatedAdminUsers,
    RegistrationResult,
)
from admin_management.application.dtos.verification import (
    IssuedVerificationCode,
    VerificationCodeResult,
)
from admin_management.application.interfaces.repositories import IRepositoryScope
from admin_management.application.interfaces.services import (
    IPasswordHasher,
    IVerificationCodeNotifier,
)
from admin_management.application.services.email_verification_service import (
    EmailVerificationService,
)
from admin_management.core.locks import KeyedLocks
from admin_management.domain.enums import Permission
from admin_management.domain.exceptions import ValidationException
from admin_management.domain.permissions import parse_permissions
from admin_management.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

# Column widths of the admin_user profile columns.
_PROFILE_MAX_LENGTHS = {
    "company": 255,
    "department": 255,
    "first_name": 255,
    "last_name": 255,
    "job_title": 255,
    "phone_number": 64,
}

# Largest row offset a BIGINT OFFSET accepts.
_MAX_OFFSET = 2**63 - 1


def _require(value: str | None, field: str) -> str:
    """Return value stripped; raise ValidationException when blank."""
    if value is None or not value.strip():
        raise ValidationException(f"{field} is required", field=field)
    return value.strip()


class AdminUserService:
    """Use cases over admin users.

    Inputs are validated before any storage access. Registration and
    verification go through EmailVerificationService; everything else runs in
    one transaction per call.
    """

    def __init__(
        self,
        scope: IRepositoryScope,
        verification: EmailVerificationService,
        notifier: IVerificationCodeNotifier,
        password_hasher: IPasswordHasher,
        locks: KeyedLocks,
        *,
        page_size_max: int = 500,
        password_min_length: int = 8,
        password_max_length: int = 128,
    ) -> None:
        self._scope = scope
        self._verification = verification
        self._notifier = notifier
        self._password_hasher = password_hasher
        self._locks = locks
        self._page_size_max = page_size_max
        self._password_min_length = password_min_length
        self._password_max_length = password_max_length

    def _validate_email(self, email: str | None) -> str:
        email = _require(email, "email")
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValidationException(f"Invalid email address: {e}", field="email") from e
        return email

    def _validate_password(self, password: str | None) -> str:
        if password is None or not password.strip():
            raise ValidationException("password is required", field="password")
        try:
            password.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ValidationException(
                "password must be valid Unicode text", field="password"
            ) from e
        if len(password) < self._password_min_length:
            raise ValidationException(
                f"password must be at least {self._password_min_length} characters",
                field="password",
            )
        if len(password) > self._password_max_length:
            raise ValidationException(
                f"password must be at most {self._password_max_length} characters",
                field="password",
            )
        return password

    @staticmethod
    def _validate_profile(profile: AdminProfile) -> None:
        for name, max_length in _PROFILE_MAX_LENGTHS.items():
            value = getattr(profile, name)
            if value is not None and len(value) > max_length:
                raise ValidationException(
                    f"{name} must be at most {max_length} characters", field=name
                )

    async def _notify(self, issued: IssuedVerificationCode, destination_email: str) -> None:
        """Hand the code to the notifier. Delivery failures are logged, never raised."""
        try:
            await self._notifier.send(issued.admin_user_id, issued.code, destination_email)
        except Exception as e:
            logger.warning(
                "Failed to deliver verification code to admin %s: %s",
                issued.admin_user_id,
                str(e),
                exc_info=True,
            )

    async def register(
        self, profile: AdminProfile, email: str, password: str
    ) -> RegistrationResult:
        """Create an inactive admin, issue a confirmation code, and send it.

        Raises:
            ValidationException: blank or malformed email, password outside policy.
            DuplicateEmailException: email already registered (any state).
        """
        email = self._validate_email(email)
        password = self._validate_password(password)
        self._validate_profile(profile)
        password_hash = await asyncio.to_thread(self._password_hasher.hash_password, password)
        async with self._locks.hold(f"email:{email.lower()}"):
            async with self._scope() as repos:
                admin = await repos.admin_users.create(profile, email, password_hash)
        logger.info("Registered admin %s", admin.id)
        issued = await self._verification.issue(admin.id)
        await self._notify(issued, admin.email)
        return RegistrationResult(admin=admin, verification_code_expires_at=issued.expires_at)

    async def resend_confirmation(self, email: str) -> datetime:
        """Issue a fresh code for an inactive admin; the previous code stops working.

        Returns:
            Expiry of the new code.

        Raises:
            ValidationException: blank email or admin already active.
            ResourceNotFoundException: no admin with that email.
        """
        email = _require(email, "email")
        async with self._scope() as repos:
            admin = await repos.admin_users.get_by_email(email)
        if admin.is_active:
            raise ValidationException("Admin email is already confirmed", field="email")
        issued = await self._verification.issue(admin.id)
        await self._notify(issued, admin.email)
        return issued.expires_at

    async def confirm_email(self, code: str) -> VerificationCodeResult:
        """Confirm a verification code. Failures are returned, not raised."""
        return await self._verification.confirm(code)

    async def update_profile(
        self,
        admin_user_id: str,
        profile: AdminProfile,
        is_active: bool | None = None,
    ) -> AdminUserResult:
        admin_user_id = _require(admin_user_id, "admin_user_id")
        self._validate_profile(profile)
        async with self._scope() as repos:
            return await repos.admin_users.update_profile(admin_user_id, profile, is_active)

    async def update_permissions(
        self, admin_user_id: str, permissions: Iterable[Permission | str]
    ) -> AdminUserResult:
        """Replace the admin's permissions with exactly the given set.

        Every value is checked against the catalog first; one unknown value
        fails the whole call with UnknownPermissionException and nothing is written.
        """
        admin_user_id = _require(admin_user_id, "admin_user_id")
        parsed = parse_permissions(permissions)
        async with self._scope() as repos:
            result = await repos.admin_users.set_permissions(admin_user_id, parsed)
        logger.info(
            "Updated permissions of admin %s: %s",
            admin_user_id,
            ", ".join(p.value for p in result.permissions) or "(none)",
        )
        return result

    async def get_paginated(
        self, page: int, page_size: int, active_only: bool | None = None
    ) -> PaginatedAdminUsers:
        if page < 1:
            raise ValidationException("page must be at least 1", field="page")
        if not 0 < page_size <= self._page_size_max:
            raise ValidationException(
                f"page_size must be between 1 and {self._page_size_max}",
                field="page_size",
            )
        if (page - 1) * page_size > _MAX_OFFSET:
            raise ValidationException("page is out of range", field="page")
        async with self._scope() as repos:
            items, total = await repos.admin_users.list_paginated(page, page_size, active_only)
        return PaginatedAdminUsers(
            items=items,
            total_count=total,
            current_page=page,
            page_size=page_size,
        )

    async def get_all(self, active_only: bool | None = None) -> list[AdminUserResult]:
        async with self._scope() as repos:
            return await repos.admin_users.list_all(active_only)

    async def get_by_email(self, email: str, active_only: bool = False) -> AdminUserResult:
        email = _require(email, "email")
        async with self._scope() as repos:
            return await repos.admin_users.get_by_email(email, active_only)

    async def get_by_id(self, admin_user_id: str) -> AdminUserResult:
        admin_user_id = _require(admin_user_id, "admin_user_id")
        async with self._scope() as repos:
            return await repos.admin_users.get_by_id(admin_user_id)

    async def get_permissions(self, admin_user_id: str) -> list[Permission]:
        admin_user_id = _require(admin_user_id, "admin_user_id")
        async with self._scope() as repos:
            return await repos.admin_users.get_permissions(admin_user_id)

    async def reset_password(self, admin_user_id: str, new_password: str) -> AdminUserResult:
        admin_user_id = _require(admin_user_id, "admin_user_id")
        new_password = self._validate_password(new_password)
        password_hash = await asyncio.to_thread(
            self._password_hasher.hash_password, new_password
        )
        async with self._scope() as repos:
            result = await repos.admin_users.set_password_hash(admin_user_id, password_hash)
        logger.info("Password reset for admin %s", admin_user_id)
        return result

    async def get_audit_trail(self, admin_user_id: str) -> list[AuditEntryResult]:
        """Return the admin's audit entries, oldest first."""
        admin_user_id = _require(admin_user_id, "admin_user_id")
        async with self._scope() as repos:
            await repos.admin_users.get_by_id(admin_user_id)
            return await repos.audit_log.get_for_admin(admin_user_id)
