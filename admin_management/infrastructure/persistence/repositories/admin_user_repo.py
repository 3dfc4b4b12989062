"""Admin user repository (the admin user store). Interface methods return application DTOs."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import fields
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from admin_management.application.dtos.admin_user import AdminProfile, AdminUserResult
from admin_management.domain.enums import Permission
from admin_management.domain.exceptions import (
    DuplicateEmailException,
    ResourceNotFoundException,
    ValidationException,
)
from admin_management.domain.permissions import is_valid, parse_permissions
from admin_management.infrastructure.persistence.models.admin_user import AdminUser
from admin_management.infrastructure.persistence.models.admin_user_permission import (
    AdminUserPermission,
)
from admin_management.infrastructure.persistence.repositories.base import BaseRepository
from admin_management.shared.enums import AuditAction
from admin_management.shared.telemetry.logging import get_logger
from admin_management.shared.utils.datetime import ensure_utc, utc_now

if TYPE_CHECKING:
    from admin_management.infrastructure.persistence.repositories.admin_audit_log_repo import (
        AdminAuditLogRepository,
    )

logger = get_logger(__name__)

_PROFILE_FIELDS = tuple(f.name for f in fields(AdminProfile))


def normalize_email(email: str) -> str:
    """Lower-cased, trimmed email used for uniqueness and lookups."""
    return email.strip().lower()


def _admin_to_result(user: AdminUser, permissions: Iterable[Permission]) -> AdminUserResult:
    """Map ORM AdminUser to application AdminUserResult (no password hash)."""
    return AdminUserResult(
        id=user.id,
        email=user.email,
        is_active=user.is_active,
        profile=AdminProfile(**{name: getattr(user, name) for name in _PROFILE_FIELDS}),
        permissions=tuple(sorted(permissions, key=lambda p: p.value)),
        created_at=ensure_utc(user.created_at),
    )


def _to_permissions(values: Iterable[str], admin_user_id: str) -> list[Permission]:
    """Convert stored values, skipping any no longer in the catalog."""
    out: list[Permission] = []
    for value in values:
        if is_valid(value):
            out.append(Permission(value))
        else:
            logger.warning(
                "Ignoring stored permission %r of admin %s: not in catalog",
                value,
                admin_user_id,
            )
    return out


class AdminUserRepository(BaseRepository[AdminUser]):
    """Admin user store: create, activate, profile/permission/password updates, lookups."""

    resource_type = "admin_user"

    def __init__(
        self,
        db: AsyncSession,
        audit_log: AdminAuditLogRepository | None = None,
    ) -> None:
        super().__init__(db, AdminUser)
        self._audit_log = audit_log

    def _serialize_for_audit(self, obj: AdminUser) -> dict[str, Any]:
        """Audit payload: never include password_hash."""
        data: dict[str, Any] = {
            "id": obj.id,
            "email": obj.email,
            "is_active": obj.is_active,
        }
        for name in _PROFILE_FIELDS:
            data[name] = getattr(obj, name)
        return data

    async def _emit_audit_event(
        self,
        action: AuditAction,
        obj: AdminUser,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        """Record one audit entry in a savepoint. No-op when no audit repository is wired.

        A failed write rolls back only the savepoint; the caller's change
        still commits and the failure is logged.
        """
        if self._audit_log is None:
            return
        try:
            async with self.db.begin_nested():
                await self._audit_log.record(
                    admin_user_id=obj.id,
                    action=action,
                    entity_data=self._serialize_for_audit(obj),
                    metadata=metadata,
                )
        except Exception as e:
            logger.warning(
                "Failed to record audit event %s for admin %s: %s",
                action.value,
                obj.id,
                str(e),
                exc_info=True,
            )

    async def _load_permission_values(self, admin_user_id: str) -> list[str]:
        result = await self.db.execute(
            select(AdminUserPermission.permission).where(
                AdminUserPermission.admin_user_id == admin_user_id
            )
        )
        return list(result.scalars().all())

    async def _to_result(self, user: AdminUser) -> AdminUserResult:
        values = await self._load_permission_values(user.id)
        return _admin_to_result(user, _to_permissions(values, user.id))

    async def _to_results(self, users: list[AdminUser]) -> list[AdminUserResult]:
        """Map a batch of users, loading all their permissions in one query."""
        if not users:
            return []
        ids = [u.id for u in users]
        result = await self.db.execute(
            select(AdminUserPermission.admin_user_id, AdminUserPermission.permission).where(
                AdminUserPermission.admin_user_id.in_(ids)
            )
        )
        by_user: dict[str, list[str]] = {admin_id: [] for admin_id in ids}
        for admin_id, value in result.all():
            by_user[admin_id].append(value)
        return [
            _admin_to_result(u, _to_permissions(by_user[u.id], u.id)) for u in users
        ]

    @staticmethod
    def _active_filter(stmt: Any, active_only: bool | None) -> Any:
        if active_only is None:
            return stmt
        return stmt.where(AdminUser.is_active.is_(active_only))

    async def create(
        self, profile: AdminProfile, email: str, password_hash: str
    ) -> AdminUserResult:
        """Create an inactive admin with no permissions.

        Raises DuplicateEmailException if the (case-insensitive) email is
        taken, including when a concurrent insert wins the unique index.
        """
        normalized = normalize_email(email)
        existing = await self.db.execute(
            select(AdminUser.id).where(AdminUser.email_normalized == normalized)
        )
        if existing.scalar_one_or_none() is not None:
            raise DuplicateEmailException(email)
        user = AdminUser(
            email=email.strip(),
            email_normalized=normalized,
            password_hash=password_hash,
            is_active=False,
            **{name: getattr(profile, name) for name in _PROFILE_FIELDS},
        )
        try:
            created = await self.create_model(user)
        except IntegrityError:
            raise DuplicateEmailException(email)
        await self._emit_audit_event(AuditAction.CREATED, created)
        return _admin_to_result(created, [])

    async def activate(self, admin_user_id: str) -> AdminUserResult:
        """Mark admin active. Already-active admins are returned unchanged."""
        user = await self.get_model_for_update(admin_user_id)
        if not user.is_active:
            user.is_active = True
            await self.db.flush()
            await self._emit_audit_event(AuditAction.ACTIVATED, user)
        return await self._to_result(user)

    async def update_profile(
        self,
        admin_user_id: str,
        profile: AdminProfile,
        is_active: bool | None = None,
    ) -> AdminUserResult:
        """Apply every non-None profile field; optionally (de)activate."""
        user = await self.get_model_for_update(admin_user_id)
        changed: list[str] = []
        for name in _PROFILE_FIELDS:
            value = getattr(profile, name)
            if value is not None and getattr(user, name) != value:
                setattr(user, name, value)
                changed.append(name)
        status_action: AuditAction | None = None
        if is_active is not None and user.is_active != is_active:
            user.is_active = is_active
            status_action = AuditAction.ACTIVATED if is_active else AuditAction.DEACTIVATED
        if changed or status_action is not None:
            await self.db.flush()
        if changed:
            await self._emit_audit_event(
                AuditAction.PROFILE_UPDATED, user, {"changed_fields": changed}
            )
        if status_action is not None:
            await self._emit_audit_event(status_action, user)
        return await self._to_result(user)

    async def set_permissions(
        self, admin_user_id: str, permissions: Iterable[Permission | str]
    ) -> AdminUserResult:
        """Replace the admin's permission set with exactly `permissions`.

        Unknown values raise UnknownPermissionException before any row is
        read or written. Only the difference is written.
        """
        wanted = {p.value for p in parse_permissions(permissions)}
        user = await self.get_model_for_update(admin_user_id)
        current = set(await self._load_permission_values(admin_user_id))
        granted = sorted(wanted - current)
        revoked = sorted(current - wanted)
        if revoked:
            await self.db.execute(
                delete(AdminUserPermission).where(
                    AdminUserPermission.admin_user_id == admin_user_id,
                    AdminUserPermission.permission.in_(revoked),
                )
            )
        for value in granted:
            self.db.add(AdminUserPermission(admin_user_id=admin_user_id, permission=value))
        user.updated_at = utc_now()
        await self.db.flush()
        await self._emit_audit_event(
            AuditAction.PERMISSIONS_UPDATED,
            user,
            {"granted": granted, "revoked": revoked},
        )
        return _admin_to_result(user, _to_permissions(sorted(wanted), admin_user_id))

    async def set_password_hash(
        self, admin_user_id: str, password_hash: str
    ) -> AdminUserResult:
        user = await self.get_model_for_update(admin_user_id)
        user.password_hash = password_hash
        await self.db.flush()
        await self._emit_audit_event(AuditAction.PASSWORD_RESET, user)
        return await self._to_result(user)

    async def get_by_id(self, admin_user_id: str) -> AdminUserResult:
        user = await self.get_model_by_id(admin_user_id)
        if user is None:
            raise ResourceNotFoundException(self.resource_type, admin_user_id)
        return await self._to_result(user)

    async def get_by_email(
        self, email: str, active_only: bool = False
    ) -> AdminUserResult:
        stmt = select(AdminUser).where(AdminUser.email_normalized == normalize_email(email))
        if active_only:
            stmt = stmt.where(AdminUser.is_active.is_(True))
        result = await self.db.execute(stmt)
        user = result.scalar_one_or_none()
        if user is None:
            raise ResourceNotFoundException(self.resource_type, email)
        return await self._to_result(user)

    async def get_permissions(self, admin_user_id: str) -> list[Permission]:
        if await self.get_model_by_id(admin_user_id) is None:
            raise ResourceNotFoundException(self.resource_type, admin_user_id)
        values = await self._load_permission_values(admin_user_id)
        return sorted(_to_permissions(values, admin_user_id), key=lambda p: p.value)

    async def list_paginated(
        self, page: int, page_size: int, active_only: bool | None = None
    ) -> tuple[list[AdminUserResult], int]:
        """Return one page (1-based) ordered by (created_at, id) and the total count."""
        if page < 1:
            raise ValidationException("page must be at least 1", field="page")
        if page_size <= 0:
            raise ValidationException("page_size must be positive", field="page_size")
        if (page - 1) * page_size > 2**63 - 1:
            raise ValidationException("page is out of range", field="page")
        count_stmt = self._active_filter(
            select(func.count()).select_from(AdminUser), active_only
        )
        total = (await self.db.execute(count_stmt)).scalar_one()
        stmt = self._active_filter(select(AdminUser), active_only)
        stmt = (
            stmt.order_by(AdminUser.created_at.asc(), AdminUser.id.asc())
            .offset((page - 1) * page_size)
            .limit(page_size)
        )
        users = list((await self.db.execute(stmt)).scalars().all())
        return await self._to_results(users), int(total)

    async def list_all(self, active_only: bool | None = None) -> list[AdminUserResult]:
        stmt = self._active_filter(select(AdminUser), active_only).order_by(
            AdminUser.created_at.asc(), AdminUser.id.asc()
        )
        users = list((await self.db.execute(stmt)).scalars().all())
        return await self._to_results(users)
