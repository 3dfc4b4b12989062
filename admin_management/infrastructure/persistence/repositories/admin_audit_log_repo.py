"""Admin audit trail repository. Append-only; reads return application DTOs."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from admin_management.application.dtos.admin_user import AuditEntryResult
from admin_management.infrastructure.persistence.models.admin_audit_log import AdminAuditLog
from admin_management.infrastructure.persistence.repositories.base import BaseRepository
from admin_management.shared.enums import AuditAction
from admin_management.shared.utils.datetime import ensure_utc

_SENSITIVE_KEYS = frozenset({"password", "password_hash", "code", "code_hash", "token"})


def _sanitize_entity_data(data: dict[str, Any]) -> dict[str, Any]:
    """Redact secrets and make values JSON-serializable."""
    out: dict[str, Any] = {}
    for key, value in data.items():
        if key.lower() in _SENSITIVE_KEYS:
            out[key] = "[REDACTED]"
        elif isinstance(value, datetime):
            out[key] = value.isoformat()
        else:
            out[key] = value
    return out


def _entry_to_result(row: AdminAuditLog) -> AuditEntryResult:
    return AuditEntryResult(
        id=row.id,
        admin_user_id=row.admin_user_id,
        action=AuditAction(row.action),
        created_at=ensure_utc(row.created_at),
        entity_data=dict(row.entity_data or {}),
        metadata=dict(row.audit_metadata or {}),
    )


class AdminAuditLogRepository(BaseRepository[AdminAuditLog]):
    """Writes and reads the admin lifecycle audit trail."""

    resource_type = "admin_audit_log"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, AdminAuditLog)

    async def record(
        self,
        admin_user_id: str,
        action: AuditAction,
        entity_data: dict[str, Any],
        metadata: dict[str, Any] | None = None,
    ) -> None:
        """Append one entry in the current transaction."""
        await self.create_model(
            AdminAuditLog(
                admin_user_id=admin_user_id,
                action=action.value,
                entity_data=_sanitize_entity_data(entity_data),
                audit_metadata=metadata or {},
            )
        )

    async def get_for_admin(self, admin_user_id: str) -> list[AuditEntryResult]:
        result = await self.db.execute(
            select(AdminAuditLog)
            .where(AdminAuditLog.admin_user_id == admin_user_id)
            .order_by(AdminAuditLog.created_at.asc(), AdminAuditLog.id.asc())
        )
        return [_entry_to_result(row) for row in result.scalars().all()]
