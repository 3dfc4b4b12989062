"""Admin audit log ORM model. Append-only lifecycle trail of admin users."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Connection, DateTime, ForeignKey, String, event
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, Mapper, mapped_column

from admin_management.infrastructure.persistence.database import Base
from admin_management.shared.utils.datetime import utc_now
from admin_management.shared.utils.generators import generate_cuid

_JSON = JSON().with_variant(JSONB(), "postgresql")


class AdminAuditLog(Base):
    """Audit entry: what happened to which admin, when. No update/delete."""

    __tablename__ = "admin_audit_log"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=generate_cuid)
    admin_user_id: Mapped[str] = mapped_column(
        String, ForeignKey("admin_user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    action: Mapped[str] = mapped_column(String(32), nullable=False)
    entity_data: Mapped[dict[str, Any]] = mapped_column(_JSON, nullable=False, default=dict)
    audit_metadata: Mapped[dict[str, Any] | None] = mapped_column(
        "metadata", _JSON, nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )


@event.listens_for(AdminAuditLog, "before_update")
def _prevent_audit_log_updates(
    _mapper: Mapper[Any], _connection: Connection, _target: AdminAuditLog
) -> None:
    """Audit log entries are append-only; updates are forbidden."""
    raise ValueError("Audit log entries are immutable and cannot be updated.")


@event.listens_for(AdminAuditLog, "before_delete")
def _prevent_audit_log_deletes(
    _mapper: Mapper[Any], _connection: Connection, _target: AdminAuditLog
) -> None:
    """Audit log entries cannot be deleted."""
    raise ValueError("Audit log entries cannot be deleted.")
