"""Permission grant of one admin. Unique (admin_user_id, permission)."""

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from admin_management.infrastructure.persistence.database import Base
from admin_management.infrastructure.persistence.models.mixins import CuidMixin


class AdminUserPermission(CuidMixin, Base):
    """One granted permission. Table: admin_user_permission."""

    __tablename__ = "admin_user_permission"

    admin_user_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("admin_user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    permission: Mapped[str] = mapped_column(String(64), nullable=False)

    __table_args__ = (
        UniqueConstraint("admin_user_id", "permission", name="uq_admin_user_permission"),
    )
