"""AdminUser ORM model. Never physically deleted; is_active is the soft-delete flag."""

from sqlalchemy import Boolean, Index, String, text
from sqlalchemy.orm import Mapped, mapped_column

from admin_management.infrastructure.persistence.database import Base
from admin_management.infrastructure.persistence.models.mixins import IdentifiedModel


class AdminUser(IdentifiedModel, Base):
    """Admin user. Table: admin_user. Unique lower-cased email (email_normalized)."""

    __tablename__ = "admin_user"

    email: Mapped[str] = mapped_column(String(320), nullable=False)
    email_normalized: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True, index=True
    )
    password_hash: Mapped[str] = mapped_column(String, nullable=False)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false")
    )

    company: Mapped[str | None] = mapped_column(String(255), nullable=True)
    department: Mapped[str | None] = mapped_column(String(255), nullable=True)
    first_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    job_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(64), nullable=True)

    __table_args__ = (Index("ix_admin_user_created_at_id", "created_at", "id"),)
