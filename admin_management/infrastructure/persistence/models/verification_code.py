"""One-time verification code. Stored by code_hash; consumed_at marks redemption or supersession."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from admin_management.infrastructure.persistence.database import Base
from admin_management.infrastructure.persistence.models.mixins import CuidMixin
from admin_management.shared.utils.datetime import utc_now


class VerificationCode(CuidMixin, Base):
    """Verification code. Table: verification_code. Raw code is never stored."""

    __tablename__ = "verification_code"

    code_hash: Mapped[str] = mapped_column(String(64), unique=True, nullable=False, index=True)
    admin_user_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("admin_user.id", ondelete="CASCADE"),
        nullable=False,
    )
    purpose: Mapped[str] = mapped_column(String(32), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    consumed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index("ix_verification_code_owner_purpose", "admin_user_id", "purpose"),
    )
