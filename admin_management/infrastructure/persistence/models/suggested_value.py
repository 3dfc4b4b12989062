"""Autofill suggestion ORM model. Ordered by position within a type."""

from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from admin_management.infrastructure.persistence.database import Base
from admin_management.infrastructure.persistence.models.mixins import CuidMixin


class SuggestedValue(CuidMixin, Base):
    """One candidate value for a profile field category. Table: suggested_value."""

    __tablename__ = "suggested_value"

    type: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    value: Mapped[str] = mapped_column(String(255), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint("type", "value", name="uq_suggested_value_type_value"),
    )
