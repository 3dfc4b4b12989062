"""SQLAlchemy mixins for common model patterns (DRY).

Provides: CuidMixin, TimestampMixin, and the combined IdentifiedModel.
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from admin_management.shared.utils.datetime import utc_now
from admin_management.shared.utils.generators import generate_cuid


class CuidMixin:
    """Mixin for models using CUID as primary key. Provides id with default generate_cuid."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class TimestampMixin:
    """Mixin for created_at and updated_at (timezone-aware).

    created_at is assigned in Python (microsecond precision) so that
    ordering by (created_at, id) follows insertion order on every backend.
    """

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            default=utc_now,
            server_default=func.now(),
            nullable=False,
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            default=utc_now,
            onupdate=utc_now,
            server_default=func.now(),
            nullable=False,
        )


class IdentifiedModel(CuidMixin, TimestampMixin):
    """Combined mixin: CUID + created_at/updated_at."""

    __abstract__ = True
