"""Autofill suggestion repository."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from admin_management.domain.enums import SuggestedValueType
from admin_management.infrastructure.persistence.models.suggested_value import SuggestedValue
from admin_management.infrastructure.persistence.repositories.base import BaseRepository


class SuggestedValueRepository(BaseRepository[SuggestedValue]):
    resource_type = "suggested_value"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, SuggestedValue)

    async def get_all(self) -> list[tuple[SuggestedValueType, str]]:
        """Return (type, value) pairs ordered by type then position.

        Rows whose type is no longer known are skipped.
        """
        result = await self.db.execute(
            select(SuggestedValue.type, SuggestedValue.value).order_by(
                SuggestedValue.type.asc(), SuggestedValue.position.asc()
            )
        )
        known = {t.value for t in SuggestedValueType}
        return [
            (SuggestedValueType(value_type), value)
            for value_type, value in result.all()
            if value_type in known
        ]

    async def replace(self, value_type: SuggestedValueType, values: list[str]) -> None:
        await self.db.execute(
            delete(SuggestedValue).where(SuggestedValue.type == value_type.value)
        )
        for position, value in enumerate(values):
            self.db.add(SuggestedValue(type=value_type.value, value=value, position=position))
        await self.db.flush()
