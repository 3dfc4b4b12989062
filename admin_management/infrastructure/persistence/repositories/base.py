"""Base repository: session/model binding, lookups, and create."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from admin_management.domain.exceptions import ResourceNotFoundException
from admin_management.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_model_by_id, get_model_for_update, and create.

    Subclasses map models to application DTOs; ORM instances stay inside
    the infrastructure layer.
    """

    resource_type: str = "resource"

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_model_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def get_model_for_update(self, entity_id: str) -> ModelType:
        """Return a record locked for update (SELECT ... FOR UPDATE).

        Raises ResourceNotFoundException when no row matches. Backends
        without row locks (SQLite) ignore the FOR UPDATE clause.
        """
        model: Any = self.model
        result = await self.db.execute(
            select(self.model).where(model.id == entity_id).with_for_update()
        )
        obj = result.scalar_one_or_none()
        if obj is None:
            raise ResourceNotFoundException(self.resource_type, entity_id)
        return obj

    async def create_model(self, obj: ModelType) -> ModelType:
        """Persist a new record and flush so defaults and constraints apply now."""
        self.db.add(obj)
        await self.db.flush()
        return obj
