"""Base repository: generic CRUD over one ORM model."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, get_all, create, update_fields and delete.

    All writes flush but never commit; the session owner (request dependency,
    runner or script) decides the transaction boundary.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def get_all(self, skip: int = 0, limit: int = 100) -> list[ModelType]:
        """Return records with pagination."""
        result = await self.db.execute(select(self.model).offset(skip).limit(limit))
        return list(result.scalars().all())

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record and return it with server defaults loaded."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def update_fields(self, obj: ModelType, changes: dict[str, Any]) -> ModelType:
        """Set only the given attributes on an attached record and flush.

        Raises:
            ValueError: If a key is not a column of the model.
        """
        for key, value in changes.items():
            if not hasattr(self.model, key):
                raise ValueError(
                    f"{self.model.__name__} has no attribute {key!r}"
                )
            setattr(obj, key, value)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def delete(self, obj: ModelType) -> None:
        """Delete the record."""
        await self.db.delete(obj)
        await self.db.flush()
