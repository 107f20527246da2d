"""Base repository: primary-key lookup and create over an AsyncSession."""

from typing import Any, Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get by primary key and create.

    Subclasses map ORM rows to application DTOs at their public boundary.
    The caller owns the transaction; methods only flush.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_pk(self, pk: Any) -> ModelType | None:
        """Return a single record by primary key, or None."""
        return await self.db.get(self.model, pk)

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record and load server defaults."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj
