"""Category repository (read path for the picker, create for seeding)."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.category import CategoryResult
from app.infrastructure.persistence.models.category import Category
from app.infrastructure.persistence.repositories.base import BaseRepository


def _category_to_result(c: Category) -> CategoryResult:
    return CategoryResult(
        id=c.id,
        name=c.name,
        parent_id=c.parent_id,
        description=c.description,
    )


class CategoryRepository(BaseRepository[Category]):
    """Categories scoped to their owning user."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Category)

    async def list_for_user(self, email: str) -> list[CategoryResult]:
        result = await self.db.execute(
            select(Category).where(Category.user_email == email).order_by(Category.name)
        )
        return [_category_to_result(c) for c in result.scalars().all()]

    async def get_for_user(self, category_id: str, email: str) -> CategoryResult | None:
        result = await self.db.execute(
            select(Category).where(
                Category.id == category_id,
                Category.user_email == email,
            )
        )
        category = result.scalar_one_or_none()
        return _category_to_result(category) if category else None

    async def create_category(
        self,
        email: str,
        name: str,
        parent_id: str | None = None,
        description: str | None = None,
    ) -> CategoryResult:
        category = Category(
            user_email=email,
            name=name,
            parent_id=parent_id,
            description=description,
        )
        created = await self.create(category)
        return _category_to_result(created)
