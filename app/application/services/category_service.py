"""Category picker: flatten the user's category tree for rendering."""

from __future__ import annotations

from collections import defaultdict

from app.application.dtos.category import CategoryDropdownItem, CategoryResult
from app.application.interfaces.repositories import ICategoryRepository

NO_CATEGORY_LABEL = "No category"


def flatten_categories(categories: list[CategoryResult]) -> list[CategoryDropdownItem]:
    """Depth-first flatten of a category forest into picker items.

    The first item is always the empty choice {id: None, level: 1, name: "No category"}.
    Top-level categories are level 1, their children level 2, and so on.
    Siblings are ordered alphabetically. Categories whose parent is not in
    the list are treated as top level.
    """
    known_ids = {c.id for c in categories}
    children: dict[str | None, list[CategoryResult]] = defaultdict(list)
    for category in categories:
        parent = category.parent_id if category.parent_id in known_ids else None
        children[parent].append(category)

    items = [CategoryDropdownItem(id=None, level=1, name=NO_CATEGORY_LABEL)]
    visited: set[str] = set()

    def walk(parent_id: str | None, level: int) -> None:
        for category in sorted(children.get(parent_id, []), key=lambda c: c.name):
            if category.id in visited:
                continue
            visited.add(category.id)
            items.append(CategoryDropdownItem(id=category.id, level=level, name=category.name))
            walk(category.id, level + 1)

    walk(None, 1)
    return items


class CategoryService:
    """Read-only access to the user's categories."""

    def __init__(self, category_repo: ICategoryRepository) -> None:
        self._categories = category_repo

    async def get_dropdown_items(self, email: str) -> list[CategoryDropdownItem]:
        categories = await self._categories.list_for_user(email)
        return flatten_categories(categories)
