"""DTOs for the category dataset consumed by the category picker."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryResult:
    """Category row: identifier, name, parent reference."""

    id: str
    name: str
    parent_id: str | None
    description: str | None = None


@dataclass(frozen=True)
class CategoryDropdownItem:
    """One entry of the flattened picker; level 1 is the top of the tree."""

    id: str | None
    level: int
    name: str
