"""Category API schemas."""

from pydantic import BaseModel, ConfigDict


class CategoryDropdownItemResponse(BaseModel):
    """One entry of the flattened category picker (id is null for "No category")."""

    model_config = ConfigDict(from_attributes=True)

    id: str | None
    level: int
    name: str
