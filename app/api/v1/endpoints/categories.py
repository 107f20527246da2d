"""Categories API: flattened category picker for the current user."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import CurrentSession, get_category_service
from app.application.services.category_service import CategoryService
from app.schemas.category import CategoryDropdownItemResponse

router = APIRouter()


@router.get("", response_model=list[CategoryDropdownItemResponse])
async def list_categories(
    session: CurrentSession,
    categories: Annotated[CategoryService, Depends(get_category_service)],
):
    """Depth-first picker items; the first item is always "No category"."""
    items = await categories.get_dropdown_items(session.user.email)
    return [CategoryDropdownItemResponse.model_validate(i) for i in items]
