"""Shopping list routes"""

from uuid import UUID
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.dependencies import get_user_id
from domain.mappers import ShoppingMapper
from domain.models import get_db_session
from domain.schemas.shopping_schemas import (
    ClearCheckedResponse,
    ShoppingListResponse,
    ToggleItemResponse,
)
from services.shopping_service import ShoppingService

router = APIRouter(prefix="/shopping-list", tags=["Shopping"])
logger = logging.getLogger("mealboard.api.shopping")


@router.get("", response_model=ShoppingListResponse)
def get_shopping_list(
    user_id: UUID = Depends(get_user_id), db: Session = Depends(get_db_session)
):
    """Get the user's shopping list, unchecked items first."""
    items = ShoppingService.get_list(db, user_id)
    return ShoppingMapper.to_response(items)


@router.delete("/checked", response_model=ClearCheckedResponse)
def clear_checked_items(
    user_id: UUID = Depends(get_user_id), db: Session = Depends(get_db_session)
):
    removed = ShoppingService.clear_checked(db, user_id)
    return ClearCheckedResponse(message="Checked items cleared", items_removed=removed)


@router.put("/{list_item_id}", response_model=ToggleItemResponse)
def toggle_item(
    list_item_id: UUID,
    user_id: UUID = Depends(get_user_id),
    db: Session = Depends(get_db_session),
):
    """Toggle the checked state of a shopping list item."""
    item = ShoppingService.toggle_item(db, user_id, list_item_id)
    return ToggleItemResponse(is_checked=item.is_checked)
