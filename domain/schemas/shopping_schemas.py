"""Pydantic schemas for shopping list operations."""

from pydantic import BaseModel
from typing import List, Optional
from uuid import UUID
from datetime import datetime


class ShoppingListItemResponse(BaseModel):
    """Individual item on the shopping list."""
    id: UUID
    ingredient_name: str
    amount: Optional[str] = None
    unit: Optional[str] = None
    category: Optional[str] = None
    recipe_id: Optional[UUID] = None
    recipe_name: Optional[str] = None
    planned_meal_id: Optional[UUID] = None
    is_checked: bool = False
    sort_order: int = 0
    created_at: Optional[datetime] = None


class ShoppingListResponse(BaseModel):
    """The user's shopping list with counters."""
    items: List[ShoppingListItemResponse] = []
    total: int
    unchecked: int


class ToggleItemResponse(BaseModel):
    is_checked: bool


class ClearCheckedResponse(BaseModel):
    message: str
    items_removed: int
