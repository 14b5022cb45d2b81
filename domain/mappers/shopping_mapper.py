"""
Shopping list domain mappers.
Handles transformation between ORM models and DTOs for shopping-related entities.
"""

from typing import List

from domain.models import ShoppingListItem
from domain.schemas.shopping_schemas import (
    ShoppingListResponse,
    ShoppingListItemResponse,
)


class ShoppingMapper:
    """Mapper for shopping list transformations."""

    @staticmethod
    def to_item_response(item: ShoppingListItem) -> ShoppingListItemResponse:
        return ShoppingListItemResponse(
            id=item.list_item_id,
            ingredient_name=item.ingredient_name,
            amount=item.amount,
            unit=item.unit,
            category=item.category,
            recipe_id=item.recipe_id,
            recipe_name=item.recipe.title if item.recipe is not None else None,
            planned_meal_id=item.planned_meal_id,
            is_checked=bool(item.is_checked),
            sort_order=item.sort_order or 0,
            created_at=item.created_at,
        )

    @staticmethod
    def to_response(items: List[ShoppingListItem]) -> ShoppingListResponse:
        """
        Convert the user's ORM shopping list items to ShoppingListResponse DTO.

        Args:
            items: ShoppingListItem ORM instances, already ordered

        Returns:
            ShoppingListResponse DTO with items and counters
        """
        responses = [ShoppingMapper.to_item_response(item) for item in items]
        return ShoppingListResponse(
            items=responses,
            total=len(responses),
            unchecked=sum(1 for item in responses if not item.is_checked),
        )
