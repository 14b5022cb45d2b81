"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.recipe_repository import RecipeRepository
from repositories.meal_plan_repository import PlannedMealRepository
from repositories.shopping_repository import ShoppingListItemRepository

__all__ = [
    "BaseRepository",
    "RecipeRepository",
    "PlannedMealRepository",
    "ShoppingListItemRepository",
]
