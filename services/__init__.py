"""Services package - Business logic layer"""

from services.meal_plan_service import MealPlanService
from services.recipe_service import RecipeService
from services.shopping_service import ShoppingService

__all__ = [
    "MealPlanService",
    "RecipeService",
    "ShoppingService",
]
