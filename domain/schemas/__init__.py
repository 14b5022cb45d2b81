"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.meal_plan_schemas import (
    RecipeRef,
    RecipeSource,
    CustomMealSource,
    MealSource,
    MealPlanCreate,
    MealPlanDraft,
    MealPlanEntry,
    MealPlansResponse,
    GenerateShoppingListRequest,
    ShoppingListResult,
    MessageResponse,
)
from domain.schemas.recipe_schemas import (
    RecipeIngredient,
    RecipeCreate,
    RecipeResponse,
    RecipeSearchResult,
    RecipesResponse,
)
from domain.schemas.shopping_schemas import (
    ShoppingListItemResponse,
    ShoppingListResponse,
    ToggleItemResponse,
    ClearCheckedResponse,
)

__all__ = [
    # Meal plan schemas
    "RecipeRef",
    "RecipeSource",
    "CustomMealSource",
    "MealSource",
    "MealPlanCreate",
    "MealPlanDraft",
    "MealPlanEntry",
    "MealPlansResponse",
    "GenerateShoppingListRequest",
    "ShoppingListResult",
    "MessageResponse",
    # Recipe schemas
    "RecipeIngredient",
    "RecipeCreate",
    "RecipeResponse",
    "RecipeSearchResult",
    "RecipesResponse",
    # Shopping schemas
    "ShoppingListItemResponse",
    "ShoppingListResponse",
    "ToggleItemResponse",
    "ClearCheckedResponse",
]
