"""
Meal plan domain mappers.
Handles transformation between ORM models and DTOs for planned meals and recipes.
"""

from domain.models import PlannedMeal, Recipe
from domain.schemas.meal_plan_schemas import MealPlanEntry, RecipeRef
from domain.schemas.recipe_schemas import (
    RecipeIngredient,
    RecipeResponse,
    RecipeSearchResult,
)


class MealPlanMapper:
    """Mapper for planned meal and recipe transformations."""

    @staticmethod
    def to_entry(planned_meal: PlannedMeal) -> MealPlanEntry:
        """
        Convert ORM PlannedMeal to the MealPlanEntry DTO.

        The linked recipe (if any) is joined in as a RecipeRef so the
        calendar can show its title and image without a second request.
        """
        recipe = planned_meal.recipe
        recipe_ref = None
        if recipe is not None:
            recipe_ref = RecipeRef(
                id=recipe.recipe_id, title=recipe.title, image_url=recipe.image_url
            )

        return MealPlanEntry(
            id=planned_meal.planned_meal_id,
            user_id=planned_meal.user_id,
            plan_date=planned_meal.plan_date,
            meal_type=planned_meal.meal_type,
            recipe_id=planned_meal.recipe_id,
            recipe=recipe_ref,
            custom_meal=planned_meal.custom_meal,
            servings=planned_meal.servings,
            notes=planned_meal.notes,
            is_cooked=bool(planned_meal.is_cooked),
            created_at=planned_meal.created_at,
        )

    @staticmethod
    def to_recipe_response(recipe: Recipe) -> RecipeResponse:
        return RecipeResponse(
            id=recipe.recipe_id,
            title=recipe.title,
            image_url=recipe.image_url,
            servings=recipe.servings,
            ingredients=[RecipeIngredient(**ing) for ing in (recipe.ingredients or [])],
            times_cooked=recipe.times_cooked or 0,
            last_cooked_at=recipe.last_cooked_at,
            created_at=recipe.created_at,
        )

    @staticmethod
    def to_search_result(recipe: Recipe) -> RecipeSearchResult:
        return RecipeSearchResult(
            id=recipe.recipe_id, title=recipe.title, image_url=recipe.image_url
        )
