"""Recipe service - create, fetch and search a user's saved recipes"""

import logging
from typing import List
from uuid import UUID

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError
from domain.models import Recipe
from domain.schemas.recipe_schemas import RecipeCreate
from repositories.recipe_repository import RecipeRepository

logger = logging.getLogger("mealboard.recipes")


class RecipeService:
    """Business logic for recipes."""

    @staticmethod
    def create_recipe(db: Session, user_id: UUID, data: RecipeCreate) -> Recipe:
        recipe = Recipe(
            user_id=user_id,
            title=data.title.strip(),
            image_url=data.image_url,
            servings=data.servings,
            ingredients=[ing.model_dump() for ing in data.ingredients],
            times_cooked=0,
        )
        recipe = RecipeRepository(db).create(recipe)
        logger.info("Recipe created: %s (%s) for user %s", recipe.recipe_id, recipe.title, user_id)
        return recipe

    @staticmethod
    def get_recipe(db: Session, user_id: UUID, recipe_id: UUID) -> Recipe:
        """
        Fetch one of the user's recipes.

        Raises:
            NotFoundError: If the recipe does not exist or belongs to someone else
        """
        recipe = RecipeRepository(db).get_by_id_and_user(recipe_id, user_id)
        if recipe is None:
            raise NotFoundError(f"Recipe {recipe_id} not found")
        return recipe

    @staticmethod
    def search_recipes(
        db: Session, user_id: UUID, query: str = None, limit: int = 20
    ) -> List[Recipe]:
        query = (query or "").strip() or None
        recipes = RecipeRepository(db).search(user_id, query=query, limit=limit)
        logger.debug("Recipe search %r for user %s: %d hits", query, user_id, len(recipes))
        return recipes
