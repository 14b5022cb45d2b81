"""
Recipe routes - saved recipe search, creation and retrieval.
The search endpoint backs the add-meal dialog of the calendar.
"""

from typing import Optional
from uuid import UUID
import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from api.dependencies import get_user_id
from domain.mappers import MealPlanMapper
from domain.models import get_db_session
from domain.schemas.recipe_schemas import RecipeCreate, RecipeResponse, RecipesResponse
from services.recipe_service import RecipeService

router = APIRouter(prefix="/recipes", tags=["Recipes"])
logger = logging.getLogger("mealboard.api.recipes")


@router.get("", response_model=RecipesResponse)
def search_recipes(
    search: Optional[str] = Query(default=None, description="Case-insensitive title filter"),
    limit: int = Query(default=20, ge=1, le=100, description="Maximum results"),
    user_id: UUID = Depends(get_user_id),
    db: Session = Depends(get_db_session),
):
    """
    Search the user's recipes.

    - **search**: substring of the title; omit to list all recipes
    - **limit**: max results (1-100)
    """
    recipes = RecipeService.search_recipes(db, user_id, query=search, limit=limit)
    return RecipesResponse(recipes=[MealPlanMapper.to_search_result(r) for r in recipes])


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
def create_recipe(
    body: RecipeCreate,
    user_id: UUID = Depends(get_user_id),
    db: Session = Depends(get_db_session),
):
    recipe = RecipeService.create_recipe(db, user_id, body)
    return MealPlanMapper.to_recipe_response(recipe)


@router.get("/{recipe_id}", response_model=RecipeResponse)
def get_recipe(
    recipe_id: UUID,
    user_id: UUID = Depends(get_user_id),
    db: Session = Depends(get_db_session),
):
    """Get a single recipe with its ingredients and cook counters."""
    recipe = RecipeService.get_recipe(db, user_id, recipe_id)
    return MealPlanMapper.to_recipe_response(recipe)
