"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
)
from domain.models.recipe import Recipe
from domain.models.meal_plan import PlannedMeal, ShoppingListItem

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    # Recipe models
    "Recipe",
    # Meal plan models
    "PlannedMeal",
    "ShoppingListItem",
]
