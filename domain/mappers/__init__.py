"""
Domain mappers package.
Handles transformation between ORM models and DTOs (Data Transfer Objects).
"""

from domain.mappers.meal_plan_mapper import MealPlanMapper
from domain.mappers.shopping_mapper import ShoppingMapper

__all__ = ["MealPlanMapper", "ShoppingMapper"]
