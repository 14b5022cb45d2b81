"""API routes package"""

from . import health, meal_plans, recipes, shopping

__all__ = ["health", "meal_plans", "recipes", "shopping"]
