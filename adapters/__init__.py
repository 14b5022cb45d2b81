"""
Adapters package - External service connections.
HTTP adapter for the meal-plan API consumed by the planner core.
"""

from adapters.meal_plan_gateway import MealPlanGateway, HttpMealPlanGateway, create_gateway

__all__ = [
    "MealPlanGateway",
    "HttpMealPlanGateway",
    "create_gateway",
]
