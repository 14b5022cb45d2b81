from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from app.exceptions import ForbiddenError, NotFoundError, ServiceValidationError
from domain.models import PlannedMeal
from domain.schemas.meal_plan_schemas import MealPlanCreate
from planner.week_window import monday_of, week_end
from repositories.meal_plan_repository import PlannedMealRepository
from repositories.recipe_repository import RecipeRepository

logger = logging.getLogger("mealboard.meal_plans")


class MealPlanService:
    """
    Calendar of planned meals:
    - one planned meal per (user, date, meal type) cell; adding to an occupied
      cell replaces what was there
    - each planned meal is either a saved recipe or a free-text custom meal
    - marking a recipe-backed meal as cooked also bumps the recipe's counters
    """

    def __init__(self, db: Session):
        self.db: Session = db
        self.meals = PlannedMealRepository(db)
        self.recipes = RecipeRepository(db)

    # ---------- queries ----------

    @staticmethod
    def resolve_range(
        start_date: Optional[date], end_date: Optional[date], today: Optional[date] = None
    ) -> Tuple[date, date]:
        """Default to the current Monday-Sunday week when dates are omitted."""
        start = start_date or monday_of(today or date.today())
        end = end_date or week_end(start)
        if end < start:
            raise ServiceValidationError(
                "end_date must not be before start_date",
                details={"start_date": start.isoformat(), "end_date": end.isoformat()},
            )
        return start, end

    def list_range(self, user_id: uuid.UUID, start_date: date, end_date: date) -> List[PlannedMeal]:
        meals = self.meals.get_by_date_range(user_id, start_date, end_date)
        logger.info(
            "Found %d planned meals for user %s between %s and %s",
            len(meals), user_id, start_date, end_date,
        )
        return meals

    # ---------- commands ----------

    def create_or_replace(self, user_id: uuid.UUID, data: MealPlanCreate) -> PlannedMeal:
        if data.recipe_id is not None:
            if self.recipes.get_by_id_and_user(data.recipe_id, user_id) is None:
                raise NotFoundError(f"Recipe {data.recipe_id} not found")

        servings = data.servings or 1
        meal = self.meals.get_by_cell(user_id, data.plan_date, data.meal_type.value)

        if meal is None:
            meal = PlannedMeal(
                user_id=user_id,
                plan_date=data.plan_date,
                meal_type=data.meal_type.value,
                recipe_id=data.recipe_id,
                custom_meal=data.custom_meal,
                servings=servings,
                notes=data.notes,
                is_cooked=False,
            )
            self.meals.create(meal)
            logger.info("Planned %s on %s for user %s", data.meal_type.value, data.plan_date, user_id)
        else:
            meal.recipe_id = data.recipe_id
            meal.custom_meal = data.custom_meal
            meal.servings = servings
            meal.notes = data.notes
            self.meals.update(meal)
            logger.info("Replaced %s on %s for user %s", data.meal_type.value, data.plan_date, user_id)

        return self.meals.get_by_id(meal.planned_meal_id)

    def _owned_meal(self, user_id: uuid.UUID, planned_meal_id: uuid.UUID) -> PlannedMeal:
        meal = self.meals.get_by_id(planned_meal_id)
        if meal is None:
            raise NotFoundError("Meal plan not found")
        if meal.user_id != user_id:
            raise ForbiddenError("Access denied")
        return meal

    def delete(self, user_id: uuid.UUID, planned_meal_id: uuid.UUID) -> None:
        self._owned_meal(user_id, planned_meal_id)
        self.meals.delete(planned_meal_id)
        logger.info("Deleted planned meal %s for user %s", planned_meal_id, user_id)

    def mark_cooked(
        self, user_id: uuid.UUID, planned_meal_id: uuid.UUID, cooked_on: Optional[date] = None
    ) -> PlannedMeal:
        meal = self._owned_meal(user_id, planned_meal_id)
        meal.is_cooked = True

        if meal.recipe is not None:
            meal.recipe.times_cooked = (meal.recipe.times_cooked or 0) + 1
            meal.recipe.last_cooked_at = cooked_on or date.today()

        self.meals.update(meal)
        logger.info("Marked planned meal %s as cooked", planned_meal_id)
        return meal
