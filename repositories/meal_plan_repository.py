"""
Meal Plan Repository - Data access layer for planned meal operations
"""

from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, case
from sqlalchemy.orm import Session, joinedload

from repositories.base import BaseRepository
from domain.enums import MEAL_TYPES
from domain.models import PlannedMeal

# breakfast, lunch, dinner, snack
_MEAL_TYPE_ORDER = case(
    {meal_type.value: index for index, meal_type in enumerate(MEAL_TYPES)},
    value=PlannedMeal.meal_type,
    else_=len(MEAL_TYPES),
)


class PlannedMealRepository(BaseRepository[PlannedMeal]):
    """Repository for planned meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, PlannedMeal)

    def get_by_id(self, planned_meal_id: UUID) -> Optional[PlannedMeal]:
        """Get planned meal by ID"""
        return (
            self.db.query(PlannedMeal)
            .options(joinedload(PlannedMeal.recipe))
            .filter(PlannedMeal.planned_meal_id == planned_meal_id)
            .first()
        )

    def get_by_date_range(
        self, user_id: UUID, start_date: date, end_date: date
    ) -> List[PlannedMeal]:
        """Get a user's planned meals between two dates (inclusive), in calendar order"""
        return (
            self.db.query(PlannedMeal)
            .options(joinedload(PlannedMeal.recipe))
            .filter(
                and_(
                    PlannedMeal.user_id == user_id,
                    PlannedMeal.plan_date >= start_date,
                    PlannedMeal.plan_date <= end_date,
                )
            )
            .order_by(PlannedMeal.plan_date.asc(), _MEAL_TYPE_ORDER)
            .all()
        )

    def get_by_cell(
        self, user_id: UUID, plan_date: date, meal_type: str
    ) -> Optional[PlannedMeal]:
        """Get the planned meal occupying a (date, meal type) cell"""
        return (
            self.db.query(PlannedMeal)
            .filter(
                PlannedMeal.user_id == user_id,
                PlannedMeal.plan_date == plan_date,
                PlannedMeal.meal_type == meal_type,
            )
            .first()
        )

    def get_uncooked_with_recipes(
        self, user_id: UUID, start_date: date, end_date: date
    ) -> List[PlannedMeal]:
        """Get uncooked, recipe-backed planned meals in a date range"""
        return (
            self.db.query(PlannedMeal)
            .options(joinedload(PlannedMeal.recipe))
            .filter(
                PlannedMeal.user_id == user_id,
                PlannedMeal.plan_date >= start_date,
                PlannedMeal.plan_date <= end_date,
                PlannedMeal.is_cooked.is_(False),
                PlannedMeal.recipe_id.isnot(None),
            )
            .order_by(PlannedMeal.plan_date.asc(), _MEAL_TYPE_ORDER)
            .all()
        )

