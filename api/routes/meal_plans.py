"""Meal plan calendar routes"""

from datetime import date
from typing import Optional
from uuid import UUID
import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from api.dependencies import get_user_id
from domain.mappers import MealPlanMapper
from domain.models import get_db_session
from domain.schemas.meal_plan_schemas import (
    GenerateShoppingListRequest,
    MealPlanCreate,
    MealPlanEntry,
    MealPlansResponse,
    MessageResponse,
    ShoppingListResult,
)
from services.meal_plan_service import MealPlanService
from services.shopping_service import ShoppingService

router = APIRouter(prefix="/meal-plans", tags=["Meal Plans"])
logger = logging.getLogger("mealboard.api.meal_plans")


@router.get("", response_model=MealPlansResponse)
def list_meal_plans(
    start_date: Optional[date] = Query(default=None, description="First day (defaults to this Monday)"),
    end_date: Optional[date] = Query(default=None, description="Last day (defaults to start + 6 days)"),
    user_id: UUID = Depends(get_user_id),
    db: Session = Depends(get_db_session),
):
    """List a user's planned meals in a date range, ordered by date then meal type."""
    service = MealPlanService(db)
    start, end = service.resolve_range(start_date, end_date)
    meals = service.list_range(user_id, start, end)
    return MealPlansResponse(
        meal_plans=[MealPlanMapper.to_entry(m) for m in meals],
        start_date=start,
        end_date=end,
    )


@router.post("", response_model=MealPlanEntry, status_code=status.HTTP_201_CREATED)
def create_meal_plan(
    body: MealPlanCreate,
    user_id: UUID = Depends(get_user_id),
    db: Session = Depends(get_db_session),
):
    """Plan a meal in a calendar cell; an existing meal in that cell is replaced."""
    meal = MealPlanService(db).create_or_replace(user_id, body)
    return MealPlanMapper.to_entry(meal)


@router.post("/generate-list", response_model=ShoppingListResult)
def generate_shopping_list(
    body: GenerateShoppingListRequest,
    user_id: UUID = Depends(get_user_id),
    db: Session = Depends(get_db_session),
):
    """Add the ingredients of the range's uncooked recipe meals to the shopping list."""
    items = ShoppingService.generate_from_range(db, user_id, body.start_date, body.end_date)
    return ShoppingListResult(
        items_added=len(items),
        message=f"Added {len(items)} items to shopping list",
    )


@router.delete("/{planned_meal_id}", response_model=MessageResponse)
def delete_meal_plan(
    planned_meal_id: UUID,
    user_id: UUID = Depends(get_user_id),
    db: Session = Depends(get_db_session),
):
    MealPlanService(db).delete(user_id, planned_meal_id)
    return MessageResponse(message="Meal plan deleted")


@router.post("/{planned_meal_id}/cook", response_model=MessageResponse)
def mark_cooked(
    planned_meal_id: UUID,
    user_id: UUID = Depends(get_user_id),
    db: Session = Depends(get_db_session),
):
    """Mark a planned meal as cooked and bump its recipe's cook counter."""
    MealPlanService(db).mark_cooked(user_id, planned_meal_id)
    return MessageResponse(message="Meal marked as cooked")
