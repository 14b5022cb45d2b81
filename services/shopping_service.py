"""Shopping list service"""

import logging
import re
from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError, ServiceValidationError
from domain.models import ShoppingListItem
from repositories.meal_plan_repository import PlannedMealRepository
from repositories.shopping_repository import ShoppingListItemRepository

logger = logging.getLogger("mealboard.shopping")

_NUMBER = r"\d+(?:\.\d+)?"
_MIXED_RE = re.compile(r"^(\d+)\s+(\d+)/(\d+)\s*(.*)$")
_FRACTION_RE = re.compile(r"^(\d+)/(\d+)\s*(.*)$")
_RANGE_RE = re.compile(rf"^({_NUMBER})\s*-\s*({_NUMBER})\s*(.*)$")
_LEADING_NUMBER_RE = re.compile(rf"^({_NUMBER})\s*(.*)$")


def format_amount(value: float) -> str:
    """Format a quantity without trailing zeros, at most two decimals."""
    if value == int(value):
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _with_suffix(number: str, suffix: str) -> str:
    return f"{number} {suffix}" if suffix else number


def scale_amount(amount: Optional[str], multiplier: float) -> Optional[str]:
    """
    Multiply a free-form ingredient amount by a serving multiplier.

    Handles plain numbers ("2", "1.5"), a number followed by text ("2 cups"),
    fractions ("1/2"), mixed fractions ("1 1/2") and ranges ("2-3"). Anything
    else is returned with the multiplier appended, e.g. "a pinch (x1.5)".
    """
    if multiplier == 1.0 or not amount or not amount.strip():
        return amount

    amount = amount.strip()

    match = _MIXED_RE.match(amount)
    if match:
        whole, num, den, suffix = match.groups()
        if int(den) > 0:
            value = (int(whole) + int(num) / int(den)) * multiplier
            return _with_suffix(format_amount(value), suffix)

    match = _FRACTION_RE.match(amount)
    if match:
        num, den, suffix = match.groups()
        if int(den) > 0:
            return _with_suffix(format_amount(int(num) / int(den) * multiplier), suffix)

    match = _RANGE_RE.match(amount)
    if match:
        low, high, suffix = match.groups()
        scaled = f"{format_amount(float(low) * multiplier)}-{format_amount(float(high) * multiplier)}"
        return _with_suffix(scaled, suffix)

    match = _LEADING_NUMBER_RE.match(amount)
    if match:
        number, suffix = match.groups()
        return _with_suffix(format_amount(float(number) * multiplier), suffix)

    return f"{amount} (x{multiplier:.1f})"


class ShoppingService:
    """Business logic for the shopping list."""

    @staticmethod
    def generate_from_range(
        db: Session, user_id: UUID, start_date: date, end_date: date
    ) -> List[ShoppingListItem]:
        """
        Add the ingredients of every planned meal in a date range to the
        user's shopping list.

        Only uncooked meals that reference a recipe contribute. Amounts are
        scaled by planned servings / recipe servings.

        Returns:
            The shopping list items that were created
        """
        if end_date < start_date:
            raise ServiceValidationError("end_date must not be before start_date")

        meals = PlannedMealRepository(db).get_uncooked_with_recipes(user_id, start_date, end_date)
        logger.info(
            "Generating shopping list for user %s from %d planned meals (%s..%s)",
            user_id, len(meals), start_date, end_date,
        )

        items: List[ShoppingListItem] = []
        for meal in meals:
            recipe = meal.recipe
            multiplier = 1.0
            if meal.servings and recipe.servings:
                multiplier = meal.servings / recipe.servings

            for ingredient in recipe.ingredients or []:
                name = (ingredient.get("name") or "").strip()
                if not name:
                    continue
                items.append(
                    ShoppingListItem(
                        user_id=user_id,
                        ingredient_name=name,
                        amount=scale_amount(ingredient.get("amount"), multiplier),
                        unit=ingredient.get("unit") or None,
                        category=ingredient.get("category"),
                        recipe_id=recipe.recipe_id,
                        planned_meal_id=meal.planned_meal_id,
                        is_checked=False,
                        sort_order=len(items),
                    )
                )

        if items:
            ShoppingListItemRepository(db).bulk_create(items)

        logger.info("Added %d items to shopping list of user %s", len(items), user_id)
        return items

    @staticmethod
    def get_list(db: Session, user_id: UUID) -> List[ShoppingListItem]:
        return ShoppingListItemRepository(db).get_by_user_id(user_id)

    @staticmethod
    def toggle_item(db: Session, user_id: UUID, list_item_id: UUID) -> ShoppingListItem:
        """Flip the checked state of one of the user's items."""
        repo = ShoppingListItemRepository(db)
        item = repo.get_by_id(list_item_id)
        if item is None or item.user_id != user_id:
            raise NotFoundError(f"Shopping list item {list_item_id} not found")

        item.is_checked = not item.is_checked
        return repo.update(item)

    @staticmethod
    def clear_checked(db: Session, user_id: UUID) -> int:
        removed = ShoppingListItemRepository(db).delete_checked(user_id)
        logger.info("Cleared %d checked shopping items for user %s", removed, user_id)
        return removed
