"""
Calendar cell actions: remove a planned meal, mark it cooked, and turn the
week's planned recipes into shopping list items.
"""

from __future__ import annotations

import inspect
import logging
from datetime import date
from typing import Awaitable, Callable, Optional, Union

from adapters.meal_plan_gateway import MealPlanGateway
from app.exceptions import GatewayError
from domain.schemas.meal_plan_schemas import MealPlanEntry
from planner.week_window import week_end

logger = logging.getLogger("mealboard.planner.actions")

DELETE_PROMPT = "Remove this meal from the plan?"

Refresh = Callable[[], Awaitable[None]]
Confirm = Callable[[str], Union[bool, Awaitable[bool]]]
Notify = Callable[[str], Union[None, Awaitable[None]]]


async def _maybe_await(value):
    if inspect.isawaitable(value):
        return await value
    return value


def shopping_list_message(items_added: int) -> str:
    return f"Added {items_added} items to your shopping list!"


class MutationActions:
    """
    Mutations triggered from the calendar grid.

    After every gateway call the whole week is re-fetched through `refresh`;
    nothing is patched locally.
    """

    def __init__(
        self,
        gateway: MealPlanGateway,
        refresh: Refresh,
        confirm: Confirm,
        notify: Notify,
    ):
        self.gateway = gateway
        self.refresh = refresh
        self.confirm = confirm
        self.notify = notify

        self.deleting = False
        self.marking = False
        self.generating = False
        self.error: Optional[str] = None

    async def delete(self, entry: MealPlanEntry) -> bool:
        """Remove a planned meal after confirmation. Returns False when declined or busy."""
        if self.deleting:
            return False
        if not await _maybe_await(self.confirm(DELETE_PROMPT)):
            return False

        self.deleting = True
        self.error = None
        try:
            await self.gateway.delete(entry.id)
            logger.info("Removed %s on %s", entry.meal_type.value, entry.plan_date)
        except GatewayError as exc:
            logger.error("Failed to delete meal %s: %s", entry.id, exc)
            self.error = f"Could not remove meal: {exc}"
        finally:
            self.deleting = False

        await self.refresh()
        return True

    @staticmethod
    def can_mark_cooked(entry: MealPlanEntry) -> bool:
        return not entry.is_cooked

    async def mark_cooked(self, entry: MealPlanEntry) -> bool:
        """Mark a planned meal as cooked. No-op for meals already cooked."""
        if self.marking or not self.can_mark_cooked(entry):
            return False

        self.marking = True
        self.error = None
        try:
            await self.gateway.mark_cooked(entry.id)
        except GatewayError as exc:
            logger.error("Failed to mark meal %s as cooked: %s", entry.id, exc)
            self.error = f"Could not mark meal as cooked: {exc}"
        finally:
            self.marking = False

        await self.refresh()
        return True

    async def generate_shopping_list(self, week_start: date) -> Optional[int]:
        """Add the week's planned recipe ingredients to the shopping list."""
        if self.generating:
            return None

        self.generating = True
        self.error = None
        try:
            result = await self.gateway.generate_shopping_list(week_start, week_end(week_start))
        except GatewayError as exc:
            logger.error("Failed to generate shopping list for week of %s: %s", week_start, exc)
            self.error = f"Could not generate shopping list: {exc}"
            return None
        finally:
            self.generating = False

        await _maybe_await(self.notify(shopping_list_message(result.items_added)))
        return result.items_added
