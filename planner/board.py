"""
Meal plan board: the weekly calendar view state.

Owns the displayed week and the fetched planned meals, and wires the
add-meal workflow and cell actions to a full re-fetch of the week.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, List, Optional, Union

from adapters.meal_plan_gateway import MealPlanGateway
from app.config import settings
from app.exceptions import GatewayError
from domain.enums import MealType, WeekDirection
from domain.schemas.meal_plan_schemas import MealPlanEntry
from planner import calendar, week_window
from planner.actions import Confirm, MutationActions, Notify
from planner.workflow import AddMealWorkflow

logger = logging.getLogger("mealboard.planner.board")


class MealPlanBoard:
    """
    Weekly meal plan calendar.

    Every collaborator is passed in: the gateway (already bound to the
    current user), a clock, and the confirm/notify callbacks of the UI.
    """

    def __init__(
        self,
        gateway: MealPlanGateway,
        confirm: Confirm,
        notify: Notify,
        today: Callable[[], date] = date.today,
        servings: int = settings.default_servings,
    ):
        self.gateway = gateway
        self.today = today

        self.week_start: date = week_window.monday_of(today())
        self.entries: List[MealPlanEntry] = []
        self.loading = False
        self.error: Optional[str] = None
        self._request_token = 0

        self.workflow = AddMealWorkflow(gateway, refresh=self.load, servings=servings)
        self.actions = MutationActions(gateway, refresh=self.load, confirm=confirm, notify=notify)

    # ---------- loading ----------

    async def load(self) -> bool:
        """
        Re-fetch the displayed week and replace the entries wholesale.

        Returns False when the fetch failed or was superseded by a newer
        one; the previous entries stay visible in both cases.
        """
        self._request_token += 1
        token = self._request_token
        week_start = self.week_start
        start, end = week_start, week_window.week_end(week_start)

        self.loading = True
        try:
            entries = await self.gateway.fetch_range(start, end)
        except GatewayError as exc:
            if token == self._request_token:
                logger.error("Failed to load meal plans for %s..%s: %s", start, end, exc)
                self.error = f"Could not load meal plans: {exc}"
                self.loading = False
            return False

        if token != self._request_token:
            logger.debug("Discarding stale meal plans for week of %s", week_start)
            return False

        self.entries = list(entries)
        self.error = None
        self.loading = False
        return True

    # ---------- navigation ----------

    async def navigate(self, direction: Union[WeekDirection, str]) -> bool:
        self.week_start = week_window.shift(self.week_start, direction)
        return await self.load()

    async def go_to_this_week(self) -> bool:
        self.week_start = week_window.this_week(self.today())
        return await self.load()

    # ---------- derived view ----------

    @property
    def week_end(self) -> date:
        return week_window.week_end(self.week_start)

    @property
    def range_label(self) -> str:
        return week_window.range_label(self.week_start)

    def grid(self) -> calendar.WeekGrid:
        return calendar.build(self.week_start, self.entries, self.today())

    def open_cell(self, day: date, meal_type: MealType) -> bool:
        """Open the add-meal dialog for an empty cell; occupied cells are left alone."""
        if self.grid().cell(day, meal_type) is not None:
            return False
        self.workflow.open(day, meal_type)
        return True

    # ---------- actions ----------

    async def delete_meal(self, entry: MealPlanEntry) -> bool:
        return await self.actions.delete(entry)

    async def mark_cooked(self, entry: MealPlanEntry) -> bool:
        return await self.actions.mark_cooked(entry)

    async def generate_shopping_list(self) -> Optional[int]:
        return await self.actions.generate_shopping_list(self.week_start)
