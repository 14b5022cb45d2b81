"""
Add-meal dialog workflow: pick an empty calendar cell, then either search
saved recipes and choose one, or type a custom meal.
"""

from __future__ import annotations

import enum
import logging
from datetime import date
from typing import Awaitable, Callable, List, Optional
from uuid import UUID

from pydantic import ValidationError

from adapters.meal_plan_gateway import MealPlanGateway
from app.config import settings
from app.exceptions import GatewayError, WorkflowStateError
from domain.enums import MealType
from domain.schemas.meal_plan_schemas import (
    CustomMealSource,
    MealPlanDraft,
    MealPlanEntry,
    MealSource,
    RecipeSource,
)
from domain.schemas.recipe_schemas import RecipeSearchResult
from planner.week_window import MONTH_ABBR

logger = logging.getLogger("mealboard.planner.workflow")

Refresh = Callable[[], Awaitable[None]]


class WorkflowState(str, enum.Enum):
    CLOSED = "closed"
    OPEN = "open"
    SEARCHING = "searching"
    RESULTS_SHOWN = "results_shown"
    SUBMITTING = "submitting"


class AddMealWorkflow:
    """
    State machine behind the add-meal dialog.

    CLOSED -> OPEN(date, meal_type) -> SEARCHING -> RESULTS_SHOWN -> SUBMITTING -> CLOSED

    Failures never raise out of search/submit: they are logged, stored in
    `error` for display, and the dialog stays open. Each open or close starts
    a new session; a search or create still in flight from an earlier session
    leaves the current dialog untouched.
    """

    def __init__(
        self,
        gateway: MealPlanGateway,
        refresh: Refresh,
        servings: int = settings.default_servings,
        min_query_length: int = settings.recipe_search_min_length,
        search_limit: int = settings.recipe_search_limit,
    ):
        self.gateway = gateway
        self.refresh = refresh
        self.servings = servings
        self.min_query_length = min_query_length
        self.search_limit = search_limit

        self.state = WorkflowState.CLOSED
        self.target_date: Optional[date] = None
        self.target_meal_type: Optional[MealType] = None
        self.query = ""
        self.results: List[RecipeSearchResult] = []
        self.custom_meal = ""
        self.searching = False
        self.submitting = False
        self.error: Optional[str] = None
        # Bumped on every open/close; requests started in an older session are discarded
        self._session = 0

    # ---------- state ----------

    @property
    def is_open(self) -> bool:
        return self.state is not WorkflowState.CLOSED

    @property
    def can_search(self) -> bool:
        return self.is_open and not self.searching and len(self.query) >= self.min_query_length

    @property
    def can_submit_custom(self) -> bool:
        return self.is_open and not self.submitting and bool(self.custom_meal.strip())

    @property
    def title(self) -> str:
        if not self.is_open:
            return ""
        day = self.target_date
        return f"Add {self.target_meal_type.label} - {day.strftime('%A')} {day.day} {MONTH_ABBR[day.month - 1]}"

    def _require_open(self, action: str) -> None:
        if not self.is_open:
            raise WorkflowStateError(f"Cannot {action}: the add-meal dialog is closed")

    def open(self, target_date: date, meal_type: MealType) -> None:
        self._session += 1
        self.target_date = target_date
        self.target_meal_type = MealType(meal_type)
        self.query = ""
        self.results = []
        self.custom_meal = ""
        self.searching = False
        self.error = None
        self.state = WorkflowState.OPEN

    def close(self) -> None:
        # `submitting` stays set until the pending create settles
        self._session += 1
        self.state = WorkflowState.CLOSED
        self.searching = False

    def set_query(self, query: str) -> None:
        self._require_open("edit the search")
        self.query = query

    def set_custom_meal(self, text: str) -> None:
        self._require_open("edit the custom meal")
        self.custom_meal = text

    # ---------- search ----------

    async def search(self) -> List[RecipeSearchResult]:
        """Run a recipe search for the current query (button or Enter)."""
        self._require_open("search")
        if not self.can_search:
            return self.results

        session = self._session
        query = self.query
        self.searching = True
        self.state = WorkflowState.SEARCHING
        self.error = None
        try:
            results = await self.gateway.search_recipes(query, limit=self.search_limit)
            error = None
        except GatewayError as exc:
            logger.error("Recipe search failed for %r: %s", query, exc)
            results = []
            error = f"Search failed: {exc}"
        finally:
            if session == self._session:
                self.searching = False

        if session != self._session:
            logger.debug("Dropping results for %r from a closed dialog", query)
            return []

        self.results = results
        self.error = error
        if self.state is WorkflowState.SEARCHING:
            self.state = WorkflowState.RESULTS_SHOWN
        return self.results

    # ---------- submit ----------

    async def choose_recipe(self, recipe_id: UUID) -> Optional[MealPlanEntry]:
        self._require_open("add a recipe")
        return await self._submit(RecipeSource(recipe_id=recipe_id))

    async def submit_custom(self) -> Optional[MealPlanEntry]:
        self._require_open("add a custom meal")
        if not self.custom_meal.strip():
            return None
        try:
            source = CustomMealSource(text=self.custom_meal)
        except ValidationError as exc:
            self.error = exc.errors()[0]["msg"]
            return None
        return await self._submit(source)

    async def _submit(self, source: MealSource) -> Optional[MealPlanEntry]:
        if self.submitting:
            logger.debug("Ignoring add-meal submit while another is in flight")
            return None

        session = self._session
        previous_state = self.state
        self.submitting = True
        self.state = WorkflowState.SUBMITTING
        self.error = None
        draft = MealPlanDraft(
            plan_date=self.target_date,
            meal_type=self.target_meal_type,
            source=source,
            servings=self.servings,
        )
        try:
            entry = await self.gateway.create(draft)
            await self.refresh()
        except GatewayError as exc:
            logger.error(
                "Failed to add %s on %s: %s", draft.meal_type.value, draft.plan_date, exc
            )
            if session == self._session:
                self.error = f"Could not add meal: {exc}"
                self.state = previous_state
            return None
        finally:
            self.submitting = False

        if session == self._session:
            self.close()
        return entry
