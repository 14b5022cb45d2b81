"""HTTP adapter for the meal-plan REST API, used by the planner core.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, List, Optional, Protocol
from uuid import UUID

import httpx
from pydantic import ValidationError

from app.config import Settings, settings as default_settings
from app.exceptions import (
    GatewayValidationError,
    NetworkError,
    ServerError,
)
from domain.schemas.meal_plan_schemas import (
    MealPlanDraft,
    MealPlanEntry,
    MealPlansResponse,
    ShoppingListResult,
)
from domain.schemas.recipe_schemas import RecipeSearchResult, RecipesResponse

logger = logging.getLogger("mealboard.gateway")


class MealPlanGateway(Protocol):
    """Data access the planner needs; every call may raise a GatewayError."""

    async def fetch_range(self, start: date, end: date) -> List[MealPlanEntry]:
        ...

    async def create(self, draft: MealPlanDraft) -> MealPlanEntry:
        ...

    async def delete(self, entry_id: UUID) -> None:
        ...

    async def mark_cooked(self, entry_id: UUID) -> None:
        ...

    async def generate_shopping_list(self, start: date, end: date) -> ShoppingListResult:
        ...

    async def search_recipes(self, query: str, limit: int = 10) -> List[RecipeSearchResult]:
        ...


def _error_message(body: Any, fallback: str) -> str:
    # API error envelope: {"success": false, "error": {"code", "message", ...}}
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if body.get("detail"):
            return str(body["detail"])
    return fallback


class HttpMealPlanGateway:
    """
    MealPlanGateway over REST/JSON.

    The httpx client is injected so callers control base URL, timeouts and
    transport (tests hand in an ASGI transport bound to the FastAPI app).
    Every request carries the current user's id.
    """

    def __init__(self, client: httpx.AsyncClient, user_id: UUID):
        self.client = client
        self.user_id = user_id

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        params = dict(kwargs.pop("params", None) or {})
        params["user_id"] = str(self.user_id)

        try:
            response = await self.client.request(method, path, params=params, **kwargs)
        except httpx.RequestError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise NetworkError(f"Could not reach the meal plan API: {exc}") from exc

        if response.status_code >= 400:
            raise self._error_for(method, path, response)
        return response

    @staticmethod
    def _error_for(method: str, path: str, response: httpx.Response) -> Exception:
        try:
            body = response.json()
        except ValueError:
            body = None

        message = _error_message(body, response.reason_phrase or "Request failed")
        details = body if isinstance(body, dict) else None
        logger.warning("%s %s returned %d: %s", method, path, response.status_code, message)

        if response.status_code in (400, 422):
            return GatewayValidationError(message, response.status_code, details)
        return ServerError(message, response.status_code, details)

    @staticmethod
    def _parse(model, response: httpx.Response):
        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise ServerError(
                f"Malformed response from meal plan API: {exc}", response.status_code
            ) from exc

    async def fetch_range(self, start: date, end: date) -> List[MealPlanEntry]:
        response = await self._request(
            "GET",
            "/meal-plans",
            params={"start_date": start.isoformat(), "end_date": end.isoformat()},
        )
        return self._parse(MealPlansResponse, response).meal_plans

    async def create(self, draft: MealPlanDraft) -> MealPlanEntry:
        response = await self._request("POST", "/meal-plans", json=draft.to_payload())
        return self._parse(MealPlanEntry, response)

    async def delete(self, entry_id: UUID) -> None:
        await self._request("DELETE", f"/meal-plans/{entry_id}")

    async def mark_cooked(self, entry_id: UUID) -> None:
        await self._request("POST", f"/meal-plans/{entry_id}/cook")

    async def generate_shopping_list(self, start: date, end: date) -> ShoppingListResult:
        response = await self._request(
            "POST",
            "/meal-plans/generate-list",
            json={"start_date": start.isoformat(), "end_date": end.isoformat()},
        )
        return self._parse(ShoppingListResult, response)

    async def search_recipes(self, query: str, limit: int = 10) -> List[RecipeSearchResult]:
        response = await self._request(
            "GET", "/recipes", params={"search": query, "limit": limit}
        )
        return self._parse(RecipesResponse, response).recipes

    async def aclose(self) -> None:
        await self.client.aclose()


def create_gateway(user_id: UUID, settings: Optional[Settings] = None) -> HttpMealPlanGateway:
    """Build an HttpMealPlanGateway from configuration."""
    settings = settings or default_settings
    client = httpx.AsyncClient(
        base_url=settings.gateway_base_url.rstrip("/") + settings.api_prefix,
        timeout=settings.gateway_timeout_sec,
    )
    return HttpMealPlanGateway(client, user_id)
