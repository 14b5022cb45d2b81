"""Pydantic schemas for meal plan entries, shared by the REST API and the planner core."""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, List, Literal, Optional, Union
from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from domain.enums import MealType


class RecipeRef(BaseModel):
    """Recipe summary joined onto a planned meal."""

    id: UUID
    title: str
    image_url: Optional[str] = None


class RecipeSource(BaseModel):
    """The meal is one of the user's saved recipes."""

    kind: Literal["recipe"] = "recipe"
    recipe_id: UUID


class CustomMealSource(BaseModel):
    """The meal is free text ("Leftovers", "Eating out", ...)."""

    kind: Literal["custom"] = "custom"
    text: str = Field(..., max_length=255)

    @field_validator("text")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Custom meal text must not be empty")
        return v


MealSource = Annotated[Union[RecipeSource, CustomMealSource], Field(discriminator="kind")]


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class MealPlanCreate(BaseModel):
    """Request body for POST /meal-plans."""

    plan_date: date
    meal_type: MealType
    recipe_id: Optional[UUID] = None
    custom_meal: Optional[str] = Field(default=None, max_length=255)
    servings: int = Field(default=0, ge=0, le=100)
    notes: Optional[str] = None

    @model_validator(mode="after")
    def exactly_one_source(self) -> "MealPlanCreate":
        self.custom_meal = _blank_to_none(self.custom_meal)
        if (self.recipe_id is None) == (self.custom_meal is None):
            raise ValueError("Exactly one of recipe_id or custom_meal must be provided")
        return self

    @property
    def source(self) -> MealSource:
        if self.recipe_id is not None:
            return RecipeSource(recipe_id=self.recipe_id)
        return CustomMealSource(text=self.custom_meal)


class MealPlanDraft(BaseModel):
    """A meal the planner is about to add to a calendar cell."""

    plan_date: date
    meal_type: MealType
    source: MealSource
    servings: int = Field(default=2, ge=1)
    notes: Optional[str] = None

    def to_payload(self) -> dict:
        payload = {
            "plan_date": self.plan_date.isoformat(),
            "meal_type": self.meal_type.value,
            "servings": self.servings,
        }
        if isinstance(self.source, RecipeSource):
            payload["recipe_id"] = str(self.source.recipe_id)
        else:
            payload["custom_meal"] = self.source.text
        if self.notes:
            payload["notes"] = self.notes
        return payload


class MealPlanEntry(BaseModel):
    """A planned meal as returned by the API."""

    id: UUID
    user_id: Optional[UUID] = None
    plan_date: date
    meal_type: MealType
    recipe_id: Optional[UUID] = None
    recipe: Optional[RecipeRef] = None
    custom_meal: Optional[str] = None
    servings: int = 1
    notes: Optional[str] = None
    is_cooked: bool = False
    created_at: Optional[datetime] = None

    @model_validator(mode="after")
    def exactly_one_source(self) -> "MealPlanEntry":
        if self.recipe is not None and self.recipe_id is None:
            self.recipe_id = self.recipe.id
        self.custom_meal = _blank_to_none(self.custom_meal)
        if (self.recipe_id is None) == (self.custom_meal is None):
            raise ValueError("A planned meal needs exactly one of a recipe or a custom meal")
        return self

    @property
    def source(self) -> MealSource:
        if self.recipe_id is not None:
            return RecipeSource(recipe_id=self.recipe_id)
        return CustomMealSource(text=self.custom_meal)

    @property
    def title(self) -> str:
        if self.recipe is not None:
            return self.recipe.title
        return self.custom_meal or ""


class MealPlansResponse(BaseModel):
    """Response body for GET /meal-plans."""

    meal_plans: List[MealPlanEntry] = []
    start_date: date
    end_date: date


class GenerateShoppingListRequest(BaseModel):
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def ordered_range(self) -> "GenerateShoppingListRequest":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class ShoppingListResult(BaseModel):
    items_added: int = Field(..., ge=0)
    message: Optional[str] = None


class MessageResponse(BaseModel):
    message: str
