"""Pydantic schemas for recipes."""

from pydantic import BaseModel, Field
from typing import List, Optional
from uuid import UUID
from datetime import date, datetime


class RecipeIngredient(BaseModel):
    """Embedded ingredient in a recipe."""

    name: str = Field(..., min_length=1)
    amount: str = ""
    unit: str = ""
    category: Optional[str] = None


class RecipeCreate(BaseModel):
    """Request body for POST /recipes."""

    title: str = Field(..., min_length=1, max_length=255)
    image_url: Optional[str] = None
    servings: Optional[int] = Field(default=None, ge=1)
    ingredients: List[RecipeIngredient] = []


class RecipeResponse(BaseModel):
    id: UUID
    title: str
    image_url: Optional[str] = None
    servings: Optional[int] = None
    ingredients: List[RecipeIngredient] = []
    times_cooked: int = 0
    last_cooked_at: Optional[date] = None
    created_at: Optional[datetime] = None


class RecipeSearchResult(BaseModel):
    """Read-only search hit used by the add-meal dialog."""

    id: UUID
    title: str
    image_url: Optional[str] = None


class RecipesResponse(BaseModel):
    recipes: List[RecipeSearchResult] = []
