"""Pydantic schemas for ingredients and their recipe links."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class IngredientCreate(BaseModel):
    name: str = Field(..., min_length=1)
    unit: Optional[str] = None
    calories_per_unit: int


class IngredientUpdate(IngredientCreate):
    ingredient_id: int


class IngredientResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    ingredient_id: int
    name: str
    unit: Optional[str] = None
    calories_per_unit: int


class LinkIngredientRequest(BaseModel):
    """Body of a link request. Quantity has no lower bound."""

    ingredient_id: int
    quantity: Decimal
    unit: Optional[str] = None


class RecipeIngredientResponse(BaseModel):
    """An ingredient as used by one recipe.

    ``unit`` and ``quantity`` come from the link, not from the ingredient.
    """

    ingredient_id: int
    name: str
    calories_per_unit: int
    quantity: Decimal
    unit: Optional[str] = None
