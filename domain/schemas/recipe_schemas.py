"""Pydantic schemas for recipes."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RecipeCreate(BaseModel):
    name: str = Field(..., min_length=1)
    cuisine: Optional[str] = None
    meal_plan_id: int


class RecipeUpdate(RecipeCreate):
    recipe_id: int


class RecipeResponse(BaseModel):
    """Recipe joined with the name of its meal plan."""

    model_config = ConfigDict(from_attributes=True)

    recipe_id: int
    name: str
    cuisine: Optional[str] = None
    meal_plan_id: int
    meal_plan_name: Optional[str] = None
