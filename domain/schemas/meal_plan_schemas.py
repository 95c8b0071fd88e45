"""Pydantic schemas for meal plans."""

import datetime

from pydantic import BaseModel, ConfigDict, Field


class MealPlanCreate(BaseModel):
    name: str = Field(..., min_length=1)
    date: datetime.date


class MealPlanUpdate(MealPlanCreate):
    meal_plan_id: int


class MealPlanResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    meal_plan_id: int
    name: str
    date: datetime.date
