"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.service_response import ServiceResponse
from domain.schemas.meal_plan_schemas import (
    MealPlanCreate,
    MealPlanUpdate,
    MealPlanResponse,
)
from domain.schemas.recipe_schemas import (
    RecipeCreate,
    RecipeUpdate,
    RecipeResponse,
)
from domain.schemas.ingredient_schemas import (
    IngredientCreate,
    IngredientUpdate,
    IngredientResponse,
    LinkIngredientRequest,
    RecipeIngredientResponse,
)

__all__ = [
    "ServiceResponse",
    "MealPlanCreate",
    "MealPlanUpdate",
    "MealPlanResponse",
    "RecipeCreate",
    "RecipeUpdate",
    "RecipeResponse",
    "IngredientCreate",
    "IngredientUpdate",
    "IngredientResponse",
    "LinkIngredientRequest",
    "RecipeIngredientResponse",
]
