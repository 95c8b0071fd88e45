"""Services package - Business logic layer"""

from services.base import BaseService
from services.meal_plan_service import MealPlanService
from services.recipe_service import RecipeService
from services.ingredient_service import IngredientService

__all__ = [
    "BaseService",
    "MealPlanService",
    "RecipeService",
    "IngredientService",
]
