"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    build_engine,
    enable_sqlite_foreign_keys,
    init_database,
    get_db_session,
)
from domain.models.meal_plan import MealPlan
from domain.models.recipe import Recipe, RecipeIngredient
from domain.models.ingredient import Ingredient

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "build_engine",
    "enable_sqlite_foreign_keys",
    "init_database",
    "get_db_session",
    # Meal plan models
    "MealPlan",
    # Recipe models
    "Recipe",
    "RecipeIngredient",
    # Ingredient models
    "Ingredient",
]
