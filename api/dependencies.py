"""
API dependencies for dependency injection.

Each request gets its own session, and each service is built around that
session; nothing is shared through module-level state.
"""

from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session

from domain.models import get_db_session
from services import IngredientService, MealPlanService, RecipeService


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_meal_plan_service(db: Session = Depends(get_db)) -> MealPlanService:
    return MealPlanService(db)


def get_recipe_service(db: Session = Depends(get_db)) -> RecipeService:
    return RecipeService(db)


def get_ingredient_service(db: Session = Depends(get_db)) -> IngredientService:
    return IngredientService(db)
