"""
Recipe Repository - Data access layer for recipes and their ingredient links.

Every read that needs the meal plan name or ingredient details joins it in
explicitly with ``joinedload``; nothing relies on lazy loading.
"""

from typing import List, Optional
from sqlalchemy.orm import Session, joinedload

from repositories.base import BaseRepository
from domain.models import Recipe, RecipeIngredient


class RecipeRepository(BaseRepository[Recipe]):
    """Repository for recipe data access"""

    def __init__(self, db: Session):
        super().__init__(db, Recipe)

    def get_with_meal_plan(self, recipe_id: int) -> Optional[Recipe]:
        """Get recipe by ID joined with its meal plan"""
        return (
            self.db.query(Recipe)
            .options(joinedload(Recipe.meal_plan))
            .filter(Recipe.recipe_id == recipe_id)
            .first()
        )

    def get_all_with_meal_plan(self) -> List[Recipe]:
        """Get all recipes joined with their meal plans"""
        return (
            self.db.query(Recipe)
            .options(joinedload(Recipe.meal_plan))
            .order_by(Recipe.recipe_id)
            .all()
        )

    def get_by_meal_plan_id(self, meal_plan_id: int) -> List[Recipe]:
        """Get all recipes belonging to a meal plan"""
        return (
            self.db.query(Recipe)
            .options(joinedload(Recipe.meal_plan))
            .filter(Recipe.meal_plan_id == meal_plan_id)
            .order_by(Recipe.recipe_id)
            .all()
        )

    def get_by_ingredient_id(self, ingredient_id: int) -> List[Recipe]:
        """Get all recipes that use an ingredient"""
        return (
            self.db.query(Recipe)
            .join(RecipeIngredient, RecipeIngredient.recipe_id == Recipe.recipe_id)
            .options(joinedload(Recipe.meal_plan))
            .filter(RecipeIngredient.ingredient_id == ingredient_id)
            .order_by(Recipe.recipe_id)
            .all()
        )


class RecipeIngredientRepository(BaseRepository[RecipeIngredient]):
    """Repository for recipe/ingredient association records"""

    def __init__(self, db: Session):
        super().__init__(db, RecipeIngredient)

    def get_by_pair(self, recipe_id: int, ingredient_id: int) -> Optional[RecipeIngredient]:
        """Get the link between a recipe and an ingredient, if any"""
        return (
            self.db.query(RecipeIngredient)
            .filter(
                RecipeIngredient.recipe_id == recipe_id,
                RecipeIngredient.ingredient_id == ingredient_id,
            )
            .first()
        )

    def pair_exists(self, recipe_id: int, ingredient_id: int) -> bool:
        return self.get_by_pair(recipe_id, ingredient_id) is not None

    def get_by_recipe_id(self, recipe_id: int) -> List[RecipeIngredient]:
        """Get all links of a recipe joined with their ingredients"""
        return (
            self.db.query(RecipeIngredient)
            .options(joinedload(RecipeIngredient.ingredient))
            .filter(RecipeIngredient.recipe_id == recipe_id)
            .order_by(RecipeIngredient.recipe_ingredient_id)
            .all()
        )
