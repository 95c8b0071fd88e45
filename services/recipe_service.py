"""
Recipe service - recipes, their meal plan reference and their ingredient links.

Invariants kept here:
- a recipe always references an existing meal plan (checked on add and update)
- at most one link per (recipe, ingredient) pair
- every check runs before any mutation, inside the same transaction as the write,
  and the checked parent rows are read FOR UPDATE
- a foreign key failure from a parent deleted after its check is reported as NotFound
"""

from typing import List, Optional
from decimal import Decimal

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from domain.mappers import RecipeMapper
from domain.models import Recipe, RecipeIngredient
from domain.schemas import (
    RecipeCreate,
    RecipeUpdate,
    RecipeResponse,
    RecipeIngredientResponse,
    ServiceResponse,
)
from repositories import (
    IngredientRepository,
    MealPlanRepository,
    RecipeIngredientRepository,
    RecipeRepository,
)
from services.base import BaseService


class RecipeService(BaseService[RecipeRepository]):
    """Business logic for recipes and recipe/ingredient links."""

    def __init__(self, db: Session):
        super().__init__(db, RecipeRepository(db), "mealplanner.recipe")
        self.meal_plans = MealPlanRepository(db)
        self.ingredients = IngredientRepository(db)
        self.links = RecipeIngredientRepository(db)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list(self) -> List[RecipeResponse]:
        """All recipes, each with the name of its meal plan."""
        return [RecipeMapper.to_response(r) for r in self.repository.get_all_with_meal_plan()]

    def find(self, recipe_id: int) -> Optional[RecipeResponse]:
        recipe = self.repository.get_with_meal_plan(recipe_id)
        if recipe is None:
            return None
        return RecipeMapper.to_response(recipe)

    def list_for_meal_plan(self, meal_plan_id: int) -> Optional[List[RecipeResponse]]:
        """
        Recipes belonging to a meal plan.

        Returns None when the meal plan does not exist and an empty list when
        it exists but has no recipes, so callers never have to guess which
        case an empty result means.
        """
        if not self.meal_plans.exists(meal_plan_id):
            return None
        return [RecipeMapper.to_response(r) for r in self.repository.get_by_meal_plan_id(meal_plan_id)]

    def list_ingredients_for_recipe(self, recipe_id: int) -> Optional[List[RecipeIngredientResponse]]:
        """
        Ingredients linked to a recipe, with the link's quantity and unit.

        Returns None when the recipe does not exist and an empty list when it
        has no ingredients.
        """
        if not self.repository.exists(recipe_id):
            return None
        return [RecipeMapper.to_ingredient_usage(link) for link in self.links.get_by_recipe_id(recipe_id)]

    # ------------------------------------------------------------------
    # Recipe mutations
    # ------------------------------------------------------------------

    def add(self, data: RecipeCreate) -> ServiceResponse:
        try:
            with self.transaction():
                meal_plan = self.meal_plans.get_for_update(data.meal_plan_id)
                if meal_plan is None:
                    self.log_warning("Recipe rejected: meal plan missing", meal_plan_id=data.meal_plan_id)
                    return ServiceResponse.not_found("Meal Plan not found.")

                recipe = self.repository.create(
                    Recipe(
                        name=data.name,
                        cuisine=data.cuisine,
                        meal_plan_id=meal_plan.meal_plan_id,
                        meal_plan=meal_plan,
                    )
                )
                created_id = recipe.recipe_id
        except IntegrityError:
            # Meal plan deleted between the lookup and the insert
            if not self.meal_plans.exists(data.meal_plan_id):
                self.log_warning("Recipe rejected: meal plan deleted", meal_plan_id=data.meal_plan_id)
                return ServiceResponse.not_found("Meal Plan not found.")
            raise

        self.log_info("Recipe created", recipe_id=created_id, meal_plan_id=data.meal_plan_id)
        return ServiceResponse.created(created_id)

    def update(self, data: RecipeUpdate) -> ServiceResponse:
        try:
            with self.transaction():
                recipe = self.repository.get_for_update(data.recipe_id)
                if recipe is None:
                    return ServiceResponse.not_found("Recipe not found.")

                meal_plan = self.meal_plans.get_for_update(data.meal_plan_id)
                if meal_plan is None:
                    self.log_warning(
                        "Recipe update rejected: meal plan missing",
                        recipe_id=data.recipe_id,
                        meal_plan_id=data.meal_plan_id,
                    )
                    return ServiceResponse.not_found("Associated Meal Plan not found.")

                recipe.name = data.name
                recipe.cuisine = data.cuisine
                recipe.meal_plan_id = meal_plan.meal_plan_id
                recipe.meal_plan = meal_plan
                self.repository.update(recipe)
        except StaleDataError:
            self.log_warning("Write conflict updating recipe", recipe_id=data.recipe_id)
            return ServiceResponse.error("An error occurred while updating the recipe.")
        except IntegrityError:
            if not self.meal_plans.exists(data.meal_plan_id):
                self.log_warning(
                    "Recipe update rejected: meal plan deleted",
                    recipe_id=data.recipe_id,
                    meal_plan_id=data.meal_plan_id,
                )
                return ServiceResponse.not_found("Associated Meal Plan not found.")
            raise

        self.log_info("Recipe updated", recipe_id=data.recipe_id)
        return ServiceResponse.updated()

    def delete(self, recipe_id: int) -> ServiceResponse:
        """Delete a recipe; its ingredient links go with it."""
        try:
            with self.transaction():
                recipe = self.repository.get_by_id(recipe_id)
                if recipe is None:
                    return ServiceResponse.not_found("Recipe not found. Cannot be deleted.")
                self.repository.delete(recipe)
        except StaleDataError:
            self.log_warning("Write conflict deleting recipe", recipe_id=recipe_id)
            return ServiceResponse.error("An error occurred while deleting the recipe.")

        self.log_info("Recipe deleted", recipe_id=recipe_id)
        return ServiceResponse.deleted()

    # ------------------------------------------------------------------
    # Ingredient links
    # ------------------------------------------------------------------

    def link(self, recipe_id: int, ingredient_id: int, quantity: Decimal, unit: Optional[str]) -> ServiceResponse:
        """
        Link an ingredient to a recipe with a quantity and a recipe-specific unit.

        NotFound names the missing side (recipe is checked first); a second
        link for the same pair is rejected as DUPLICATE. Quantity is taken as
        given, zero and negative values included.
        """
        try:
            with self.transaction():
                if self.repository.get_for_update(recipe_id) is None:
                    return ServiceResponse.not_found("Recipe not found.")
                if self.ingredients.get_for_update(ingredient_id) is None:
                    return ServiceResponse.not_found("Ingredient not found.")
                if self.links.pair_exists(recipe_id, ingredient_id):
                    self.log_warning("Duplicate link rejected", recipe_id=recipe_id, ingredient_id=ingredient_id)
                    return ServiceResponse.duplicate("This ingredient is already linked to the recipe.")

                self.links.create(
                    RecipeIngredient(
                        recipe_id=recipe_id,
                        ingredient_id=ingredient_id,
                        quantity=quantity,
                        unit=unit,
                    )
                )
        except IntegrityError:
            # A concurrent caller deleted a side or linked the same pair first
            if not self.repository.exists(recipe_id):
                return ServiceResponse.not_found("Recipe not found.")
            if not self.ingredients.exists(ingredient_id):
                return ServiceResponse.not_found("Ingredient not found.")
            if self.links.pair_exists(recipe_id, ingredient_id):
                self.log_warning("Duplicate link rejected", recipe_id=recipe_id, ingredient_id=ingredient_id)
                return ServiceResponse.duplicate("This ingredient is already linked to the recipe.")
            raise

        self.log_info("Ingredient linked", recipe_id=recipe_id, ingredient_id=ingredient_id)
        return ServiceResponse.success()

    def unlink(self, recipe_id: int, ingredient_id: int) -> ServiceResponse:
        try:
            with self.transaction():
                link = self.links.get_by_pair(recipe_id, ingredient_id)
                if link is None:
                    return ServiceResponse.not_found("Ingredient is not linked to this recipe.")
                self.links.delete(link)
        except StaleDataError:
            self.log_warning("Write conflict unlinking ingredient", recipe_id=recipe_id, ingredient_id=ingredient_id)
            return ServiceResponse.error("An error occurred while unlinking the ingredient.")

        self.log_info("Ingredient unlinked", recipe_id=recipe_id, ingredient_id=ingredient_id)
        return ServiceResponse.success()
