"""Ingredient service - master ingredient data management."""

from typing import List, Optional

from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from domain.mappers import RecipeMapper
from domain.models import Ingredient
from domain.schemas import (
    IngredientCreate,
    IngredientUpdate,
    IngredientResponse,
    RecipeResponse,
    ServiceResponse,
)
from repositories import IngredientRepository, RecipeRepository
from services.base import BaseService


class IngredientService(BaseService[IngredientRepository]):
    """Business logic for ingredient master data management.

    Ingredients have no outbound references, so create and update need no
    cross-entity checks. Deleting an ingredient removes its recipe links.
    """

    def __init__(self, db: Session):
        super().__init__(db, IngredientRepository(db), "mealplanner.ingredient")
        self.recipes = RecipeRepository(db)

    def list(self) -> List[IngredientResponse]:
        return [IngredientResponse.model_validate(i) for i in self.repository.get_all()]

    def find(self, ingredient_id: int) -> Optional[IngredientResponse]:
        ingredient = self.repository.get_by_id(ingredient_id)
        if ingredient is None:
            return None
        return IngredientResponse.model_validate(ingredient)

    def add(self, data: IngredientCreate) -> ServiceResponse:
        with self.transaction():
            ingredient = self.repository.create(
                Ingredient(
                    name=data.name,
                    unit=data.unit,
                    calories_per_unit=data.calories_per_unit,
                )
            )
            created_id = ingredient.ingredient_id

        self.log_info("Ingredient created", ingredient_id=created_id, name=data.name)
        return ServiceResponse.created(created_id)

    def update(self, data: IngredientUpdate) -> ServiceResponse:
        try:
            with self.transaction():
                ingredient = self.repository.get_by_id(data.ingredient_id)
                if ingredient is None:
                    return ServiceResponse.not_found("Ingredient not found.")

                ingredient.name = data.name
                ingredient.unit = data.unit
                ingredient.calories_per_unit = data.calories_per_unit
                self.repository.update(ingredient)
        except StaleDataError:
            self.log_warning("Write conflict updating ingredient", ingredient_id=data.ingredient_id)
            return ServiceResponse.error("An error occurred while updating the ingredient.")

        self.log_info("Ingredient updated", ingredient_id=data.ingredient_id)
        return ServiceResponse.updated()

    def delete(self, ingredient_id: int) -> ServiceResponse:
        try:
            with self.transaction():
                ingredient = self.repository.get_by_id(ingredient_id)
                if ingredient is None:
                    return ServiceResponse.not_found("Ingredient not found. Cannot be deleted.")
                self.repository.delete(ingredient)
        except StaleDataError:
            self.log_warning("Write conflict deleting ingredient", ingredient_id=ingredient_id)
            return ServiceResponse.error("An error occurred while deleting the ingredient.")

        self.log_info("Ingredient deleted", ingredient_id=ingredient_id)
        return ServiceResponse.deleted()

    def list_recipes_for_ingredient(self, ingredient_id: int) -> Optional[List[RecipeResponse]]:
        """
        Recipes that use an ingredient.

        Returns None when the ingredient does not exist and an empty list
        when it exists but no recipe uses it.
        """
        if not self.repository.exists(ingredient_id):
            return None
        return [RecipeMapper.to_response(r) for r in self.recipes.get_by_ingredient_id(ingredient_id)]
