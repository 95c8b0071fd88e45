"""Ingredient routes"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from api.dependencies import get_ingredient_service
from api.responses import created_response, no_content_response, raise_for_envelope
from app.config import settings
from app.exceptions import NotFoundError, ServiceValidationError
from domain.schemas import IngredientCreate, IngredientResponse, IngredientUpdate, RecipeResponse
from services import IngredientService

router = APIRouter(prefix="/ingredients", tags=["Ingredients"])
logger = logging.getLogger("mealplanner.api.ingredients")


@router.get("", response_model=List[IngredientResponse])
def list_ingredients(service: IngredientService = Depends(get_ingredient_service)):
    return service.list()


@router.get("/{ingredient_id}", response_model=IngredientResponse)
def find_ingredient(ingredient_id: int, service: IngredientService = Depends(get_ingredient_service)):
    ingredient = service.find(ingredient_id)
    if ingredient is None:
        raise NotFoundError(f"Ingredient {ingredient_id} not found")
    return ingredient


@router.post("", response_model=IngredientResponse, status_code=status.HTTP_201_CREATED)
def add_ingredient(body: IngredientCreate, service: IngredientService = Depends(get_ingredient_service)):
    result = raise_for_envelope(service.add(body))
    ingredient = service.find(result.created_id)
    return created_response(ingredient, f"{settings.api_prefix}/ingredients/{result.created_id}")


@router.put("/{ingredient_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def update_ingredient(
    ingredient_id: int,
    body: IngredientUpdate,
    service: IngredientService = Depends(get_ingredient_service),
):
    if body.ingredient_id != ingredient_id:
        raise ServiceValidationError("ID in the URL does not match the Ingredient ID in the body.")
    raise_for_envelope(service.update(body))
    return no_content_response()


@router.delete("/{ingredient_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_ingredient(ingredient_id: int, service: IngredientService = Depends(get_ingredient_service)):
    """Delete an ingredient and unlink it from every recipe."""
    raise_for_envelope(service.delete(ingredient_id))
    return no_content_response()


@router.get("/{ingredient_id}/recipes", response_model=List[RecipeResponse])
def list_recipes_for_ingredient(
    ingredient_id: int, service: IngredientService = Depends(get_ingredient_service)
):
    recipes = service.list_recipes_for_ingredient(ingredient_id)
    if recipes is None:
        raise NotFoundError(f"Ingredient {ingredient_id} not found")
    return recipes
