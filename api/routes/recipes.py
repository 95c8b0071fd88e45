"""Recipe routes, including the recipe/ingredient link endpoints"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from api.dependencies import get_recipe_service
from api.responses import created_response, no_content_response, raise_for_envelope
from app.config import settings
from app.exceptions import NotFoundError, ServiceValidationError
from domain.schemas import (
    LinkIngredientRequest,
    RecipeCreate,
    RecipeIngredientResponse,
    RecipeResponse,
    RecipeUpdate,
)
from services import RecipeService

router = APIRouter(prefix="/recipes", tags=["Recipes"])
logger = logging.getLogger("mealplanner.api.recipes")


@router.get("", response_model=List[RecipeResponse])
def list_recipes(service: RecipeService = Depends(get_recipe_service)):
    """Return all recipes with the name of their meal plan."""
    return service.list()


@router.get("/{recipe_id}", response_model=RecipeResponse)
def find_recipe(recipe_id: int, service: RecipeService = Depends(get_recipe_service)):
    recipe = service.find(recipe_id)
    if recipe is None:
        raise NotFoundError(f"Recipe {recipe_id} not found")
    return recipe


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
def add_recipe(body: RecipeCreate, service: RecipeService = Depends(get_recipe_service)):
    """Create a recipe under an existing meal plan (404 if the plan is missing)."""
    result = raise_for_envelope(service.add(body))
    recipe = service.find(result.created_id)
    return created_response(recipe, f"{settings.api_prefix}/recipes/{result.created_id}")


@router.put("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def update_recipe(
    recipe_id: int, body: RecipeUpdate, service: RecipeService = Depends(get_recipe_service)
):
    if body.recipe_id != recipe_id:
        raise ServiceValidationError("ID in the URL does not match the Recipe ID in the body.")
    raise_for_envelope(service.update(body))
    return no_content_response()


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_recipe(recipe_id: int, service: RecipeService = Depends(get_recipe_service)):
    raise_for_envelope(service.delete(recipe_id))
    return no_content_response()


@router.get("/{recipe_id}/ingredients", response_model=List[RecipeIngredientResponse])
def list_ingredients_for_recipe(recipe_id: int, service: RecipeService = Depends(get_recipe_service)):
    """
    Ingredients of a recipe, each with the quantity and unit of its link.

    404 when the recipe does not exist; 200 with an empty list when it has
    no ingredients.
    """
    ingredients = service.list_ingredients_for_recipe(recipe_id)
    if ingredients is None:
        raise NotFoundError(f"Recipe {recipe_id} not found")
    return ingredients


@router.post(
    "/{recipe_id}/ingredients",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def link_ingredient(
    recipe_id: int,
    body: LinkIngredientRequest,
    service: RecipeService = Depends(get_recipe_service),
):
    """Link an ingredient to a recipe (409 if already linked)."""
    raise_for_envelope(service.link(recipe_id, body.ingredient_id, body.quantity, body.unit))
    return no_content_response()


@router.delete(
    "/{recipe_id}/ingredients/{ingredient_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def unlink_ingredient(
    recipe_id: int, ingredient_id: int, service: RecipeService = Depends(get_recipe_service)
):
    raise_for_envelope(service.unlink(recipe_id, ingredient_id))
    return no_content_response()
