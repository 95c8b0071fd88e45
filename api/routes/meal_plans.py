"""Meal plan routes"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from api.dependencies import get_meal_plan_service, get_recipe_service
from api.responses import created_response, no_content_response, raise_for_envelope
from app.config import settings
from app.exceptions import NotFoundError, ServiceValidationError
from domain.schemas import MealPlanCreate, MealPlanResponse, MealPlanUpdate, RecipeResponse
from services import MealPlanService, RecipeService

router = APIRouter(prefix="/meal-plans", tags=["Meal Plans"])
logger = logging.getLogger("mealplanner.api.meal_plans")


@router.get("", response_model=List[MealPlanResponse])
def list_meal_plans(service: MealPlanService = Depends(get_meal_plan_service)):
    """Return all meal plans."""
    return service.list()


@router.get("/{meal_plan_id}", response_model=MealPlanResponse)
def find_meal_plan(meal_plan_id: int, service: MealPlanService = Depends(get_meal_plan_service)):
    meal_plan = service.find(meal_plan_id)
    if meal_plan is None:
        raise NotFoundError(f"Meal plan {meal_plan_id} not found")
    return meal_plan


@router.post("", response_model=MealPlanResponse, status_code=status.HTTP_201_CREATED)
def add_meal_plan(body: MealPlanCreate, service: MealPlanService = Depends(get_meal_plan_service)):
    """Create a meal plan and return it with a Location header."""
    result = raise_for_envelope(service.add(body))
    meal_plan = service.find(result.created_id)
    return created_response(meal_plan, f"{settings.api_prefix}/meal-plans/{result.created_id}")


@router.put("/{meal_plan_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def update_meal_plan(
    meal_plan_id: int,
    body: MealPlanUpdate,
    service: MealPlanService = Depends(get_meal_plan_service),
):
    if body.meal_plan_id != meal_plan_id:
        raise ServiceValidationError("ID in the URL does not match the Meal Plan ID in the body.")
    raise_for_envelope(service.update(body))
    return no_content_response()


@router.delete("/{meal_plan_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_meal_plan(meal_plan_id: int, service: MealPlanService = Depends(get_meal_plan_service)):
    """Delete a meal plan together with all of its recipes."""
    raise_for_envelope(service.delete(meal_plan_id))
    return no_content_response()


@router.get("/{meal_plan_id}/recipes", response_model=List[RecipeResponse])
def list_recipes_for_meal_plan(
    meal_plan_id: int, service: RecipeService = Depends(get_recipe_service)
):
    """
    Recipes of one meal plan.

    404 when the meal plan does not exist; 200 with an empty list when it
    has no recipes.
    """
    recipes = service.list_for_meal_plan(meal_plan_id)
    if recipes is None:
        raise NotFoundError(f"Meal plan {meal_plan_id} not found")
    logger.info("Found %d recipes for meal plan %s", len(recipes), meal_plan_id)
    return recipes
