"""Meal plan service - CRUD over meal plans with status-coded results."""

from typing import List, Optional

from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from domain.models import MealPlan
from domain.schemas import MealPlanCreate, MealPlanUpdate, MealPlanResponse, ServiceResponse
from repositories import MealPlanRepository
from services.base import BaseService


class MealPlanService(BaseService[MealPlanRepository]):
    """Business logic for meal plans."""

    def __init__(self, db: Session):
        super().__init__(db, MealPlanRepository(db), "mealplanner.mealplan")

    def list(self) -> List[MealPlanResponse]:
        return [MealPlanResponse.model_validate(mp) for mp in self.repository.get_all()]

    def find(self, meal_plan_id: int) -> Optional[MealPlanResponse]:
        meal_plan = self.repository.get_by_id(meal_plan_id)
        if meal_plan is None:
            return None
        return MealPlanResponse.model_validate(meal_plan)

    def add(self, data: MealPlanCreate) -> ServiceResponse:
        with self.transaction():
            meal_plan = self.repository.create(MealPlan(name=data.name, date=data.date))
            created_id = meal_plan.meal_plan_id

        self.log_info("Meal plan created", meal_plan_id=created_id)
        return ServiceResponse.created(created_id)

    def update(self, data: MealPlanUpdate) -> ServiceResponse:
        try:
            with self.transaction():
                meal_plan = self.repository.get_by_id(data.meal_plan_id)
                if meal_plan is None:
                    return ServiceResponse.not_found("Meal Plan not found.")

                meal_plan.name = data.name
                meal_plan.date = data.date
                self.repository.update(meal_plan)
        except StaleDataError:
            self.log_warning("Write conflict updating meal plan", meal_plan_id=data.meal_plan_id)
            return ServiceResponse.error("An error occurred while updating the meal plan.")

        self.log_info("Meal plan updated", meal_plan_id=data.meal_plan_id)
        return ServiceResponse.updated()

    def delete(self, meal_plan_id: int) -> ServiceResponse:
        """Delete a meal plan; its recipes (and their links) go with it."""
        try:
            with self.transaction():
                meal_plan = self.repository.get_by_id(meal_plan_id)
                if meal_plan is None:
                    return ServiceResponse.not_found("Meal Plan not found. Cannot be deleted.")
                self.repository.delete(meal_plan)
        except StaleDataError:
            self.log_warning("Write conflict deleting meal plan", meal_plan_id=meal_plan_id)
            return ServiceResponse.error("An error occurred while deleting the meal plan.")

        self.log_info("Meal plan deleted", meal_plan_id=meal_plan_id)
        return ServiceResponse.deleted()
