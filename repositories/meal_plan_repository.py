"""
Meal Plan Repository - Data access layer for meal plan operations
"""

from typing import List
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import MealPlan


class MealPlanRepository(BaseRepository[MealPlan]):
    """Repository for meal plan data access"""

    def __init__(self, db: Session):
        super().__init__(db, MealPlan)

    def get_all(self) -> List[MealPlan]:
        """Get all meal plans ordered by ID"""
        return self.db.query(MealPlan).order_by(MealPlan.meal_plan_id).all()
