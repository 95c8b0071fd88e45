"""
Ingredient Repository - Data access layer for the ingredient master table
"""

from typing import List
from sqlalchemy.orm import Session

from domain.models import Ingredient
from repositories.base import BaseRepository


class IngredientRepository(BaseRepository[Ingredient]):
    """Repository for ingredient master data"""

    def __init__(self, db: Session):
        super().__init__(db, Ingredient)

    def get_all(self) -> List[Ingredient]:
        """Get all ingredients ordered by ID"""
        return self.db.query(Ingredient).order_by(Ingredient.ingredient_id).all()
