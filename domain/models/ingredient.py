"""
Ingredient model - master ingredient table.
Recipes reference ingredients through RecipeIngredient.
"""

from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import relationship

from domain.models.database import Base


class Ingredient(Base):
    """Reusable ingredient with a calorie-per-unit rate."""

    __tablename__ = "ingredient"

    ingredient_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, index=True)
    unit = Column(Text)
    calories_per_unit = Column(Integer, nullable=False)
    version_id = Column(Integer, nullable=False)

    recipe_links = relationship(
        "RecipeIngredient",
        back_populates="ingredient",
        cascade="all, delete-orphan",
    )

    __mapper_args__ = {"version_id_col": version_id}

    def __repr__(self):
        return f"<Ingredient(id={self.ingredient_id}, name='{self.name}')>"
