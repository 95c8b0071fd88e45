"""
Meal plan model.

Every model carries a ``version_id`` counter, so an UPDATE or DELETE that
matches no row (changed or removed by another session) raises StaleDataError.
"""

from sqlalchemy import Column, Integer, Text, Date
from sqlalchemy.orm import relationship

from domain.models.database import Base


class MealPlan(Base):
    """A named, dated grouping of recipes"""

    __tablename__ = "meal_plan"

    meal_plan_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    date = Column(Date, nullable=False)
    version_id = Column(Integer, nullable=False)

    recipes = relationship(
        "Recipe",
        back_populates="meal_plan",
        cascade="all, delete-orphan",
        order_by="Recipe.recipe_id",
    )

    __mapper_args__ = {"version_id_col": version_id}

    def __repr__(self):
        return f"<MealPlan(id={self.meal_plan_id}, name='{self.name}', date={self.date})>"
