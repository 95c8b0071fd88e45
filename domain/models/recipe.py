"""
Recipe and recipe/ingredient association models.
"""

from sqlalchemy import Column, Integer, Text, Numeric, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from domain.models.database import Base


class Recipe(Base):
    """A dish that belongs to exactly one meal plan"""

    __tablename__ = "recipe"

    recipe_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    cuisine = Column(Text)
    meal_plan_id = Column(
        Integer,
        ForeignKey("meal_plan.meal_plan_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    version_id = Column(Integer, nullable=False)

    meal_plan = relationship("MealPlan", back_populates="recipes")
    ingredient_links = relationship(
        "RecipeIngredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
    )

    __mapper_args__ = {"version_id_col": version_id}

    def __repr__(self):
        return f"<Recipe(id={self.recipe_id}, name='{self.name}', meal_plan_id={self.meal_plan_id})>"


class RecipeIngredient(Base):
    """Join table linking recipes to ingredients with quantity and unit.

    ``unit`` is independent of ``Ingredient.unit`` so a recipe can say
    "2 cups" of an ingredient whose base unit is grams.
    """

    __tablename__ = "recipe_ingredient"

    recipe_ingredient_id = Column(Integer, primary_key=True, autoincrement=True)
    recipe_id = Column(
        Integer,
        ForeignKey("recipe.recipe_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    ingredient_id = Column(
        Integer,
        ForeignKey("ingredient.ingredient_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    quantity = Column(Numeric(12, 3), nullable=False)
    unit = Column(Text)
    version_id = Column(Integer, nullable=False)

    recipe = relationship("Recipe", back_populates="ingredient_links")
    ingredient = relationship("Ingredient", back_populates="recipe_links")

    __table_args__ = (
        UniqueConstraint("recipe_id", "ingredient_id", name="uq_recipe_ingredient_pair"),
    )
    __mapper_args__ = {"version_id_col": version_id}

    def __repr__(self):
        return (
            f"<RecipeIngredient(recipe_id={self.recipe_id}, "
            f"ingredient_id={self.ingredient_id}, quantity={self.quantity} {self.unit})>"
        )
