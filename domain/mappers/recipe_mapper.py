"""
Recipe domain mappers.
Handles transformation between ORM models and DTOs for recipes and their ingredient links.
"""

from domain.models import Recipe, RecipeIngredient
from domain.schemas.recipe_schemas import RecipeResponse
from domain.schemas.ingredient_schemas import RecipeIngredientResponse


class RecipeMapper:
    """Mapper for recipe-related transformations."""

    @staticmethod
    def to_response(recipe: Recipe) -> RecipeResponse:
        """
        Convert a Recipe ORM model to RecipeResponse DTO.

        The meal plan name is read from ``recipe.meal_plan``, which callers
        must have eager-loaded; it is never stored on the recipe itself.

        Args:
            recipe: Recipe ORM instance with ``meal_plan`` loaded

        Returns:
            RecipeResponse DTO
        """
        return RecipeResponse(
            recipe_id=recipe.recipe_id,
            name=recipe.name,
            cuisine=recipe.cuisine,
            meal_plan_id=recipe.meal_plan_id,
            meal_plan_name=recipe.meal_plan.name if recipe.meal_plan else None,
        )

    @staticmethod
    def to_ingredient_usage(link: RecipeIngredient) -> RecipeIngredientResponse:
        """
        Project a recipe/ingredient link onto its ingredient.

        Name and calories come from the ingredient; quantity and unit come
        from the link, so a recipe's "cups" wins over the ingredient's "grams".
        """
        ingredient = link.ingredient
        return RecipeIngredientResponse(
            ingredient_id=ingredient.ingredient_id,
            name=ingredient.name,
            calories_per_unit=ingredient.calories_per_unit,
            quantity=link.quantity,
            unit=link.unit,
        )
