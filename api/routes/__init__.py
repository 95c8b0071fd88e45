"""API routes package"""

from . import health, meal_plans, recipes, ingredients

__all__ = ["health", "meal_plans", "recipes", "ingredients"]
