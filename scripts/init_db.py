#!/usr/bin/env python3
"""
Initialize the MealPlanner database.
Creates all tables and optionally seeds a small sample data set.

Usage:
    python scripts/init_db.py           # create tables
    python scripts/init_db.py --seed    # create tables and insert sample data
"""

import argparse
import sys
import logging
from datetime import date
from decimal import Decimal
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from domain.enums import ServiceStatus
from domain.schemas import IngredientCreate, MealPlanCreate, RecipeCreate

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("init_db")

SAMPLE_MEAL_PLANS = [
    {"name": "Weight Loss Plan", "date": date(2025, 2, 1)},
    {"name": "High Protein Plan", "date": date(2025, 2, 8)},
]

# (recipe name, cuisine, meal plan name)
SAMPLE_RECIPES = [
    ("Avocado Salad", "Mexican", "Weight Loss Plan"),
    ("Quinoa Bowl", "American", "Weight Loss Plan"),
    ("Protein Smoothie", "Mixed", "High Protein Plan"),
]

SAMPLE_INGREDIENTS = [
    {"name": "Avocado", "unit": "grams", "calories_per_unit": 2},
    {"name": "Quinoa", "unit": "grams", "calories_per_unit": 4},
    {"name": "Greek Yogurt", "unit": "grams", "calories_per_unit": 1},
    {"name": "Whey Protein", "unit": "scoop", "calories_per_unit": 120},
]

# (recipe name, ingredient name, quantity, unit)
SAMPLE_LINKS = [
    ("Avocado Salad", "Avocado", Decimal("200"), "grams"),
    ("Quinoa Bowl", "Quinoa", Decimal("1.5"), "cups"),
    ("Quinoa Bowl", "Avocado", Decimal("0.5"), "pieces"),
    ("Protein Smoothie", "Greek Yogurt", Decimal("1"), "cups"),
    ("Protein Smoothie", "Whey Protein", Decimal("2"), "scoop"),
]


def seed_sample_data(db: Session) -> dict:
    """
    Insert the sample data set through the services so every invariant applies.

    Returns:
        Mapping of entity kind to number of records created
    """
    from services import IngredientService, MealPlanService, RecipeService

    meal_plan_service = MealPlanService(db)
    recipe_service = RecipeService(db)
    ingredient_service = IngredientService(db)

    plan_ids = {}
    for plan in SAMPLE_MEAL_PLANS:
        result = meal_plan_service.add(MealPlanCreate(**plan))
        plan_ids[plan["name"]] = result.created_id

    recipe_ids = {}
    for name, cuisine, plan_name in SAMPLE_RECIPES:
        result = recipe_service.add(
            RecipeCreate(name=name, cuisine=cuisine, meal_plan_id=plan_ids[plan_name])
        )
        recipe_ids[name] = result.created_id

    ingredient_ids = {}
    for ingredient in SAMPLE_INGREDIENTS:
        result = ingredient_service.add(IngredientCreate(**ingredient))
        ingredient_ids[ingredient["name"]] = result.created_id

    links = 0
    for recipe_name, ingredient_name, quantity, unit in SAMPLE_LINKS:
        result = recipe_service.link(
            recipe_ids[recipe_name], ingredient_ids[ingredient_name], quantity, unit
        )
        if result.status == ServiceStatus.SUCCESS:
            links += 1

    return {
        "meal_plans": len(plan_ids),
        "recipes": len(recipe_ids),
        "ingredients": len(ingredient_ids),
        "links": links,
    }


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Initialize the MealPlanner database")
    parser.add_argument("--seed", action="store_true", help="Insert sample data")
    args = parser.parse_args(argv)

    from domain.models.database import SessionLocal, engine, init_database

    logger.info("=" * 60)
    logger.info("MealPlanner Database Initialization")
    logger.info("=" * 60)

    init_database()
    tables = inspect(engine).get_table_names()
    logger.info(f"Created {len(tables)} tables: {', '.join(tables)}")

    if args.seed:
        db = SessionLocal()
        try:
            counts = seed_sample_data(db)
        finally:
            db.close()
        logger.info(f"Seeded sample data: {counts}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
