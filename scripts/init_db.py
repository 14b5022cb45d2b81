#!/usr/bin/env python3
"""
Initialize the MealBoard database.
Creates the tables and optionally seeds a few sample recipes for a user:

    python scripts/init_db.py
    python scripts/init_db.py --seed-user 2f6c1a0e-5d1b-4d7e-9d6e-0c8f3b2a1e47
"""

import sys
import argparse
import logging
import uuid
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import inspect  # noqa: E402

from domain.models import SessionLocal, engine, init_database  # noqa: E402
from domain.schemas.recipe_schemas import RecipeCreate  # noqa: E402
from repositories.recipe_repository import RecipeRepository  # noqa: E402
from services.recipe_service import RecipeService  # noqa: E402

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("init_db")

SAMPLE_RECIPES = [
    {
        "title": "Overnight Oats",
        "servings": 1,
        "ingredients": [
            {"name": "Rolled oats", "amount": "1/2", "unit": "cup", "category": "pantry"},
            {"name": "Milk", "amount": "1/2", "unit": "cup", "category": "dairy"},
            {"name": "Blueberries", "amount": "1 handful", "category": "produce"},
        ],
    },
    {
        "title": "Chicken Caesar Salad",
        "servings": 2,
        "ingredients": [
            {"name": "Chicken breast", "amount": "2", "category": "meat"},
            {"name": "Romaine lettuce", "amount": "1", "unit": "head", "category": "produce"},
            {"name": "Parmesan", "amount": "50", "unit": "g", "category": "dairy"},
            {"name": "Croutons", "amount": "1 1/2", "unit": "cups", "category": "bakery"},
        ],
    },
    {
        "title": "Spaghetti Bolognese",
        "servings": 4,
        "ingredients": [
            {"name": "Spaghetti", "amount": "400", "unit": "g", "category": "pantry"},
            {"name": "Ground beef", "amount": "500", "unit": "g", "category": "meat"},
            {"name": "Crushed tomatoes", "amount": "1", "unit": "can", "category": "pantry"},
            {"name": "Onion", "amount": "1", "category": "produce"},
            {"name": "Garlic", "amount": "2-3", "unit": "cloves", "category": "produce"},
        ],
    },
]


def seed_recipes(user_id: uuid.UUID) -> int:
    """Create the sample recipes the user does not have yet"""
    db = SessionLocal()
    try:
        existing = {r.title for r in RecipeRepository(db).search(user_id, limit=1000)}
        created = 0
        for data in SAMPLE_RECIPES:
            if data["title"] in existing:
                logger.info(f"Recipe already present: {data['title']}")
                continue
            RecipeService.create_recipe(db, user_id, RecipeCreate(**data))
            created += 1
        return created
    finally:
        db.close()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Initialize the MealBoard database")
    parser.add_argument("--seed-user", type=uuid.UUID, help="Seed sample recipes for this user id")
    args = parser.parse_args(argv)

    try:
        init_database()
        tables = inspect(engine).get_table_names()
        logger.info(f"✓ Created {len(tables)} tables: {', '.join(tables)}")
    except Exception as e:
        logger.error(f"✗ Failed to initialize database: {e}")
        return 1

    if args.seed_user:
        created = seed_recipes(args.seed_user)
        logger.info(f"✓ Seeded {created} sample recipes for user {args.seed_user}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
