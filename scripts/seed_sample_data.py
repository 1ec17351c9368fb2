#!/usr/bin/env python3
"""Seed reference data and the sample recipes.

Usage:
    # From project root:
    DATABASE_URL=sqlite:///./recipes.db python scripts/seed_sample_data.py

    # Wipe existing recipes first:
    python scripts/seed_sample_data.py --reset
"""

import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from recipe_app.bootstrap import bootstrap
from recipe_app.database import Base, SessionLocal, engine
from recipe_app.repositories.recipe import RecipeRepository
from recipe_app.services.recipe_service import RecipeService


def seed_sample_data(reset: bool = False) -> None:
    """Seed the configured database."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()

    try:
        if reset:
            service = RecipeService(session)
            recipe_ids = [recipe.id for recipe in RecipeRepository(session).find_all()]
            for recipe_id in recipe_ids:
                service.delete_by_id(recipe_id)
            print(f"Deleted {len(recipe_ids)} recipes")

        bootstrap(session)
        count = RecipeRepository(session).count()
        print(f"Database holds {count} recipes")
    finally:
        session.close()


if __name__ == "__main__":
    seed_sample_data(reset="--reset" in sys.argv[1:])
