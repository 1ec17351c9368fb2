"""SQLAlchemy models."""

from recipe_app.models.category import Category, recipe_category
from recipe_app.models.enums import Difficulty
from recipe_app.models.ingredient import Ingredient
from recipe_app.models.recipe import Notes, Recipe
from recipe_app.models.unit_of_measure import UnitOfMeasure

__all__ = [
    "Recipe",
    "Notes",
    "Ingredient",
    "Category",
    "UnitOfMeasure",
    "Difficulty",
    "recipe_category",
]
