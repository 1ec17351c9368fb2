"""Data-access objects, one per entity."""

from recipe_app.repositories.base import SqlAlchemyRepository
from recipe_app.repositories.recipe import (
    IngredientRepository,
    NotesRepository,
    RecipeRepository,
)
from recipe_app.repositories.reference import CategoryRepository, UnitOfMeasureRepository

__all__ = [
    "SqlAlchemyRepository",
    "RecipeRepository",
    "NotesRepository",
    "IngredientRepository",
    "CategoryRepository",
    "UnitOfMeasureRepository",
]
