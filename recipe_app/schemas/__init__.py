"""Pydantic command objects exchanged between controllers and services."""

from recipe_app.schemas.category import CategoryCommand
from recipe_app.schemas.ingredient import IngredientCommand
from recipe_app.schemas.recipe import NotesCommand, RecipeCommand
from recipe_app.schemas.unit_of_measure import UnitOfMeasureCommand

__all__ = [
    "CategoryCommand",
    "IngredientCommand",
    "NotesCommand",
    "RecipeCommand",
    "UnitOfMeasureCommand",
]
