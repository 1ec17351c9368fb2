"""Recipe aggregate repositories."""

from recipe_app.models.ingredient import Ingredient
from recipe_app.models.recipe import Notes, Recipe
from recipe_app.repositories.base import SqlAlchemyRepository


class RecipeRepository(SqlAlchemyRepository[Recipe]):
    model = Recipe


class NotesRepository(SqlAlchemyRepository[Notes]):
    model = Notes


class IngredientRepository(SqlAlchemyRepository[Ingredient]):
    model = Ingredient
