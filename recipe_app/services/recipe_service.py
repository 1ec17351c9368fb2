"""Recipe service, the single entry point for the recipe lifecycle."""

import logging

from sqlalchemy.orm import Session

from recipe_app.exceptions import NotFoundException, ValidationException
from recipe_app.models.category import Category
from recipe_app.models.recipe import Recipe
from recipe_app.models.unit_of_measure import UnitOfMeasure
from recipe_app.repositories.recipe import (
    IngredientRepository,
    NotesRepository,
    RecipeRepository,
)
from recipe_app.repositories.reference import CategoryRepository, UnitOfMeasureRepository
from recipe_app.schemas.recipe import RecipeCommand
from recipe_app.services.base import transaction
from recipe_app.services.converters import apply_recipe_command, recipe_to_command
from recipe_app.services.ingredient_service import resolve_unit_of_measure

logger = logging.getLogger(__name__)


class RecipeService:
    """Service for recipe operations."""

    def __init__(self, db: Session):
        self.db = db
        self.recipe_repository = RecipeRepository(db)
        self.notes_repository = NotesRepository(db)
        self.ingredient_repository = IngredientRepository(db)
        self.category_repository = CategoryRepository(db)
        self.uom_repository = UnitOfMeasureRepository(db)

    def get_recipes(self) -> set[Recipe]:
        """Return every recipe, unique by identity and in no particular order."""
        logger.debug("Loading all recipes")
        return set(self.recipe_repository.find_all())

    def find_by_id(self, recipe_id: int) -> Recipe:
        recipe = self.recipe_repository.find_by_id(recipe_id)
        if recipe is None:
            raise NotFoundException(f"Recipe not found. For ID value: {recipe_id}")
        return recipe

    def find_command_by_id(self, recipe_id: int) -> RecipeCommand:
        return recipe_to_command(self.find_by_id(recipe_id))

    def save_recipe_command(self, command: RecipeCommand) -> RecipeCommand:
        """
        Insert the recipe when ``command.id`` is unset, otherwise update it.

        Notes, ingredients and categories are written in the same transaction.
        Saving the same command twice updates the one row.
        """
        with transaction(self.db):
            categories = self._resolve_categories(command)
            uoms = self._resolve_ingredient_uoms(command)

            recipe = Recipe() if command.id is None else self.find_by_id(command.id)
            self._check_ingredient_ids(recipe, command)
            apply_recipe_command(recipe, command, categories, uoms)
            self.recipe_repository.save(recipe)

        logger.info(f"Saved recipe {recipe.id}")
        return recipe_to_command(recipe)

    def delete_by_id(self, recipe_id: int) -> None:
        """Delete a recipe with its notes and ingredients; categories are kept."""
        with transaction(self.db):
            recipe = self.find_by_id(recipe_id)

            for ingredient in list(recipe.ingredients):
                recipe.ingredients.remove(ingredient)
                self.ingredient_repository.delete(ingredient)

            notes = recipe.notes
            if notes is not None:
                recipe.notes = None
                self.notes_repository.delete(notes)

            recipe.categories = []
            self.recipe_repository.delete(recipe)

        logger.info(f"Deleted recipe {recipe_id}")

    def _resolve_categories(self, command: RecipeCommand) -> list[Category]:
        categories = []
        for category_command in command.categories:
            category = self.category_repository.find_by_id(category_command.id)
            if category is None:
                raise ValidationException(f"Unknown category: {category_command.id}")
            if category not in categories:
                categories.append(category)
        return categories

    def _check_ingredient_ids(self, recipe: Recipe, command: RecipeCommand) -> None:
        """Ingredient ids in the command must be unique and owned by ``recipe``."""
        owned = {ingredient.id for ingredient in recipe.ingredients}
        seen: set[int] = set()
        for ingredient in command.ingredients:
            if ingredient.id is None:
                continue
            if ingredient.id in seen:
                raise ValidationException(f"Duplicate ingredient: {ingredient.id}")
            seen.add(ingredient.id)
            if ingredient.id not in owned:
                raise NotFoundException(f"Ingredient not found. For ID value: {ingredient.id}")

    def _resolve_ingredient_uoms(self, command: RecipeCommand) -> list[UnitOfMeasure]:
        return [
            resolve_unit_of_measure(self.uom_repository, ingredient)
            for ingredient in command.ingredients
        ]
