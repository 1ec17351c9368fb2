"""Ingredient service for editing the ingredients of a recipe."""

import logging

from sqlalchemy.orm import Session

from recipe_app.exceptions import NotFoundException, ValidationException
from recipe_app.models.ingredient import Ingredient
from recipe_app.models.recipe import Recipe
from recipe_app.models.unit_of_measure import UnitOfMeasure
from recipe_app.repositories.recipe import IngredientRepository, RecipeRepository
from recipe_app.repositories.reference import UnitOfMeasureRepository
from recipe_app.schemas.ingredient import IngredientCommand
from recipe_app.services.base import transaction
from recipe_app.services.converters import apply_ingredient_command, ingredient_to_command

logger = logging.getLogger(__name__)


def resolve_unit_of_measure(
    uom_repository: UnitOfMeasureRepository, command: IngredientCommand
) -> UnitOfMeasure:
    """Check an ingredient is complete and load its unit of measure."""
    if command.amount is None:
        raise ValidationException("Ingredient amount is required")
    if command.amount <= 0:
        raise ValidationException("Ingredient amount must be greater than zero")
    if command.uom is None or command.uom.id is None:
        raise ValidationException("Ingredient unit of measure is required")

    uom = uom_repository.find_by_id(command.uom.id)
    if uom is None:
        raise ValidationException(f"Unknown unit of measure: {command.uom.id}")
    return uom


class IngredientService:
    """Service for ingredient operations, always scoped to the owning recipe."""

    def __init__(self, db: Session):
        self.db = db
        self.recipe_repository = RecipeRepository(db)
        self.ingredient_repository = IngredientRepository(db)
        self.uom_repository = UnitOfMeasureRepository(db)

    def find_by_recipe_id_and_ingredient_id(
        self, recipe_id: int, ingredient_id: int
    ) -> IngredientCommand:
        recipe = self._get_recipe(recipe_id)
        return ingredient_to_command(self._get_ingredient(recipe, ingredient_id))

    def save_ingredient_command(self, command: IngredientCommand) -> IngredientCommand:
        """Update the ingredient with ``command.id`` or add a new one to the recipe."""
        with transaction(self.db):
            recipe = self._get_recipe(command.recipe_id)
            uom = resolve_unit_of_measure(self.uom_repository, command)

            if command.id is not None:
                ingredient = self._get_ingredient(recipe, command.id)
            else:
                ingredient = Ingredient()
                recipe.add_ingredient(ingredient)

            apply_ingredient_command(ingredient, command, uom)
            self.ingredient_repository.save(ingredient)

        logger.info(f"Saved ingredient {ingredient.id} for recipe {recipe.id}")
        return ingredient_to_command(ingredient)

    def delete_by_id(self, recipe_id: int, ingredient_id: int) -> None:
        with transaction(self.db):
            recipe = self._get_recipe(recipe_id)
            ingredient = self._get_ingredient(recipe, ingredient_id)
            recipe.ingredients.remove(ingredient)
            self.ingredient_repository.delete(ingredient)

        logger.info(f"Deleted ingredient {ingredient_id} from recipe {recipe_id}")

    def _get_recipe(self, recipe_id: int | None) -> Recipe:
        recipe = self.recipe_repository.find_by_id(recipe_id)
        if recipe is None:
            raise NotFoundException(f"Recipe not found. For ID value: {recipe_id}")
        return recipe

    def _get_ingredient(self, recipe: Recipe, ingredient_id: int) -> Ingredient:
        for ingredient in recipe.ingredients:
            if ingredient.id == ingredient_id:
                return ingredient
        raise NotFoundException(f"Ingredient not found. For ID value: {ingredient_id}")
