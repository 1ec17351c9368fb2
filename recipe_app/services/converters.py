"""Conversions between recipe commands and SQLAlchemy entities."""

from recipe_app.models.category import Category
from recipe_app.models.ingredient import Ingredient
from recipe_app.models.recipe import Notes, Recipe
from recipe_app.models.unit_of_measure import UnitOfMeasure
from recipe_app.schemas.category import CategoryCommand
from recipe_app.schemas.ingredient import IngredientCommand
from recipe_app.schemas.recipe import NotesCommand, RecipeCommand
from recipe_app.schemas.unit_of_measure import UnitOfMeasureCommand


def recipe_to_command(recipe: Recipe) -> RecipeCommand:
    return RecipeCommand.model_validate(recipe)


def ingredient_to_command(ingredient: Ingredient) -> IngredientCommand:
    return IngredientCommand.model_validate(ingredient)


def uom_to_command(uom: UnitOfMeasure) -> UnitOfMeasureCommand:
    return UnitOfMeasureCommand.model_validate(uom)


def category_to_command(category: Category) -> CategoryCommand:
    return CategoryCommand.model_validate(category)


def apply_notes_command(recipe: Recipe, command: NotesCommand | None) -> None:
    """Update the recipe's notes in place, creating or orphaning them as needed."""
    if command is None:
        recipe.set_notes(None)
        return

    notes = recipe.notes if recipe.notes is not None else Notes()
    notes.recipe_notes = command.recipe_notes
    recipe.set_notes(notes)


def apply_ingredient_command(
    ingredient: Ingredient, command: IngredientCommand, uom: UnitOfMeasure
) -> Ingredient:
    ingredient.description = command.description
    ingredient.amount = command.amount
    ingredient.uom = uom
    return ingredient


def apply_recipe_command(
    recipe: Recipe,
    command: RecipeCommand,
    categories: list[Category],
    ingredient_uoms: list[UnitOfMeasure],
) -> Recipe:
    """Copy a validated command onto ``recipe``.

    Lookups are resolved by the caller: ``categories`` are the entities named by
    ``command.categories`` and ``ingredient_uoms[i]`` is the unit for
    ``command.ingredients[i]``. Ingredient ids must belong to ``recipe``;
    ingredients missing from the command are dropped from the recipe.
    """
    recipe.description = command.description
    recipe.prep_time = command.prep_time
    recipe.cook_time = command.cook_time
    recipe.servings = command.servings
    recipe.source = command.source
    recipe.url = command.url
    recipe.directions = command.directions
    recipe.difficulty = command.difficulty

    apply_notes_command(recipe, command.notes)

    existing = {ingredient.id: ingredient for ingredient in recipe.ingredients}
    ingredients = []
    for ingredient_command, uom in zip(command.ingredients, ingredient_uoms, strict=True):
        if ingredient_command.id is None:
            ingredient = Ingredient()
        else:
            ingredient = existing[ingredient_command.id]
        ingredients.append(apply_ingredient_command(ingredient, ingredient_command, uom))
    recipe.ingredients = ingredients

    recipe.categories = categories
    return recipe
