"""Tests for the recipe service."""

from decimal import Decimal

import pytest
from sqlalchemy import delete
from sqlalchemy.exc import OperationalError

from recipe_app.exceptions import NotFoundException, ValidationException
from recipe_app.models import Category, Difficulty, Ingredient, Notes, Recipe
from recipe_app.repositories import (
    CategoryRepository,
    IngredientRepository,
    NotesRepository,
    RecipeRepository,
)
from recipe_app.schemas import CategoryCommand, RecipeCommand
from recipe_app.services.recipe_service import RecipeService


def test_save_and_find_recipe_with_notes(db):
    """A recipe saved with notes and no ingredients can be read back."""
    service = RecipeService(db)
    command = RecipeCommand(
        description="Perfect Guacamole",
        notes={"recipe_notes": "Still great"},
    )

    saved = service.save_recipe_command(command)
    assert saved.id is not None

    recipe = service.find_by_id(saved.id)
    assert recipe.description == "Perfect Guacamole"
    assert recipe.notes.recipe_notes == "Still great"
    assert recipe.notes.recipe is recipe
    assert recipe.notes.recipe_id == recipe.id
    assert recipe.ingredients == []


def test_saved_recipe_matches_command(db, reference_data):
    """Domain fields survive a save/find round trip."""
    service = RecipeService(db)
    uoms = reference_data["uoms"]
    command = RecipeCommand(
        description="Spicy Grilled Chicken Tacos",
        prep_time=20,
        cook_time=15,
        servings=6,
        source="Simply Recipes",
        url="https://www.simplyrecipes.com/recipes/spicy_grilled_chicken_tacos/",
        directions="Grill the chicken.",
        difficulty=Difficulty.MEDIUM,
        notes={"recipe_notes": "Marinate overnight"},
        ingredients=[
            {"description": "chicken thighs", "amount": "4", "uom": {"id": uoms["Each"].id}},
        ],
        categories=[{"id": reference_data["categories"]["Mexican"].id}],
    )

    saved = service.save_recipe_command(command)
    found = service.find_command_by_id(saved.id)

    excluded = {"id", "notes", "ingredients", "categories", "has_image"}
    assert found.model_dump(exclude=excluded) == command.model_dump(exclude=excluded)
    assert found.notes.recipe_notes == "Marinate overnight"
    assert len(found.ingredients) == 1
    assert found.ingredients[0].amount == Decimal("4")
    assert found.ingredients[0].uom.description == "Each"
    assert found.ingredients[0].recipe_id == saved.id
    assert [c.description for c in found.categories] == ["Mexican"]


def test_resave_updates_instead_of_duplicating(db, guacamole):
    service = RecipeService(db)
    command = service.find_command_by_id(guacamole.id)

    first = service.save_recipe_command(command.model_copy(update={"servings": 6}))
    second = service.save_recipe_command(command.model_copy(update={"servings": 6}))

    assert first.id == second.id == guacamole.id
    assert RecipeRepository(db).count() == 1
    assert service.find_by_id(guacamole.id).servings == 6
    # Notes and ingredients are updated in place
    assert second.notes.id == guacamole.notes.id
    assert [i.id for i in second.ingredients] == [i.id for i in guacamole.ingredients]


def test_save_with_unknown_id_raises_not_found(db):
    service = RecipeService(db)
    with pytest.raises(NotFoundException):
        service.save_recipe_command(RecipeCommand(id=999, description="Ghost Recipe"))
    assert RecipeRepository(db).count() == 0


def test_find_by_id_not_found(db):
    service = RecipeService(db)
    with pytest.raises(NotFoundException) as exc_info:
        service.find_by_id(42)
    assert "42" in exc_info.value.message


def test_get_recipes_returns_unique_set(db):
    service = RecipeService(db)
    ids = [
        service.save_recipe_command(RecipeCommand(description=name)).id
        for name in ("Pancakes", "Waffles", "Crepes")
    ]
    service.delete_by_id(ids[1])

    recipes = service.get_recipes()

    assert isinstance(recipes, set)
    assert len(recipes) == 2
    assert {recipe.id for recipe in recipes} == {ids[0], ids[2]}


def test_delete_cascades_to_notes_and_ingredients(db, guacamole):
    service = RecipeService(db)
    notes_id = guacamole.notes.id
    ingredient_ids = [ingredient.id for ingredient in guacamole.ingredients]
    category_ids = [category.id for category in guacamole.categories]
    assert len(ingredient_ids) == 2

    service.delete_by_id(guacamole.id)

    with pytest.raises(NotFoundException):
        service.find_by_id(guacamole.id)
    assert NotesRepository(db).find_by_id(notes_id) is None
    for ingredient_id in ingredient_ids:
        assert IngredientRepository(db).find_by_id(ingredient_id) is None
    for category_id in category_ids:
        assert CategoryRepository(db).find_by_id(category_id) is not None


def test_delete_unknown_recipe_raises_not_found(db):
    with pytest.raises(NotFoundException):
        RecipeService(db).delete_by_id(123)


def test_ingredient_without_amount_is_rejected(db, reference_data):
    command = RecipeCommand(
        description="Half Finished",
        ingredients=[{"description": "salt", "uom": {"id": reference_data["uoms"]["Pinch"].id}}],
    )
    with pytest.raises(ValidationException, match="amount"):
        RecipeService(db).save_recipe_command(command)
    assert RecipeRepository(db).count() == 0


def test_ingredient_without_unit_is_rejected(db):
    command = RecipeCommand(
        description="Half Finished",
        ingredients=[{"description": "salt", "amount": "1"}],
    )
    with pytest.raises(ValidationException, match="unit of measure"):
        RecipeService(db).save_recipe_command(command)
    assert RecipeRepository(db).count() == 0


def test_unknown_category_is_rejected(db):
    command = RecipeCommand(description="Mystery Dish", categories=[{"id": 404}])
    with pytest.raises(ValidationException, match="category"):
        RecipeService(db).save_recipe_command(command)


def test_update_drops_missing_ingredients_and_notes(db, guacamole):
    service = RecipeService(db)
    command = service.find_command_by_id(guacamole.id)
    kept = command.ingredients[0]

    updated = service.save_recipe_command(
        command.model_copy(update={"ingredients": [kept], "notes": None})
    )

    assert [i.id for i in updated.ingredients] == [kept.id]
    assert updated.notes is None
    assert NotesRepository(db).find_by_id(guacamole.notes.id) is None
    assert IngredientRepository(db).find_by_id(guacamole.ingredients[1].id) is None


def test_categories_can_be_changed(db, guacamole, reference_data):
    service = RecipeService(db)
    command = service.find_command_by_id(guacamole.id)
    italian = reference_data["categories"]["Italian"]

    updated = service.save_recipe_command(
        command.model_copy(update={"categories": [CategoryCommand(id=italian.id)]})
    )

    assert [c.description for c in updated.categories] == ["Italian"]
    assert len(CategoryRepository(db).find_all()) == 4


def test_store_failure_rolls_back_and_propagates(db, monkeypatch):
    service = RecipeService(db)

    def failing_commit():
        raise OperationalError("COMMIT", {}, Exception("database is locked"))

    monkeypatch.setattr(db, "commit", failing_commit)

    with pytest.raises(OperationalError):
        service.save_recipe_command(RecipeCommand(description="Doomed Recipe"))

    assert db.query(Recipe).count() == 0


def test_store_cascades_delete_without_orm(db, guacamole):
    """Deleting the recipe row directly removes its notes and ingredients too."""
    db.execute(delete(Recipe).where(Recipe.id == guacamole.id))
    db.commit()

    assert db.query(Notes).filter(Notes.recipe_id == guacamole.id).count() == 0
    assert db.query(Ingredient).filter(Ingredient.recipe_id == guacamole.id).count() == 0
    assert db.query(Category).count() == 4


def test_ingredient_of_another_recipe_is_not_copied(db, guacamole):
    service = RecipeService(db)
    foreign = guacamole.ingredients[0]

    with pytest.raises(NotFoundException, match=str(foreign.id)):
        service.save_recipe_command(
            RecipeCommand(description="Other Recipe", ingredients=[foreign])
        )

    assert RecipeRepository(db).count() == 1
    assert db.query(Ingredient).count() == 2


def test_duplicate_ingredient_ids_are_rejected(db, guacamole):
    service = RecipeService(db)
    command = service.find_command_by_id(guacamole.id)
    first = command.ingredients[0]

    with pytest.raises(ValidationException, match="Duplicate ingredient"):
        service.save_recipe_command(
            command.model_copy(
                update={"ingredients": [first, first.model_copy(update={"amount": Decimal("9")})]}
            )
        )

    recipe = service.find_by_id(guacamole.id)
    assert len(recipe.ingredients) == 2
    assert recipe.ingredients[0].amount == Decimal("2")
