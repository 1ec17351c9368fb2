"""Ingredient page tests."""

from decimal import Decimal

from recipe_app.services.recipe_service import RecipeService


def test_list_ingredients(client, guacamole):
    response = client.get(f"/recipe/{guacamole.id}/ingredients")
    assert response.status_code == 200
    assert "ripe avocados" in response.text
    assert "Kosher salt" in response.text
    assert f"/recipe/{guacamole.id}/ingredient/new" in response.text


def test_list_ingredients_unknown_recipe(client):
    assert client.get("/recipe/5/ingredients").status_code == 404


def test_show_ingredient(client, guacamole):
    ingredient = guacamole.ingredients[1]
    response = client.get(f"/recipe/{guacamole.id}/ingredient/{ingredient.id}/show")
    assert response.status_code == 200
    assert "Kosher salt" in response.text
    assert "Teaspoon" in response.text


def test_new_ingredient_form(client, guacamole):
    response = client.get(f"/recipe/{guacamole.id}/ingredient/new")
    assert response.status_code == 200
    assert f'action="/recipe/{guacamole.id}/ingredient"' in response.text
    assert "Tablespoon" in response.text


def test_new_ingredient_form_unknown_recipe(client, reference_data):
    assert client.get("/recipe/5/ingredient/new").status_code == 404


def test_update_ingredient_form(client, guacamole):
    ingredient = guacamole.ingredients[0]
    response = client.get(f"/recipe/{guacamole.id}/ingredient/{ingredient.id}/update")
    assert response.status_code == 200
    assert 'value="ripe avocados"' in response.text
    assert "selected" in response.text


def test_add_ingredient(client, db, guacamole, reference_data):
    response = client.post(
        f"/recipe/{guacamole.id}/ingredient",
        data={
            "id": "",
            "description": "Cilantro",
            "amount": "2",
            "uom_id": str(reference_data["uoms"]["Tablespoon"].id),
        },
        follow_redirects=False,
    )

    assert response.status_code == 303
    recipe = RecipeService(db).find_by_id(guacamole.id)
    added = recipe.ingredients[-1]
    assert added.description == "Cilantro"
    assert added.amount == Decimal("2")
    assert response.headers["location"] == f"/recipe/{guacamole.id}/ingredient/{added.id}/show"


def test_update_ingredient(client, db, guacamole, reference_data):
    ingredient = guacamole.ingredients[0]
    response = client.post(
        f"/recipe/{guacamole.id}/ingredient",
        data={
            "id": str(ingredient.id),
            "description": "very ripe avocados",
            "amount": "3",
            "uom_id": str(reference_data["uoms"]["Each"].id),
        },
    )

    assert response.status_code == 200
    assert "very ripe avocados" in response.text
    recipe = RecipeService(db).find_by_id(guacamole.id)
    assert len(recipe.ingredients) == 2
    assert recipe.ingredients[0].amount == Decimal("3")


def test_add_incomplete_ingredient_redisplays_form(client, db, guacamole):
    response = client.post(
        f"/recipe/{guacamole.id}/ingredient",
        data={"description": "Lime", "amount": "1"},
        follow_redirects=False,
    )

    assert response.status_code == 400
    assert "unit of measure is required" in response.text
    assert len(RecipeService(db).find_by_id(guacamole.id).ingredients) == 2


def test_add_ingredient_with_negative_amount(client, guacamole, reference_data):
    response = client.post(
        f"/recipe/{guacamole.id}/ingredient",
        data={
            "description": "Lime",
            "amount": "-1",
            "uom_id": str(reference_data["uoms"]["Each"].id),
        },
        follow_redirects=False,
    )
    assert response.status_code == 400
    assert "amount" in response.text


def test_delete_ingredient(client, db, guacamole):
    ingredient = guacamole.ingredients[0]
    response = client.get(
        f"/recipe/{guacamole.id}/ingredient/{ingredient.id}/delete", follow_redirects=False
    )

    assert response.status_code == 303
    assert response.headers["location"] == f"/recipe/{guacamole.id}/ingredients"
    remaining = RecipeService(db).find_by_id(guacamole.id).ingredients
    assert [i.id for i in remaining] == [guacamole.ingredients[1].id]
