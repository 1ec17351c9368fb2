"""Ingredient pages, nested under their recipe."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from recipe_app.api.dependencies import (
    get_ingredient_service,
    get_recipe_service,
    get_uom_service,
)
from recipe_app.api.forms import format_validation_errors
from recipe_app.exceptions import ValidationException
from recipe_app.schemas.ingredient import IngredientCommand
from recipe_app.services.ingredient_service import IngredientService
from recipe_app.services.recipe_service import RecipeService
from recipe_app.services.reference_service import UnitOfMeasureService
from recipe_app.templating import render

logger = logging.getLogger(__name__)

INGREDIENT_FORM_VIEW = "recipe/ingredient/ingredientform"

router = APIRouter(prefix="/recipe/{recipe_id}", tags=["ingredients"])


def ingredient_form_model(
    ingredient: Any, uom_service: UnitOfMeasureService, errors: list[str] | None = None
) -> dict[str, Any]:
    return {
        "ingredient": ingredient,
        "uom_list": uom_service.list_all_uoms(),
        "errors": errors or [],
    }


@router.get("/ingredients", response_class=HTMLResponse)
def list_ingredients(
    recipe_id: int,
    request: Request,
    recipe_service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """List the ingredients of a recipe."""
    logger.debug(f"Getting ingredient list for recipe id: {recipe_id}")
    recipe = recipe_service.find_command_by_id(recipe_id)
    return render(request, "recipe/ingredient/list", {"recipe": recipe})


@router.get("/ingredient/new", response_class=HTMLResponse)
def new_ingredient(
    recipe_id: int,
    request: Request,
    recipe_service: Annotated[RecipeService, Depends(get_recipe_service)],
    uom_service: Annotated[UnitOfMeasureService, Depends(get_uom_service)],
):
    """Render an empty ingredient form for an existing recipe."""
    recipe_service.find_by_id(recipe_id)
    ingredient = IngredientCommand(recipe_id=recipe_id)
    return render(request, INGREDIENT_FORM_VIEW, ingredient_form_model(ingredient, uom_service))


@router.get("/ingredient/{ingredient_id}/show", response_class=HTMLResponse)
def show_ingredient(
    recipe_id: int,
    ingredient_id: int,
    request: Request,
    ingredient_service: Annotated[IngredientService, Depends(get_ingredient_service)],
):
    ingredient = ingredient_service.find_by_recipe_id_and_ingredient_id(recipe_id, ingredient_id)
    return render(request, "recipe/ingredient/show", {"ingredient": ingredient})


@router.get("/ingredient/{ingredient_id}/update", response_class=HTMLResponse)
def update_ingredient(
    recipe_id: int,
    ingredient_id: int,
    request: Request,
    ingredient_service: Annotated[IngredientService, Depends(get_ingredient_service)],
    uom_service: Annotated[UnitOfMeasureService, Depends(get_uom_service)],
):
    ingredient = ingredient_service.find_by_recipe_id_and_ingredient_id(recipe_id, ingredient_id)
    return render(request, INGREDIENT_FORM_VIEW, ingredient_form_model(ingredient, uom_service))


@router.post("/ingredient", response_class=HTMLResponse)
async def save_or_update_ingredient(
    recipe_id: int,
    request: Request,
    ingredient_service: Annotated[IngredientService, Depends(get_ingredient_service)],
    uom_service: Annotated[UnitOfMeasureService, Depends(get_uom_service)],
):
    """Add or update an ingredient from the posted form."""
    form = await request.form()
    uom_id = form.get("uom_id") or None
    data: dict[str, Any] = {
        "id": form.get("id") or None,
        "recipe_id": recipe_id,
        "description": form.get("description") or None,
        "amount": form.get("amount") or None,
        "uom": {"id": uom_id} if uom_id else None,
    }

    try:
        command = IngredientCommand.model_validate(data)
        saved = ingredient_service.save_ingredient_command(command)
    except ValidationError as e:
        errors = format_validation_errors(e)
        logger.warning(f"Rejected ingredient form: {errors}")
        return render(
            request,
            INGREDIENT_FORM_VIEW,
            ingredient_form_model(data, uom_service, errors),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    except ValidationException as e:
        logger.warning(f"Rejected ingredient form: {e.message}")
        return render(
            request,
            INGREDIENT_FORM_VIEW,
            ingredient_form_model(data, uom_service, [e.message]),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    return RedirectResponse(
        f"/recipe/{recipe_id}/ingredient/{saved.id}/show",
        status_code=status.HTTP_303_SEE_OTHER,
    )


@router.get("/ingredient/{ingredient_id}/delete")
def delete_ingredient(
    recipe_id: int,
    ingredient_id: int,
    ingredient_service: Annotated[IngredientService, Depends(get_ingredient_service)],
):
    logger.debug(f"Deleting ingredient id: {ingredient_id}")
    ingredient_service.delete_by_id(recipe_id, ingredient_id)
    return RedirectResponse(
        f"/recipe/{recipe_id}/ingredients", status_code=status.HTTP_303_SEE_OTHER
    )
