"""Recipe pages: show, create, update and delete."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError
from starlette.datastructures import FormData

from recipe_app.api.dependencies import get_category_service, get_recipe_service
from recipe_app.api.forms import format_validation_errors
from recipe_app.exceptions import ValidationException
from recipe_app.models.enums import Difficulty
from recipe_app.schemas.recipe import RecipeCommand
from recipe_app.services.recipe_service import RecipeService
from recipe_app.services.reference_service import CategoryService
from recipe_app.templating import render

logger = logging.getLogger(__name__)

RECIPE_FORM_VIEW = "recipe/recipeform"

RECIPE_FORM_FIELDS = (
    "id",
    "description",
    "prep_time",
    "cook_time",
    "servings",
    "source",
    "url",
    "directions",
    "difficulty",
)

router = APIRouter(prefix="/recipe", tags=["recipes"])


def recipe_form_data(form: FormData) -> dict[str, Any]:
    """Turn posted form fields into RecipeCommand input; blank fields become None."""
    data: dict[str, Any] = {field: (form.get(field) or None) for field in RECIPE_FORM_FIELDS}
    notes_text = form.get("notes")
    data["notes"] = {"recipe_notes": notes_text} if notes_text else None
    data["categories"] = [{"id": value} for value in form.getlist("categories") if value]
    return data


def recipe_form_model(
    recipe: Any,
    category_service: CategoryService,
    errors: list[str] | None = None,
) -> dict[str, Any]:
    """View model for the recipe form, from a RecipeCommand or raw form data."""
    if isinstance(recipe, RecipeCommand):
        notes_text = recipe.notes.recipe_notes if recipe.notes else ""
        selected = [category.id for category in recipe.categories]
    else:
        notes_text = (recipe.get("notes") or {}).get("recipe_notes") or ""
        selected = [int(c["id"]) for c in recipe.get("categories", []) if str(c["id"]).isdigit()]

    return {
        "recipe": recipe,
        "notes_text": notes_text,
        "selected_category_ids": selected,
        "categories": category_service.list_all_categories(),
        "difficulties": list(Difficulty),
        "errors": errors or [],
    }


@router.get("/new", response_class=HTMLResponse)
def new_recipe(
    request: Request,
    category_service: Annotated[CategoryService, Depends(get_category_service)],
):
    """Render an empty recipe form."""
    return render(request, RECIPE_FORM_VIEW, recipe_form_model({}, category_service))


@router.get("/{recipe_id}/show", response_class=HTMLResponse)
def show_recipe(
    recipe_id: int,
    request: Request,
    recipe_service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Render a single recipe."""
    return render(request, "recipe/show", {"recipe": recipe_service.find_by_id(recipe_id)})


@router.get("/{recipe_id}/update", response_class=HTMLResponse)
def update_recipe(
    recipe_id: int,
    request: Request,
    recipe_service: Annotated[RecipeService, Depends(get_recipe_service)],
    category_service: Annotated[CategoryService, Depends(get_category_service)],
):
    """Render the recipe form filled with an existing recipe."""
    command = recipe_service.find_command_by_id(recipe_id)
    return render(request, RECIPE_FORM_VIEW, recipe_form_model(command, category_service))


@router.post("", response_class=HTMLResponse)
async def save_or_update_recipe(
    request: Request,
    recipe_service: Annotated[RecipeService, Depends(get_recipe_service)],
    category_service: Annotated[CategoryService, Depends(get_category_service)],
):
    """Create or update a recipe from the posted form.

    The form does not carry ingredients, so an update keeps the recipe's
    current ones.
    """
    form = await request.form()
    data = recipe_form_data(form)

    try:
        command = RecipeCommand.model_validate(data)
        if command.id is not None:
            existing = recipe_service.find_command_by_id(command.id)
            command = command.model_copy(update={"ingredients": existing.ingredients})
        saved = recipe_service.save_recipe_command(command)
    except ValidationError as e:
        errors = format_validation_errors(e)
        logger.warning(f"Rejected recipe form: {errors}")
        return render(
            request,
            RECIPE_FORM_VIEW,
            recipe_form_model(data, category_service, errors),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    except ValidationException as e:
        logger.warning(f"Rejected recipe form: {e.message}")
        return render(
            request,
            RECIPE_FORM_VIEW,
            recipe_form_model(data, category_service, [e.message]),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    return RedirectResponse(f"/recipe/{saved.id}/show", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/{recipe_id}/delete")
def delete_recipe(
    recipe_id: int,
    recipe_service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Delete a recipe and go back to the index."""
    logger.debug(f"Deleting id: {recipe_id}")
    recipe_service.delete_by_id(recipe_id)
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
