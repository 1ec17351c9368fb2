"""Index page listing every recipe."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from recipe_app.api.dependencies import get_recipe_service
from recipe_app.services.recipe_service import RecipeService
from recipe_app.templating import render

logger = logging.getLogger(__name__)

router = APIRouter(tags=["index"])


def get_index_page(recipe_service: RecipeService, model: dict[str, Any]) -> str:
    """Put all recipes on ``model`` under ``"recipes"`` and return the view name."""
    logger.debug("Getting index page")
    model["recipes"] = recipe_service.get_recipes()
    return "index"


@router.get("/", response_class=HTMLResponse)
@router.get("/index", response_class=HTMLResponse)
def index(
    request: Request,
    recipe_service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Render the recipe listing."""
    model: dict[str, Any] = {}
    view = get_index_page(recipe_service, model)
    model["recipes"] = sorted(model["recipes"], key=lambda r: (r.description or "").lower())
    return render(request, view, model)
