"""Recipe image upload and download."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Request, UploadFile, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from recipe_app.api.dependencies import get_image_service, get_recipe_service
from recipe_app.exceptions import NotFoundException
from recipe_app.services.image_service import ImageService
from recipe_app.services.recipe_service import RecipeService
from recipe_app.templating import render

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recipe/{recipe_id}", tags=["images"])


@router.get("/image", response_class=HTMLResponse)
def show_upload_form(
    recipe_id: int,
    request: Request,
    recipe_service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    recipe = recipe_service.find_command_by_id(recipe_id)
    return render(request, "recipe/imageuploadform", {"recipe": recipe})


@router.post("/image")
async def handle_image_post(
    recipe_id: int,
    imagefile: Annotated[UploadFile, File()],
    image_service: Annotated[ImageService, Depends(get_image_service)],
):
    """Store the uploaded file as the recipe's image."""
    data = await imagefile.read()
    image_service.save_image_file(recipe_id, data)
    return RedirectResponse(f"/recipe/{recipe_id}/show", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/recipeimage")
def render_image(
    recipe_id: int,
    recipe_service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Serve the stored image bytes."""
    recipe = recipe_service.find_by_id(recipe_id)
    if not recipe.image:
        raise NotFoundException(f"Recipe {recipe_id} has no image")
    return Response(content=recipe.image, media_type="image/jpeg")
