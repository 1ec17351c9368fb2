"""FastAPI dependencies wiring services to the request's database session."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from recipe_app.database import get_db
from recipe_app.services.image_service import ImageService
from recipe_app.services.ingredient_service import IngredientService
from recipe_app.services.recipe_service import RecipeService
from recipe_app.services.reference_service import CategoryService, UnitOfMeasureService


def get_recipe_service(
    db: Annotated[Session, Depends(get_db)],
) -> RecipeService:
    """Get recipe service with dependencies."""
    return RecipeService(db)


def get_ingredient_service(
    db: Annotated[Session, Depends(get_db)],
) -> IngredientService:
    """Get ingredient service with dependencies."""
    return IngredientService(db)


def get_uom_service(
    db: Annotated[Session, Depends(get_db)],
) -> UnitOfMeasureService:
    return UnitOfMeasureService(db)


def get_category_service(
    db: Annotated[Session, Depends(get_db)],
) -> CategoryService:
    return CategoryService(db)


def get_image_service(
    db: Annotated[Session, Depends(get_db)],
) -> ImageService:
    return ImageService(db)
