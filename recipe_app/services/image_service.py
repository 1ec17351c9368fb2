"""Image service for recipe pictures."""

import logging

from sqlalchemy.orm import Session

from recipe_app.exceptions import NotFoundException, ValidationException
from recipe_app.repositories.recipe import RecipeRepository
from recipe_app.services.base import transaction

logger = logging.getLogger(__name__)


class ImageService:
    """Stores the uploaded image on the recipe row."""

    def __init__(self, db: Session):
        self.db = db
        self.recipe_repository = RecipeRepository(db)

    def save_image_file(self, recipe_id: int, data: bytes) -> None:
        if not data:
            raise ValidationException("Uploaded image is empty")

        with transaction(self.db):
            recipe = self.recipe_repository.find_by_id(recipe_id)
            if recipe is None:
                raise NotFoundException(f"Recipe not found. For ID value: {recipe_id}")
            recipe.image = data
            self.recipe_repository.save(recipe)

        logger.info(f"Stored {len(data)} byte image for recipe {recipe_id}")
