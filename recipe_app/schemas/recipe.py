"""Recipe schemas."""

from pydantic import BaseModel, ConfigDict, Field

from recipe_app.models.enums import Difficulty
from recipe_app.schemas.category import CategoryCommand
from recipe_app.schemas.ingredient import IngredientCommand

# --- Notes ---


class NotesCommand(BaseModel):
    """Recipe notes."""

    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    recipe_notes: str | None = Field(None, max_length=50000)


# --- Recipe ---


class RecipeCommand(BaseModel):
    """Recipe with its notes, ingredients and categories."""

    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    description: str = Field(..., min_length=3, max_length=255)
    prep_time: int | None = Field(None, ge=1, le=999)
    cook_time: int | None = Field(None, ge=0, le=999)
    servings: int | None = Field(None, ge=1, le=100)
    source: str | None = Field(None, max_length=255)
    url: str | None = Field(None, max_length=255)
    directions: str | None = Field(None, max_length=50000)
    difficulty: Difficulty | None = None
    notes: NotesCommand | None = None
    ingredients: list[IngredientCommand] = []
    categories: list[CategoryCommand] = []
    has_image: bool = False
