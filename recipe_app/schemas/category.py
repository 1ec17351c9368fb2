"""Category schemas."""

from pydantic import BaseModel, ConfigDict, Field


class CategoryCommand(BaseModel):
    """Category reference carried by a recipe command."""

    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    description: str | None = Field(None, max_length=255)
