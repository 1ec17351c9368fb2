"""Unit of measure schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UnitOfMeasureCommand(BaseModel):
    """Unit of measure reference carried by an ingredient command."""

    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    description: str | None = Field(None, max_length=255)
