"""Ingredient schemas."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from recipe_app.schemas.unit_of_measure import UnitOfMeasureCommand


class IngredientCommand(BaseModel):
    """Ingredient as edited on the ingredient form.

    ``amount`` and ``uom`` may be missing here so an empty form can be
    rendered; the ingredient service rejects them at save time.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    recipe_id: int | None = None
    description: str | None = Field(None, max_length=255)
    amount: Decimal | None = Field(None, gt=0, max_digits=10, decimal_places=3)
    uom: UnitOfMeasureCommand | None = None
