"""Ingredient model."""

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from recipe_app.database import Base
from recipe_app.models.mixins import TimestampMixin


class Ingredient(Base, TimestampMixin):
    """Ingredient within a recipe."""

    __tablename__ = "ingredient"

    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(
        Integer, ForeignKey("recipe.id", ondelete="CASCADE"), nullable=False, index=True
    )
    description = Column(String(255), nullable=True)
    amount = Column(Numeric(precision=10, scale=3, asdecimal=True), nullable=False)
    uom_id = Column(Integer, ForeignKey("unit_of_measure.id"), nullable=False)

    # Relationships
    recipe = relationship("Recipe", back_populates="ingredients")
    uom = relationship("UnitOfMeasure", lazy="joined")
