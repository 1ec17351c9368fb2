"""Category model."""

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from recipe_app.database import Base

recipe_category = Table(
    "recipe_category",
    Base.metadata,
    Column("recipe_id", Integer, ForeignKey("recipe.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", Integer, ForeignKey("category.id"), primary_key=True),
)


class Category(Base):
    """Shared reference data for grouping recipes (American, Mexican, ...)."""

    __tablename__ = "category"

    id = Column(Integer, primary_key=True, index=True)
    description = Column(String(255), nullable=False, unique=True)

    # Relationships
    recipes = relationship("Recipe", secondary=recipe_category, back_populates="categories")
