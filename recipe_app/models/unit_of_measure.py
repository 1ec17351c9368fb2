"""UnitOfMeasure model."""

from sqlalchemy import Column, Integer, String

from recipe_app.database import Base


class UnitOfMeasure(Base):
    """Shared lookup data for ingredient amounts (Teaspoon, Cup, ...)."""

    __tablename__ = "unit_of_measure"

    id = Column(Integer, primary_key=True, index=True)
    description = Column(String(255), nullable=False, unique=True)
