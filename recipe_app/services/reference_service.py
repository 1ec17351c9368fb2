"""Read-only services for reference data."""

from sqlalchemy.orm import Session

from recipe_app.repositories.reference import CategoryRepository, UnitOfMeasureRepository
from recipe_app.schemas.category import CategoryCommand
from recipe_app.schemas.unit_of_measure import UnitOfMeasureCommand
from recipe_app.services.converters import category_to_command, uom_to_command


class UnitOfMeasureService:
    def __init__(self, db: Session):
        self.uom_repository = UnitOfMeasureRepository(db)

    def list_all_uoms(self) -> list[UnitOfMeasureCommand]:
        uoms = sorted(self.uom_repository.find_all(), key=lambda uom: uom.description)
        return [uom_to_command(uom) for uom in uoms]


class CategoryService:
    def __init__(self, db: Session):
        self.category_repository = CategoryRepository(db)

    def list_all_categories(self) -> list[CategoryCommand]:
        categories = sorted(self.category_repository.find_all(), key=lambda c: c.description)
        return [category_to_command(category) for category in categories]
