"""Reference data repositories."""

from recipe_app.models.category import Category
from recipe_app.models.unit_of_measure import UnitOfMeasure
from recipe_app.repositories.base import SqlAlchemyRepository


class CategoryRepository(SqlAlchemyRepository[Category]):
    model = Category

    def find_by_description(self, description: str) -> Category | None:
        return self.db.query(Category).filter(Category.description == description).first()


class UnitOfMeasureRepository(SqlAlchemyRepository[UnitOfMeasure]):
    model = UnitOfMeasure

    def find_by_description(self, description: str) -> UnitOfMeasure | None:
        return (
            self.db.query(UnitOfMeasure).filter(UnitOfMeasure.description == description).first()
        )
