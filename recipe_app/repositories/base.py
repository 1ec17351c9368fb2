"""Generic SQLAlchemy repository."""

from typing import Any, Generic, TypeVar

from sqlalchemy.orm import Session

ModelT = TypeVar("ModelT")


class SqlAlchemyRepository(Generic[ModelT]):
    """CRUD pass-through to the session for a single model.

    Repositories flush but never commit; the service that owns the unit of
    work decides when the transaction ends. Store errors propagate unchanged.
    """

    model: type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> list[ModelT]:
        return self.db.query(self.model).all()

    def find_by_id(self, entity_id: Any) -> ModelT | None:
        if entity_id is None:
            return None
        return self.db.get(self.model, entity_id)

    def save(self, entity: ModelT) -> ModelT:
        """Insert or update ``entity`` and assign its identity."""
        self.db.add(entity)
        self.db.flush()
        return entity

    def delete(self, entity: ModelT) -> None:
        self.db.delete(entity)
        self.db.flush()

    def delete_by_id(self, entity_id: Any) -> bool:
        entity = self.find_by_id(entity_id)
        if entity is None:
            return False
        self.delete(entity)
        return True

    def count(self) -> int:
        return self.db.query(self.model).count()
