"""Transaction helper shared by the services."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """Run a block as one unit of work: commit on success, roll back on failure."""
    try:
        yield db
        db.commit()
    except Exception as e:
        if isinstance(e, SQLAlchemyError):
            logger.error(f"Store failure, rolling back: {e}")
        db.rollback()
        raise
