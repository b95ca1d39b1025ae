# liftlog/repositories/base.py
from __future__ import annotations
import uuid
from typing import Generic, Optional, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

T = TypeVar("T")  # SQLAlchemy model type

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style."""
    model: type[T]

    def __init__(self, db: Session):
        self.db = db

    def get(self, entity_id: uuid.UUID) -> Optional[T]:
        return self.db.get(self.model, entity_id)

    def save(self, entity: T, *, conflict: str = "conflict") -> T:
        """Commit and refresh; a constraint violation becomes ValueError(conflict)."""
        try:
            self.db.add(entity)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            # Re-raise a clean marker the router can map to 400
            raise ValueError(conflict)
        self.db.refresh(entity)
        return entity

    def delete(self, entity: T) -> None:
        self.db.delete(entity)
        self.db.commit()
