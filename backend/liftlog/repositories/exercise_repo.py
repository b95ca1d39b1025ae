from __future__ import annotations
import uuid
from typing import Optional
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from liftlog.models import Exercise
from liftlog.repositories.base import BaseRepository

class ExerciseRepository(BaseRepository[Exercise]):
    model = Exercise

    def list(self, *, group_id: Optional[uuid.UUID] = None) -> list[Exercise]:
        stmt = select(Exercise).options(selectinload(Exercise.group)).order_by(Exercise.name.asc())
        if group_id is not None:
            stmt = stmt.where(Exercise.group_id == group_id)
        return list(self.db.execute(stmt).scalars().all())

    def create(self, *, name: str, group_id: uuid.UUID) -> Exercise:
        return self.save(Exercise(name=name, group_id=group_id), conflict="exercise_already_exists")
