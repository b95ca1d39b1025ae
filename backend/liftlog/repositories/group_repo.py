from __future__ import annotations
from sqlalchemy import select, func
from liftlog.models import ExerciseGroup, Exercise
from liftlog.repositories.base import BaseRepository

class ExerciseGroupRepository(BaseRepository[ExerciseGroup]):
    model = ExerciseGroup

    def list_with_counts(self) -> list[tuple[ExerciseGroup, int]]:
        stmt = (
            select(ExerciseGroup, func.count(Exercise.id))
            .outerjoin(Exercise, Exercise.group_id == ExerciseGroup.id)
            .group_by(ExerciseGroup.id)
            .order_by(ExerciseGroup.name.asc())
        )
        return [(g, n) for g, n in self.db.execute(stmt).all()]

    def count_exercises(self, group_id) -> int:
        stmt = select(func.count()).select_from(Exercise).where(Exercise.group_id == group_id)
        return self.db.execute(stmt).scalar_one()

    def create(self, *, name: str) -> ExerciseGroup:
        return self.save(ExerciseGroup(name=name), conflict="group_already_exists")

    def delete(self, entity: ExerciseGroup) -> None:
        """Refuses with ValueError("group_not_empty") while exercises reference the group."""
        if self.count_exercises(entity.id):
            raise ValueError("group_not_empty")
        super().delete(entity)
