from __future__ import annotations
import logging
import uuid
from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from liftlog.analytics.errors import FetchFailure
from liftlog.analytics.source import EntryRow
from liftlog.models import Exercise, WorkoutEntry
from liftlog.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

class WorkoutEntryRepository(BaseRepository[WorkoutEntry]):
    """Workout entry CRUD; also the analytics data source."""
    model = WorkoutEntry

    # READS
    def list(
        self,
        *,
        exercise_id: Optional[uuid.UUID] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> list[WorkoutEntry]:
        stmt = select(WorkoutEntry).order_by(WorkoutEntry.workout_date.asc(), WorkoutEntry.created_at.asc())
        if exercise_id is not None:
            stmt = stmt.where(WorkoutEntry.exercise_id == exercise_id)
        if start is not None:
            stmt = stmt.where(WorkoutEntry.workout_date >= start)
        if end is not None:
            stmt = stmt.where(WorkoutEntry.workout_date <= end)
        return list(self.db.execute(stmt).scalars().all())

    def fetch_entries(
        self,
        start: date,
        end: date,
        *,
        exercise_id: Optional[uuid.UUID] = None,
        group_id: Optional[uuid.UUID] = None,
    ) -> list[EntryRow]:
        stmt = (
            select(
                WorkoutEntry.workout_date,
                Exercise.name,
                WorkoutEntry.weight_kg,
                WorkoutEntry.reps,
                WorkoutEntry.effort,
            )
            .join(Exercise, Exercise.id == WorkoutEntry.exercise_id)
            .where(WorkoutEntry.workout_date >= start, WorkoutEntry.workout_date <= end)
            .order_by(WorkoutEntry.workout_date.asc())
        )
        if exercise_id is not None:
            stmt = stmt.where(WorkoutEntry.exercise_id == exercise_id)
        if group_id is not None:
            stmt = stmt.where(Exercise.group_id == group_id)
        try:
            rows = self.db.execute(stmt).all()
        except SQLAlchemyError as e:
            logger.exception("Error fetching workout entries: %s", e)
            raise FetchFailure(str(e)) from e
        return [EntryRow(d, name, w, r, eff) for d, name, w, r, eff in rows]

    # WRITES
    def create(
        self,
        *,
        exercise_id: uuid.UUID,
        weight_kg: Decimal,
        reps: int,
        workout_date: Optional[date] = None,
    ) -> WorkoutEntry:
        entry = WorkoutEntry(
            exercise_id=exercise_id,
            weight_kg=weight_kg,
            reps=reps,
            workout_date=workout_date or date.today(),
        )
        return self.save(entry, conflict="entry_rejected")

    def update(self, entry: WorkoutEntry, **changes) -> WorkoutEntry:
        for field, value in changes.items():
            setattr(entry, field, value)
        return self.save(entry, conflict="entry_rejected")
