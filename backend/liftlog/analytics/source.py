"""
Data source interface (port) for the analytics pipeline.

The pipeline only ever needs one kind of read: workout entries in a date
range, for one exercise or for every exercise of a group, oldest first.
`WorkoutEntryRepository` implements it over SQLAlchemy; tests use an
in-memory fake.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Protocol

from liftlog.effort import compute_effort


@dataclass(frozen=True, slots=True)
class EntryRow:
    """One workout entry as seen by the aggregation engine."""
    workout_date: date
    exercise_name: str
    weight_kg: Decimal
    reps: int
    effort: Optional[Decimal] = None  # filled by the store's generated column when available

    @property
    def volume(self) -> Decimal:
        if self.effort is not None:
            return Decimal(self.effort)
        return compute_effort(self.weight_kg, self.reps)


class WorkoutDataSource(Protocol):
    def fetch_entries(
        self,
        start: date,
        end: date,
        *,
        exercise_id: Optional[uuid.UUID] = None,
        group_id: Optional[uuid.UUID] = None,
    ) -> list[EntryRow]:
        """
        Entries with start <= workout_date <= end, ascending by date.

        Exactly one of exercise_id / group_id is given. Raises FetchFailure
        when the store cannot be read.
        """
        ...
