"""
Point the app at a throwaway SQLite database before anything imports
liftlog.db, then create the schema from the ORM metadata.
"""
import os
import tempfile
from datetime import date
from decimal import Decimal

import pytest

_tmpdir = tempfile.mkdtemp(prefix="liftlog-tests-")
os.environ["DATABASE_URL_OVERRIDE"] = f"sqlite:///{os.path.join(_tmpdir, 'liftlog.db')}"

from liftlog.db import Base, engine  # noqa: E402
from liftlog import models  # noqa: E402,F401
from liftlog.analytics import EntryRow, FetchFailure  # noqa: E402

Base.metadata.create_all(engine)


class FakeWorkoutSource:
    """In-memory WorkoutDataSource; records every call it receives."""

    def __init__(self, rows=None, *, fail=False):
        # (exercise_id, group_id, EntryRow)
        self.rows = list(rows or [])
        self.fail = fail
        self.calls = []

    def add(self, exercise_id, group_id, workout_date, name, weight, reps):
        weight = Decimal(str(weight))
        self.rows.append((exercise_id, group_id, EntryRow(workout_date, name, weight, reps, weight * reps)))

    def fetch_entries(self, start, end, *, exercise_id=None, group_id=None):
        self.calls.append((start, end, exercise_id, group_id))
        if self.fail:
            raise FetchFailure("store unreachable")
        out = [
            row for ex, grp, row in self.rows
            if start <= row.workout_date <= end
            and (exercise_id is None or ex == exercise_id)
            and (group_id is None or grp == group_id)
        ]
        return sorted(out, key=lambda r: r.workout_date)


@pytest.fixture
def fake_source():
    return FakeWorkoutSource()


@pytest.fixture
def anchor():
    return date(2026, 1, 15)


@pytest.fixture
def failing_source():
    return FakeWorkoutSource(fail=True)
