"""
Analysis entry point: scope + view preset -> chart data.

One call does one fetch and one aggregation. The data source round trip is
the only I/O; failures are reported through the injected reporter and
re-raised, never retried.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Literal, Optional

from liftlog.analytics.aggregation import PALETTE, aggregate_group, aggregate_single, series_colors, series_names
from liftlog.analytics.errors import EmptyScope, FetchFailure
from liftlog.analytics.intervals import Granularity, generate
from liftlog.analytics.reporting import Notice, Reporter, log_notice
from liftlog.analytics.source import WorkoutDataSource
from liftlog.analytics.windows import ViewMode, window_for

logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to load workout data"


@dataclass(frozen=True, slots=True)
class Scope:
    kind: Literal["exercise", "group"]
    id: uuid.UUID
    name: str

    @classmethod
    def select(cls, *, exercise: Optional[tuple[uuid.UUID, str]] = None,
               group: Optional[tuple[uuid.UUID, str]] = None) -> "Scope":
        """Scope from a UI-style selection of (id, name) pairs; raises EmptyScope if nothing is picked."""
        if exercise and group:
            raise ValueError("select either an exercise or a group, not both")
        if exercise:
            return cls("exercise", *exercise)
        if group:
            return cls("group", *group)
        raise EmptyScope("no exercise or group selected")

    @property
    def title(self) -> str:
        if self.kind == "group":
            return f"{self.name} Group Progress"
        return f"{self.name} Progress"


@dataclass(frozen=True, slots=True)
class Series:
    name: str
    color: str


@dataclass(slots=True)
class Chart:
    title: str
    view: ViewMode
    granularity: Granularity
    start: date
    end: date
    series: list[Series] = field(default_factory=list)
    points: list[dict[str, Any]] = field(default_factory=list)


class AnalyticsService:
    def __init__(self, source: WorkoutDataSource, report: Reporter = log_notice):
        self._source = source
        self._report = report

    def analyze(self, scope: Optional[Scope], view: ViewMode | str = ViewMode.week,
                *, today: Optional[date] = None) -> Optional[Chart]:
        """
        Build the chart for `scope` over the `view` window ending `today`.

        Returns None when no scope is selected. Raises FetchFailure (after
        reporting it) when the entries cannot be read.
        """
        if scope is None:
            logger.debug("analyze skipped: no scope selected")
            return None

        view = ViewMode(view)
        window = window_for(view, today)
        try:
            if scope.kind == "group":
                rows = self._source.fetch_entries(window.start, window.end, group_id=scope.id)
            else:
                rows = self._source.fetch_entries(window.start, window.end, exercise_id=scope.id)
        except FetchFailure:
            self._report(Notice("error", FETCH_FAILED))
            raise

        buckets = generate(window.start, window.end, window.granularity)
        if scope.kind == "group":
            names = series_names(rows)
            colors = series_colors(names)
            series = [Series(n, colors[n]) for n in names]
            points = aggregate_group(rows, buckets)
        else:
            series = [Series("effort", PALETTE[0])]
            points = aggregate_single(rows, buckets)

        logger.info(
            "analyzed %s=%s view=%s rows=%d buckets=%d",
            scope.kind, scope.id, view.value, len(rows), len(buckets),
        )
        return Chart(
            title=scope.title,
            view=view,
            granularity=window.granularity,
            start=window.start,
            end=window.end,
            series=series,
            points=points,
        )
