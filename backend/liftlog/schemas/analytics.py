import uuid
from datetime import date
from decimal import Decimal
from typing import Any, Literal
from pydantic import BaseModel, field_serializer
from liftlog.analytics import Chart, Granularity, ViewMode

class SeriesRead(BaseModel):
    name: str
    color: str

class ChartRead(BaseModel):
    scope: Literal["exercise", "group"] | None = None
    scope_id: uuid.UUID | None = None
    title: str | None = None
    view: ViewMode
    granularity: Granularity | None = None
    start: date | None = None
    end: date | None = None
    series: list[SeriesRead] = []
    # {"label": ..., <series name>: effort, ...} in x-axis order
    points: list[dict[str, Any]] = []

    @field_serializer("points")
    def efforts_as_numbers(self, points: list[dict[str, Any]]):
        return [
            {k: float(v) if isinstance(v, Decimal) else v for k, v in p.items()}
            for p in points
        ]

    @classmethod
    def from_chart(cls, chart: Chart, *, scope: str, scope_id: uuid.UUID) -> "ChartRead":
        return cls(
            scope=scope,
            scope_id=scope_id,
            title=chart.title,
            view=chart.view,
            granularity=chart.granularity,
            start=chart.start,
            end=chart.end,
            series=[SeriesRead(name=s.name, color=s.color) for s in chart.series],
            points=chart.points,
        )
