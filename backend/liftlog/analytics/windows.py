from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum

from liftlog.analytics.intervals import Granularity


class ViewMode(str, Enum):
    week = "week"
    month = "month"
    year = "year"


@dataclass(frozen=True, slots=True)
class Window:
    start: date
    end: date
    granularity: Granularity


def shift_months(d: date, months: int) -> date:
    """Same day `months` calendar months away, clamped to the last day of that month."""
    total = d.year * 12 + (d.month - 1) + months
    year, month = divmod(total, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(d.day, last_day))


def window_for(view: ViewMode | str, today: date | None = None) -> Window:
    """Lookback window ending today for one of the fixed presets."""
    today = today or date.today()
    view = ViewMode(view)
    if view is ViewMode.week:
        return Window(today - timedelta(days=7), today, Granularity.day)
    if view is ViewMode.month:
        return Window(shift_months(today, -1), today, Granularity.day)
    return Window(shift_months(today, -12), today, Granularity.month)
