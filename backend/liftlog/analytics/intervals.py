"""Date buckets for chart x-axes."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum

from liftlog.analytics.errors import InvalidRange


class Granularity(str, Enum):
    day = "day"
    month = "month"


@dataclass(frozen=True, slots=True)
class Bucket:
    label: str  # shown on the axis, e.g. "Jan 05" or "Jan 2026"
    key: str    # matched against bucket_key(), e.g. "2026-01-05" or "2026-01"
    granularity: Granularity = Granularity.day


def bucket_key(d: date, granularity: Granularity) -> str:
    """Normalize a date to the key of the bucket it falls in."""
    if Granularity(granularity) is Granularity.month:
        return f"{d.year:04d}-{d.month:02d}"
    return d.isoformat()


def bucket_label(d: date, granularity: Granularity) -> str:
    if Granularity(granularity) is Granularity.month:
        return d.strftime("%b %Y")
    return d.strftime("%b %d")


def _days(start: date, end: date):
    d = start
    while d <= end:
        yield d
        d += timedelta(days=1)


def _months(start: date, end: date):
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        yield date(year, month, 1)
        month += 1
        if month > 12:
            year, month = year + 1, 1


def generate(start: date, end: date, granularity: Granularity) -> list[Bucket]:
    """
    Every bucket between start and end, both included, oldest first.

    Day buckets cover each calendar day; month buckets cover each calendar
    month the range touches. Raises InvalidRange when start > end.
    """
    if start > end:
        raise InvalidRange(start, end)
    granularity = Granularity(granularity)
    points = _months(start, end) if granularity is Granularity.month else _days(start, end)
    return [Bucket(bucket_label(d, granularity), bucket_key(d, granularity), granularity) for d in points]
