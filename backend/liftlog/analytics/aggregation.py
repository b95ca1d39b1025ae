"""
Folding workout entries into chart buckets.

Both modes return exactly one record per bucket, in bucket order. A bucket
with no matching entries yields zero rather than being dropped, and an
entry whose date maps to no bucket is ignored. Nothing here keeps state
between calls.
"""
from __future__ import annotations

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Any, Iterable, Sequence

from liftlog.analytics.intervals import Bucket, Granularity, bucket_key

PALETTE = ("#FFD700", "#FFA500", "#FF6347", "#32CD32", "#1E90FF", "#FF69B4")

ZERO = Decimal("0")


def _as_date(value) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _granularity_of(buckets: Sequence[Bucket]) -> Granularity:
    return buckets[0].granularity if buckets else Granularity.day


AXIS_KEY = "label"


def series_key(name) -> str:
    """Record key for an exercise series; never collides with the x-axis key."""
    if not name:
        return "Unknown"
    if name == AXIS_KEY:
        return f"{name} (exercise)"
    return name


def series_names(entries: Iterable) -> list[str]:
    """Distinct series keys in order of first appearance."""
    seen: dict[str, None] = {}
    for e in entries:
        seen.setdefault(series_key(e.exercise_name), None)
    return list(seen)


def series_colors(names: Sequence[str]) -> dict[str, str]:
    return {name: PALETTE[i % len(PALETTE)] for i, name in enumerate(names)}


def _totals(entries: Iterable, buckets: Sequence[Bucket], *, by_name: bool) -> dict:
    granularity = _granularity_of(buckets)
    keys = {b.key for b in buckets}
    totals: dict = defaultdict(lambda: ZERO)
    for e in entries:
        key = bucket_key(_as_date(e.workout_date), granularity)
        if key not in keys:
            continue
        slot = (key, series_key(e.exercise_name)) if by_name else key
        totals[slot] += e.volume
    return totals


def aggregate_single(entries: Iterable, buckets: Sequence[Bucket]) -> list[dict[str, Any]]:
    """[{label, effort}] with effort summed per bucket."""
    totals = _totals(entries, buckets, by_name=False)
    return [{AXIS_KEY: b.label, "effort": totals.get(b.key, ZERO)} for b in buckets]


def aggregate_group(entries: Iterable, buckets: Sequence[Bucket]) -> list[dict[str, Any]]:
    """
    [{label, <exercise name>: effort, ...}] for every bucket.

    The series are the exercises that actually have entries; each record
    carries all of them. With no entries the records hold only the label.
    """
    entries = list(entries)
    names = series_names(entries)
    totals = _totals(entries, buckets, by_name=True)
    points = []
    for b in buckets:
        point: dict[str, Any] = {AXIS_KEY: b.label}
        for name in names:
            point[name] = totals.get((b.key, name), ZERO)
        points.append(point)
    return points
