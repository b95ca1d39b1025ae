"""Failure kinds of the analytics pipeline.

None of these is fatal: the caller reports them and the user may simply
trigger the analysis again.
"""


class AnalyticsError(Exception):
    """Base class for analytics failures."""


class InvalidRange(AnalyticsError, ValueError):
    """Interval requested with start after end."""

    def __init__(self, start, end):
        super().__init__(f"invalid range: {start} is after {end}")
        self.start = start
        self.end = end


class FetchFailure(AnalyticsError):
    """The data source could not deliver the workout rows."""


class EmptyScope(AnalyticsError):
    """Neither an exercise nor a group was selected."""
