from liftlog.analytics.errors import AnalyticsError, EmptyScope, FetchFailure, InvalidRange
from liftlog.analytics.intervals import Bucket, Granularity, bucket_key, generate
from liftlog.analytics.windows import ViewMode, Window, window_for
from liftlog.analytics.aggregation import aggregate_group, aggregate_single, series_colors
from liftlog.analytics.reporting import Notice, log_notice
from liftlog.analytics.source import EntryRow, WorkoutDataSource
from liftlog.analytics.service import AnalyticsService, Chart, Scope, Series

__all__ = [
    "AnalyticsError", "EmptyScope", "FetchFailure", "InvalidRange",
    "Bucket", "Granularity", "bucket_key", "generate",
    "ViewMode", "Window", "window_for",
    "aggregate_group", "aggregate_single", "series_colors",
    "Notice", "log_notice",
    "EntryRow", "WorkoutDataSource",
    "AnalyticsService", "Chart", "Scope", "Series",
]
