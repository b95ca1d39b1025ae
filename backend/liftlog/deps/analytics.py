# liftlog/deps/analytics.py
from fastapi import Depends
from sqlalchemy.orm import Session

from liftlog.analytics import AnalyticsService
from liftlog.analytics.reporting import log_notice
from liftlog.db import get_db
from liftlog.repositories.entry_repo import WorkoutEntryRepository

def get_analytics_service(db: Session = Depends(get_db)) -> AnalyticsService:
    """
    Analytics service bound to the request's session.

    Override in tests with app.dependency_overrides to plug in a fake source.
    """
    return AnalyticsService(WorkoutEntryRepository(db), report=log_notice)
