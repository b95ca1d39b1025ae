import logging
import uuid
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from liftlog.analytics import AnalyticsService, FetchFailure, Scope, ViewMode
from liftlog.analytics.service import FETCH_FAILED
from liftlog.db import get_db
from liftlog.deps.analytics import get_analytics_service
from liftlog.repositories.exercise_repo import ExerciseRepository
from liftlog.repositories.group_repo import ExerciseGroupRepository
from liftlog.schemas.analytics import ChartRead

log = logging.getLogger(__name__)

router = APIRouter(prefix="/analytics", tags=["analytics"])

@router.get("", response_model=ChartRead)
def analyze(
    view: ViewMode = Query(ViewMode.week),
    exercise_id: uuid.UUID | None = Query(None),
    group_id: uuid.UUID | None = Query(None),
    db: Session = Depends(get_db),
    service: AnalyticsService = Depends(get_analytics_service),
):
    """
    Effort per day (week/month views) or per month (year view) for one
    exercise, or per exercise for a whole group.
    """
    if exercise_id and group_id:
        raise HTTPException(
            status_code=422,
            detail="Select either an exercise or a group, not both",
        )

    scope = None
    try:
        exercise = ExerciseRepository(db).get(exercise_id) if exercise_id else None
        group = ExerciseGroupRepository(db).get(group_id) if group_id else None
    except SQLAlchemyError:
        log.exception("scope lookup failed exercise_id=%s group_id=%s", exercise_id, group_id)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=FETCH_FAILED)

    if exercise_id:
        if not exercise:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
        scope = Scope.select(exercise=(exercise.id, exercise.name))
    elif group_id:
        if not group:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise group not found")
        scope = Scope.select(group=(group.id, group.name))

    try:
        chart = service.analyze(scope, view)
    except FetchFailure:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=FETCH_FAILED)

    # Nothing selected: nothing to chart
    if chart is None:
        return ChartRead(view=view)
    return ChartRead.from_chart(chart, scope=scope.kind, scope_id=scope.id)
