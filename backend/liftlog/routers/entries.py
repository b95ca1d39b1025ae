import uuid
from datetime import date
from decimal import Decimal
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.effort import compute_effort
from liftlog.repositories.entry_repo import WorkoutEntryRepository
from liftlog.repositories.exercise_repo import ExerciseRepository
from liftlog.schemas.workout_entry import EffortPreview, EntryCreate, EntryRead, EntryUpdate

router = APIRouter(prefix="/entries", tags=["entries"])

@router.get("", response_model=list[EntryRead])
def list_entries(
    db: Session = Depends(get_db),
    exercise_id: uuid.UUID | None = Query(None),
    start: date | None = Query(None),
    end: date | None = Query(None),
):
    return WorkoutEntryRepository(db).list(exercise_id=exercise_id, start=start, end=end)

@router.get("/preview", response_model=EffortPreview)
def preview_effort(
    weight_kg: Decimal = Query(..., gt=0),
    reps: int = Query(..., ge=1),
):
    return EffortPreview(weight_kg=weight_kg, reps=reps, effort=compute_effort(weight_kg, reps))

@router.post("", response_model=EntryRead, status_code=status.HTTP_201_CREATED)
def log_entry(payload: EntryCreate, db: Session = Depends(get_db)):
    if not ExerciseRepository(db).get(payload.exercise_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    try:
        entry = WorkoutEntryRepository(db).create(
            exercise_id=payload.exercise_id,
            weight_kg=payload.weight_kg,
            reps=payload.reps,
            workout_date=payload.workout_date,
        )
    except ValueError as e:
        if str(e) == "entry_rejected":
            raise HTTPException(status_code=400, detail="Failed to log workout entry")
        raise
    return entry

@router.patch("/{entry_id}", response_model=EntryRead)
def update_entry(entry_id: uuid.UUID, payload: EntryUpdate, db: Session = Depends(get_db)):
    repo = WorkoutEntryRepository(db)
    entry = repo.get(entry_id)
    if not entry:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout entry not found")
    try:
        return repo.update(entry, **payload.model_dump(exclude_unset=True))
    except ValueError as e:
        if str(e) == "entry_rejected":
            raise HTTPException(status_code=400, detail="Failed to update workout entry")
        raise

@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_entry(entry_id: uuid.UUID, db: Session = Depends(get_db)):
    repo = WorkoutEntryRepository(db)
    entry = repo.get(entry_id)
    if not entry:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout entry not found")
    repo.delete(entry)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
