import uuid
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.repositories.exercise_repo import ExerciseRepository
from liftlog.repositories.group_repo import ExerciseGroupRepository
from liftlog.schemas.exercise import ExerciseCreate, ExerciseRead

router = APIRouter(prefix="/exercises", tags=["exercises"])

@router.get("", response_model=list[ExerciseRead])
def list_exercises(
    db: Session = Depends(get_db),
    group_id: uuid.UUID | None = Query(None),
):
    return ExerciseRepository(db).list(group_id=group_id)

@router.post("", response_model=ExerciseRead, status_code=status.HTTP_201_CREATED)
def create_exercise(payload: ExerciseCreate, db: Session = Depends(get_db)):
    if not ExerciseGroupRepository(db).get(payload.group_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise group not found")
    try:
        exercise = ExerciseRepository(db).create(name=payload.name, group_id=payload.group_id)
    except ValueError as e:
        if str(e) == "exercise_already_exists":
            raise HTTPException(status_code=400, detail="Exercise already exists")
        raise
    return exercise

@router.delete("/{exercise_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_exercise(exercise_id: uuid.UUID, db: Session = Depends(get_db)):
    """Deletes the exercise together with all of its workout entries."""
    repo = ExerciseRepository(db)
    exercise = repo.get(exercise_id)
    if not exercise:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    repo.delete(exercise)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
