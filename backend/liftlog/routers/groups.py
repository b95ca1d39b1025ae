import uuid
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.repositories.group_repo import ExerciseGroupRepository
from liftlog.schemas.exercise_group import GroupCreate, GroupRead

router = APIRouter(prefix="/groups", tags=["groups"])

@router.get("", response_model=list[GroupRead])
def list_groups(db: Session = Depends(get_db)):
    return [
        GroupRead(id=g.id, name=g.name, created_at=g.created_at, exercise_count=n)
        for g, n in ExerciseGroupRepository(db).list_with_counts()
    ]

@router.post("", response_model=GroupRead, status_code=status.HTTP_201_CREATED)
def create_group(payload: GroupCreate, db: Session = Depends(get_db)):
    try:
        group = ExerciseGroupRepository(db).create(name=payload.name)
    except ValueError as e:
        if str(e) == "group_already_exists":
            raise HTTPException(status_code=400, detail="Exercise group already exists")
        raise
    return group

@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_group(group_id: uuid.UUID, db: Session = Depends(get_db)):
    repo = ExerciseGroupRepository(db)
    group = repo.get(group_id)
    if not group:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise group not found")

    # Groups are only removed once empty; exercises (and their entries) go first
    try:
        repo.delete(group)
    except ValueError as e:
        if str(e) == "group_not_empty":
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f'Please delete all exercises in "{group.name}" first',
            )
        raise
    return Response(status_code=status.HTTP_204_NO_CONTENT)
