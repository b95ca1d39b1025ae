import uuid
from datetime import datetime
from pydantic import BaseModel, field_validator
from liftlog.schemas.exercise_group import NameStr

# chart records use this key for the x-axis
RESERVED_NAMES = {"label"}

class ExerciseCreate(BaseModel):
    name: NameStr
    group_id: uuid.UUID

    @field_validator("name")
    @classmethod
    def name_not_reserved(cls, v: str) -> str:
        if v.lower() in RESERVED_NAMES:
            raise ValueError(f'"{v}" is reserved and cannot be used as an exercise name')
        return v

class ExerciseRead(BaseModel):
    id: uuid.UUID
    name: str
    group_id: uuid.UUID
    group_name: str | None = None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
