import uuid
from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, StringConstraints

# Trimmed; blank names are rejected
NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]

class GroupCreate(BaseModel):
    name: NameStr

class GroupRead(BaseModel):
    id: uuid.UUID
    name: str
    created_at: datetime | None = None
    exercise_count: int = 0

    model_config = {"from_attributes": True}
