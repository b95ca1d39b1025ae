import uuid
from typing import Annotated
from datetime import date, datetime
from decimal import Decimal
from pydantic import BaseModel, Field, PlainSerializer, model_validator

# numeric(5,2) in the store
WeightKg = Annotated[Decimal, Field(gt=0, max_digits=5, decimal_places=2)]
Reps = Annotated[int, Field(ge=1)]
# JSON clients (charts) expect numbers, not decimal strings
Number = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

class EntryCreate(BaseModel):
    exercise_id: uuid.UUID
    weight_kg: WeightKg
    reps: Reps
    # Optional: if omitted, the entry is logged for today
    workout_date: date | None = None

class EntryUpdate(BaseModel):
    weight_kg: WeightKg | None = None
    reps: Reps | None = None
    workout_date: date | None = None

    @model_validator(mode="after")
    def at_least_one_field(self):
        if not self.model_fields_set:
            raise ValueError("nothing to update")
        for name in self.model_fields_set:
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

class EntryRead(BaseModel):
    id: uuid.UUID
    exercise_id: uuid.UUID
    weight_kg: Number
    reps: int
    effort: Number
    workout_date: date
    created_at: datetime | None = None

    model_config = {"from_attributes": True}

class EffortPreview(BaseModel):
    weight_kg: Number
    reps: int
    effort: Number
