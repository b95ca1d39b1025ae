import uuid
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Text, DateTime, ForeignKey, Uuid, func
from liftlog.db import Base

class Exercise(Base):
    __tablename__ = "exercises"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    group_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("exercise_groups.id", ondelete="CASCADE"), index=True, nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    group = relationship("ExerciseGroup", back_populates="exercises")
    entries = relationship("WorkoutEntry", back_populates="exercise", cascade="all, delete-orphan")

    @property
    def group_name(self) -> str | None:
        return self.group.name if self.group is not None else None
