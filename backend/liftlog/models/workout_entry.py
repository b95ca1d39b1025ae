import uuid
from datetime import date, datetime
from decimal import Decimal
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, Numeric, Date, DateTime, ForeignKey, Uuid, Computed, func, text
from liftlog.db import Base

class WorkoutEntry(Base):
    __tablename__ = "workout_entries"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    exercise_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("exercises.id", ondelete="CASCADE"), index=True, nullable=False
    )
    weight_kg: Mapped[Decimal] = mapped_column(Numeric(5, 2), nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    # stored by the database, never written from here
    effort: Mapped[Decimal] = mapped_column(Numeric(8, 2), Computed("weight_kg * reps", persisted=True))
    workout_date: Mapped[date] = mapped_column(
        Date, nullable=False, index=True, default=date.today, server_default=text("CURRENT_DATE")
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    exercise = relationship("Exercise", back_populates="entries")
