from liftlog.models.exercise_group import ExerciseGroup
from liftlog.models.exercise import Exercise
from liftlog.models.workout_entry import WorkoutEntry

__all__ = ["ExerciseGroup", "Exercise", "WorkoutEntry"]
