"""Session duration estimate from sets and rest periods."""

from __future__ import annotations

from liftplan.workout.balance import ExerciseLike, ExerciseSource, iter_exercises
from liftplan.workout.model import DEFAULT_REST_SECONDS, DEFAULT_TARGET_SETS, PlannedExercise


SECONDS_PER_SET = 45


def estimate_exercise_minutes(exercise: ExerciseLike) -> float:
    """Work time for every set plus rest between sets (none after the last)."""
    if isinstance(exercise, PlannedExercise):
        sets = exercise.target_sets
        rest = exercise.rest_time_seconds
    else:
        sets = DEFAULT_TARGET_SETS
        rest = None
    if rest is None:
        rest = DEFAULT_REST_SECONDS
    sets = max(0, sets)
    return (sets * SECONDS_PER_SET + max(0, sets - 1) * max(0, rest)) / 60


def estimate_duration(exercises: ExerciseSource) -> float:
    return float(sum(estimate_exercise_minutes(item) for item in iter_exercises(exercises)))
