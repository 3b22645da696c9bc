"""Push/pull/core tagging and aggregate difficulty scoring."""

from __future__ import annotations

from typing import Iterable

from liftplan.workout.catalog import normalize_tag
from liftplan.workout.model import (
    Difficulty,
    ExerciseClassification,
    ExerciseDefinition,
    PlannedExercise,
    WorkoutPlan,
)


ExerciseLike = ExerciseDefinition | PlannedExercise
ExerciseSource = WorkoutPlan | Iterable[ExerciseLike] | None

PUSH_MUSCLES = frozenset({"chest", "shoulders", "triceps", "quadriceps"})
PULL_MUSCLES = frozenset({"back", "biceps", "hamstrings", "glutes"})
CORE_MARKERS = ("abs", "core")

DIFFICULTY_SCORES: dict[str, int] = {
    "beginner": 1,
    "intermediate": 2,
    "advanced": 3,
}
BEGINNER_MAX_MEAN = 1.3
ADVANCED_MIN_MEAN = 2.3


def iter_exercises(source: ExerciseSource) -> list[ExerciseLike]:
    if source is None:
        return []
    if isinstance(source, WorkoutPlan):
        return list(source.exercises)
    return list(source)


def _definition(exercise: ExerciseLike) -> ExerciseDefinition:
    if isinstance(exercise, PlannedExercise):
        return exercise.exercise
    return exercise


def classify_exercise(exercise: ExerciseLike) -> ExerciseClassification:
    """Tag an exercise as push, pull and/or core.

    Tags are not exclusive: a squat tagged quadriceps + glutes is both push
    and pull. An exercise without muscle groups gets no tags.
    """
    groups = {
        normalize_tag(group)
        for group in (_definition(exercise).muscle_groups or ())
        if group and group.strip()
    }
    tags: set[str] = set()
    if groups & PUSH_MUSCLES:
        tags.add("push")
    if groups & PULL_MUSCLES:
        tags.add("pull")
    if any(marker in group for group in groups for marker in CORE_MARKERS):
        tags.add("core")
    return ExerciseClassification(tags=frozenset(tags))


def estimate_difficulty(exercises: ExerciseSource) -> Difficulty:
    scores = [
        DIFFICULTY_SCORES.get(_definition(exercise).difficulty, 2)
        for exercise in iter_exercises(exercises)
    ]
    if not scores:
        return "beginner"
    mean = sum(scores) / len(scores)
    if mean <= BEGINNER_MAX_MEAN:
        return "beginner"
    if mean > ADVANCED_MIN_MEAN:
        return "advanced"
    return "intermediate"
