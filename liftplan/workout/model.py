"""Workout domain models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


Category = Literal["strength", "cardio", "flexibility", "sports", "functional"]
Difficulty = Literal["beginner", "intermediate", "advanced"]

CATEGORIES: tuple[Category, ...] = ("strength", "cardio", "flexibility", "sports", "functional")
DIFFICULTIES: tuple[Difficulty, ...] = ("beginner", "intermediate", "advanced")

DEFAULT_TARGET_SETS = 3
DEFAULT_TARGET_REPS = 10
DEFAULT_REST_SECONDS = 60


@dataclass(frozen=True)
class ExerciseDefinition:
    id: str
    name: str
    category: Category
    muscle_groups: tuple[str, ...] = ()
    equipment: tuple[str, ...] = ()
    difficulty: Difficulty = "beginner"


@dataclass(frozen=True)
class PlannedExercise:
    exercise: ExerciseDefinition
    target_sets: int = DEFAULT_TARGET_SETS
    target_reps: int = DEFAULT_TARGET_REPS
    rest_time_seconds: int | None = DEFAULT_REST_SECONDS

    @property
    def id(self) -> str:
        return self.exercise.id

    @property
    def name(self) -> str:
        return self.exercise.name

    @property
    def muscle_groups(self) -> tuple[str, ...]:
        return self.exercise.muscle_groups

    @property
    def difficulty(self) -> Difficulty:
        return self.exercise.difficulty


@dataclass(frozen=True)
class WorkoutPlan:
    """Ordered, deduplicated exercise list with derived duration/difficulty.

    Built and edited through ``liftplan.workout.editor`` so the derived
    fields always match ``exercises``.
    """

    name: str
    exercises: tuple[PlannedExercise, ...] = ()
    description: str = ""
    target_body_parts: tuple[str, ...] = ()
    estimated_duration_minutes: float = 0.0
    difficulty: Difficulty = "beginner"

    @property
    def exercise_ids(self) -> tuple[str, ...]:
        return tuple(item.id for item in self.exercises)


@dataclass(frozen=True)
class ExerciseClassification:
    tags: frozenset[str] = frozenset()

    @property
    def is_push(self) -> bool:
        return "push" in self.tags

    @property
    def is_pull(self) -> bool:
        return "pull" in self.tags

    @property
    def is_core(self) -> bool:
        return "core" in self.tags


@dataclass(frozen=True)
class BalanceReport:
    push_count: int
    pull_count: int
    core_count: int
    is_balanced: bool
    suggestions: tuple[str, ...] = ()
