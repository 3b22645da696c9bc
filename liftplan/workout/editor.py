"""Plan edits as pure functions: each returns a new WorkoutPlan.

Derived fields (estimated duration and difficulty) are recomputed from
scratch on every edit so they never drift from the exercise list.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from liftplan.workout.balance import estimate_difficulty
from liftplan.workout.duration import estimate_duration
from liftplan.workout.model import (
    DEFAULT_REST_SECONDS,
    DEFAULT_TARGET_REPS,
    DEFAULT_TARGET_SETS,
    ExerciseDefinition,
    PlannedExercise,
    WorkoutPlan,
)


class PlanEditError(ValueError):
    """Raised when an edit would break the plan's invariants."""


def _with_exercises(plan: WorkoutPlan, exercises: Iterable[PlannedExercise]) -> WorkoutPlan:
    items = tuple(exercises)
    return replace(
        plan,
        exercises=items,
        estimated_duration_minutes=estimate_duration(items),
        difficulty=estimate_difficulty(items),
    )


def _index_of(plan: WorkoutPlan, exercise_id: str) -> int:
    for index, item in enumerate(plan.exercises):
        if item.id == exercise_id:
            return index
    raise PlanEditError(f"Exercise '{exercise_id}' is not in plan '{plan.name}'")


def _planned(
    exercise: ExerciseDefinition,
    *,
    target_sets: int,
    target_reps: int,
    rest_time_seconds: int | None,
) -> PlannedExercise:
    if target_sets <= 0:
        raise PlanEditError("target_sets must be > 0")
    if target_reps <= 0:
        raise PlanEditError("target_reps must be > 0")
    if rest_time_seconds is not None and rest_time_seconds < 0:
        raise PlanEditError("rest_time_seconds must be >= 0")
    return PlannedExercise(
        exercise=exercise,
        target_sets=target_sets,
        target_reps=target_reps,
        rest_time_seconds=rest_time_seconds,
    )


def new_plan(
    name: str,
    description: str = "",
    target_body_parts: Iterable[str] = (),
) -> WorkoutPlan:
    return WorkoutPlan(
        name=name,
        description=description,
        target_body_parts=tuple(target_body_parts),
    )


def build_plan(
    name: str,
    exercises: Iterable[ExerciseDefinition],
    *,
    description: str = "",
    target_body_parts: Iterable[str] = (),
    target_sets: int = DEFAULT_TARGET_SETS,
    target_reps: int = DEFAULT_TARGET_REPS,
    rest_time_seconds: int | None = DEFAULT_REST_SECONDS,
) -> WorkoutPlan:
    """Wrap generated definitions in order, keeping the first of any repeated id."""
    planned: list[PlannedExercise] = []
    seen: set[str] = set()
    for exercise in exercises:
        if exercise.id in seen:
            continue
        seen.add(exercise.id)
        planned.append(
            _planned(
                exercise,
                target_sets=target_sets,
                target_reps=target_reps,
                rest_time_seconds=rest_time_seconds,
            )
        )
    return _with_exercises(new_plan(name, description, target_body_parts), planned)


def add_exercise(
    plan: WorkoutPlan,
    exercise: ExerciseDefinition,
    *,
    target_sets: int = DEFAULT_TARGET_SETS,
    target_reps: int = DEFAULT_TARGET_REPS,
    rest_time_seconds: int | None = DEFAULT_REST_SECONDS,
) -> WorkoutPlan:
    if exercise.id in plan.exercise_ids:
        raise PlanEditError(f"Exercise '{exercise.id}' is already in plan '{plan.name}'")
    item = _planned(
        exercise,
        target_sets=target_sets,
        target_reps=target_reps,
        rest_time_seconds=rest_time_seconds,
    )
    return _with_exercises(plan, (*plan.exercises, item))


def remove_exercise(plan: WorkoutPlan, exercise_id: str) -> WorkoutPlan:
    index = _index_of(plan, exercise_id)
    return _with_exercises(plan, plan.exercises[:index] + plan.exercises[index + 1 :])


def _update(plan: WorkoutPlan, exercise_id: str, **changes: int | None) -> WorkoutPlan:
    index = _index_of(plan, exercise_id)
    current = plan.exercises[index]
    updated = _planned(
        current.exercise,
        target_sets=changes.get("target_sets", current.target_sets),  # type: ignore[arg-type]
        target_reps=changes.get("target_reps", current.target_reps),  # type: ignore[arg-type]
        rest_time_seconds=changes.get("rest_time_seconds", current.rest_time_seconds),
    )
    items = list(plan.exercises)
    items[index] = updated
    return _with_exercises(plan, items)


def update_sets(plan: WorkoutPlan, exercise_id: str, target_sets: int) -> WorkoutPlan:
    return _update(plan, exercise_id, target_sets=target_sets)


def update_reps(plan: WorkoutPlan, exercise_id: str, target_reps: int) -> WorkoutPlan:
    return _update(plan, exercise_id, target_reps=target_reps)


def update_volume(
    plan: WorkoutPlan, exercise_id: str, target_sets: int, target_reps: int
) -> WorkoutPlan:
    return _update(plan, exercise_id, target_sets=target_sets, target_reps=target_reps)


def update_rest(plan: WorkoutPlan, exercise_id: str, rest_time_seconds: int | None) -> WorkoutPlan:
    return _update(plan, exercise_id, rest_time_seconds=rest_time_seconds)


def move_exercise(plan: WorkoutPlan, exercise_id: str, new_index: int) -> WorkoutPlan:
    index = _index_of(plan, exercise_id)
    items = list(plan.exercises)
    item = items.pop(index)
    target = max(0, min(len(items), new_index))
    items.insert(target, item)
    return _with_exercises(plan, items)


def rename_plan(plan: WorkoutPlan, name: str) -> WorkoutPlan:
    if not name.strip():
        raise PlanEditError("Plan name must not be empty")
    return replace(plan, name=name.strip())
