from __future__ import annotations

import pytest

from liftplan.workout.editor import (
    PlanEditError,
    add_exercise,
    build_plan,
    move_exercise,
    new_plan,
    remove_exercise,
    rename_plan,
    update_reps,
    update_rest,
    update_sets,
    update_volume,
)
from liftplan.workout.model import ExerciseDefinition

BENCH = ExerciseDefinition(
    id="bench", name="Bench", category="strength", muscle_groups=("chest",), difficulty="advanced"
)
ROW = ExerciseDefinition(
    id="row", name="Row", category="strength", muscle_groups=("back",), difficulty="advanced"
)
PLANK = ExerciseDefinition(
    id="plank", name="Plank", category="strength", muscle_groups=("abs",), difficulty="beginner"
)


def test_new_plan_is_empty_beginner() -> None:
    plan = new_plan("Empty", target_body_parts=["chest"])
    assert plan.exercises == ()
    assert plan.estimated_duration_minutes == 0.0
    assert plan.difficulty == "beginner"
    assert plan.target_body_parts == ("chest",)


def test_add_recomputes_derived_fields() -> None:
    plan = add_exercise(new_plan("Day"), BENCH)
    assert plan.estimated_duration_minutes == pytest.approx(4.25)
    assert plan.difficulty == "advanced"

    plan = add_exercise(plan, PLANK, target_sets=2, rest_time_seconds=30)
    assert plan.exercise_ids == ("bench", "plank")
    assert plan.estimated_duration_minutes == pytest.approx(4.25 + 2.0)
    assert plan.difficulty == "intermediate"


def test_add_rejects_duplicates() -> None:
    plan = add_exercise(new_plan("Day"), BENCH)
    with pytest.raises(PlanEditError):
        add_exercise(plan, BENCH)


def test_edits_return_new_plans() -> None:
    original = build_plan("Day", [BENCH, ROW])
    updated = update_sets(original, "row", 5)
    assert original.exercises[1].target_sets == 3
    assert updated.exercises[1].target_sets == 5
    assert updated.estimated_duration_minutes > original.estimated_duration_minutes

    updated = update_reps(updated, "row", 8)
    assert updated.exercises[1].target_reps == 8
    updated = update_rest(updated, "bench", None)
    assert updated.exercises[0].rest_time_seconds is None


def test_edit_validation() -> None:
    plan = build_plan("Day", [BENCH])
    with pytest.raises(PlanEditError):
        update_sets(plan, "bench", 0)
    with pytest.raises(PlanEditError):
        update_reps(plan, "bench", -1)
    with pytest.raises(PlanEditError):
        update_rest(plan, "bench", -10)
    with pytest.raises(PlanEditError):
        remove_exercise(plan, "missing")
    with pytest.raises(PlanEditError):
        rename_plan(plan, "  ")


def test_build_plan_drops_repeated_ids() -> None:
    plan = build_plan("Day", [BENCH, ROW, BENCH])
    assert plan.exercise_ids == ("bench", "row")


def test_remove_and_move_keep_order_consistent() -> None:
    plan = build_plan("Day", [BENCH, ROW, PLANK])
    moved = move_exercise(plan, "plank", 0)
    assert moved.exercise_ids == ("plank", "bench", "row")
    moved = move_exercise(moved, "plank", 99)
    assert moved.exercise_ids == ("bench", "row", "plank")

    removed = remove_exercise(plan, "row")
    assert removed.exercise_ids == ("bench", "plank")
    assert removed.estimated_duration_minutes == pytest.approx(8.5)
    assert rename_plan(removed, " Push ").name == "Push"


def test_update_volume_is_all_or_nothing() -> None:
    plan = build_plan("Day", [BENCH])
    updated = update_volume(plan, "bench", 4, 6)
    assert (updated.exercises[0].target_sets, updated.exercises[0].target_reps) == (4, 6)

    with pytest.raises(PlanEditError):
        update_volume(plan, "bench", 5, 0)
    assert plan.exercises[0].target_sets == 3
