from __future__ import annotations

from pathlib import Path

import pytest

from liftplan.ui.controller import PlanBuilderController
from liftplan.workout.editor import PlanEditError


def test_builder_generate_edit_save_reopen(tmp_path: Path) -> None:
    controller = PlanBuilderController(plans_dir=tmp_path)
    assert controller.plan.exercises == ()

    plan = controller.generate(
        name="Lunch Session",
        duration_minutes=20,
        difficulty="beginner",
        body_parts=[],
    )
    assert plan.name == "Lunch Session"
    assert plan.exercise_ids == ("push_ups", "squats", "pull_ups", "plank", "lunges")
    assert "push_ups" not in {item.id for item in controller.available()}

    controller.set_sets("plank", 2)
    controller.set_reps("plank", 30)
    controller.remove("lunges")
    controller.add("dead_bug")
    controller.move("dead_bug", 0)
    assert controller.plan.exercise_ids == ("dead_bug", "push_ups", "squats", "pull_ups", "plank")
    assert controller.plan.exercises[4].target_reps == 30

    report = controller.report
    assert report.core_count == 2

    saved = controller.save()
    controller.reset()
    assert controller.plan.exercises == ()

    assert [item.key for item in controller.saved_plans()] == ["lunch-session"]
    reopened = controller.open_saved(saved)
    assert reopened.exercise_ids[0] == "dead_bug"


def test_builder_rejects_unknown_and_duplicate_exercises() -> None:
    controller = PlanBuilderController()
    controller.add("push_ups")
    with pytest.raises(PlanEditError):
        controller.add("push_ups")
    with pytest.raises(PlanEditError):
        controller.add("does_not_exist")


def test_builder_with_custom_catalog_and_preset() -> None:
    controller = PlanBuilderController(catalog=[])
    assert controller.generate(
        name="Nothing", duration_minutes=30, difficulty="advanced", body_parts=["chest"]
    ).exercises == ()
    assert controller.load_preset("upper_body_power").exercises == ()


def test_builder_volume_edit_keeps_plan_on_error() -> None:
    controller = PlanBuilderController()
    controller.add("push_ups")
    before = controller.plan

    with pytest.raises(PlanEditError):
        controller.set_volume("push_ups", 5, 0)
    assert controller.plan is before

    controller.set_volume("push_ups", 5, 12)
    assert controller.plan.exercises[0].target_sets == 5
    assert controller.plan.exercises[0].target_reps == 12
