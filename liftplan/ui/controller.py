"""Plan builder state used by the web UI."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from liftplan.workout import editor
from liftplan.workout.advisor import analyze_balance
from liftplan.workout.catalog import filter_catalog
from liftplan.workout.library import BUILTIN_CATALOG, build_plan_from_preset
from liftplan.workout.model import BalanceReport, ExerciseDefinition, WorkoutPlan
from liftplan.workout.selector import generate_plan
from liftplan.workout.user_workouts import UserPlan, list_user_plans, load_user_plan, save_user_plan


class PlanBuilderController:
    """Holds the one mutable reference to the plan being edited."""

    def __init__(
        self,
        catalog: Sequence[ExerciseDefinition] | None = None,
        plans_dir: Path | None = None,
    ) -> None:
        self._catalog: tuple[ExerciseDefinition, ...] = tuple(
            BUILTIN_CATALOG if catalog is None else catalog
        )
        self._plans_dir = plans_dir
        self._plan = editor.new_plan("My Workout")

    @property
    def plan(self) -> WorkoutPlan:
        return self._plan

    @property
    def catalog(self) -> tuple[ExerciseDefinition, ...]:
        return self._catalog

    @property
    def report(self) -> BalanceReport:
        return analyze_balance(self._plan)

    def available(self, difficulty: str | None = None, body_parts: Sequence[str] = ()) -> list[ExerciseDefinition]:
        in_plan = set(self._plan.exercise_ids)
        return [
            exercise
            for exercise in filter_catalog(self._catalog, difficulty, body_parts)
            if exercise.id not in in_plan
        ]

    def generate(
        self,
        *,
        name: str,
        duration_minutes: float,
        difficulty: str,
        body_parts: Sequence[str],
        exercise_count: int | None = None,
    ) -> WorkoutPlan:
        picked = generate_plan(
            self._catalog,
            target_duration_minutes=duration_minutes,
            difficulty=difficulty,
            body_parts=body_parts,
            target_exercise_count=exercise_count,
        )
        self._plan = editor.build_plan(name, picked, target_body_parts=body_parts)
        return self._plan

    def load_preset(self, preset_key: str) -> WorkoutPlan:
        self._plan = build_plan_from_preset(preset_key, catalog=self._catalog)
        return self._plan

    def reset(self, name: str = "My Workout") -> None:
        self._plan = editor.new_plan(name)

    def rename(self, name: str) -> None:
        self._plan = editor.rename_plan(self._plan, name)

    def add(self, exercise_id: str) -> WorkoutPlan:
        exercise = self._lookup(exercise_id)
        self._plan = editor.add_exercise(self._plan, exercise)
        return self._plan

    def remove(self, exercise_id: str) -> WorkoutPlan:
        self._plan = editor.remove_exercise(self._plan, exercise_id)
        return self._plan

    def set_sets(self, exercise_id: str, target_sets: int) -> WorkoutPlan:
        self._plan = editor.update_sets(self._plan, exercise_id, target_sets)
        return self._plan

    def set_reps(self, exercise_id: str, target_reps: int) -> WorkoutPlan:
        self._plan = editor.update_reps(self._plan, exercise_id, target_reps)
        return self._plan

    def set_volume(self, exercise_id: str, target_sets: int, target_reps: int) -> WorkoutPlan:
        self._plan = editor.update_volume(self._plan, exercise_id, target_sets, target_reps)
        return self._plan

    def move(self, exercise_id: str, new_index: int) -> WorkoutPlan:
        self._plan = editor.move_exercise(self._plan, exercise_id, new_index)
        return self._plan

    def save(self, overwrite_key: str | None = None) -> Path:
        return save_user_plan(self._plan, base_dir=self._plans_dir, overwrite_key=overwrite_key)

    def saved_plans(self) -> list[UserPlan]:
        return list_user_plans(base_dir=self._plans_dir)

    def open_saved(self, path: Path) -> WorkoutPlan:
        self._plan = load_user_plan(path)
        return self._plan

    def _lookup(self, exercise_id: str) -> ExerciseDefinition:
        exercise = next((item for item in self._catalog if item.id == exercise_id), None)
        if exercise is None:
            raise editor.PlanEditError(f"Unknown exercise '{exercise_id}'")
        return exercise
