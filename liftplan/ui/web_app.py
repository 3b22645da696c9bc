"""NiceGUI web UI for the liftplan plan builder."""

from __future__ import annotations

from typing import Sequence

from nicegui import ui

from liftplan.ui.controller import PlanBuilderController
from liftplan.workout.editor import PlanEditError
from liftplan.workout.library import list_presets
from liftplan.workout.model import DIFFICULTIES, ExerciseDefinition

BODY_PARTS: tuple[str, ...] = (
    "chest",
    "back",
    "shoulders",
    "biceps",
    "triceps",
    "quadriceps",
    "hamstrings",
    "glutes",
    "calves",
    "abs",
    "core",
)


def _fmt_minutes(value: float) -> str:
    return f"{value:.1f} min"


def _option_label(exercise: ExerciseDefinition) -> str:
    groups = ", ".join(exercise.muscle_groups[:3])
    return f"{exercise.name} ({exercise.difficulty}; {groups})"


def _build_page(controller: PlanBuilderController) -> None:
    with ui.column().classes("w-full gap-4"):
        ui.label("LIFTPLAN").classes("text-xl font-semibold tracking-wide")

        with ui.card().classes("w-full"):
            ui.label("Generate").classes("text-lg font-semibold")
            with ui.row().classes("w-full items-end gap-2"):
                name_input = ui.input("Plan name", value="My Workout").classes("w-1/4")
                duration_input = ui.number("Duration (min)", value=45, min=5, max=180)
                difficulty_select = ui.select(
                    list(DIFFICULTIES), value="intermediate", label="Difficulty"
                ).classes("min-w-[160px]")
                parts_select = ui.select(
                    list(BODY_PARTS), multiple=True, value=[], label="Body parts"
                ).classes("min-w-[280px]")
                count_input = ui.number("Max exercises (0 = none)", value=0, min=0, max=30)
                generate_btn = ui.button("Generate")
            with ui.row().classes("w-full items-end gap-2"):
                preset_select = ui.select(
                    {preset.key: preset.name for preset in list_presets()},
                    label="Preset",
                ).classes("min-w-[240px]")
                preset_btn = ui.button("Load preset")
                clear_btn = ui.button("Clear plan").props("outline")

        with ui.card().classes("w-full"):
            plan_title = ui.label("My Workout").classes("text-lg font-semibold")
            summary_label = ui.label("0 exercises").classes("text-sm")
            plan_table = ui.table(
                columns=[
                    {"name": "idx", "label": "#", "field": "idx"},
                    {"name": "name", "label": "Exercise", "field": "name"},
                    {"name": "muscles", "label": "Muscles", "field": "muscles"},
                    {"name": "difficulty", "label": "Level", "field": "difficulty"},
                    {"name": "sets", "label": "Sets", "field": "sets"},
                    {"name": "reps", "label": "Reps", "field": "reps"},
                    {"name": "rest", "label": "Rest (s)", "field": "rest"},
                ],
                rows=[],
                row_key="idx",
            ).classes("w-full")
            with ui.row().classes("w-full items-end gap-2"):
                edit_select = ui.select({}, label="Exercise").classes("min-w-[240px]")
                sets_input = ui.number("Sets", value=3, min=1, max=10)
                reps_input = ui.number("Reps", value=10, min=1, max=50)
                apply_btn = ui.button("Apply")
                up_btn = ui.button("Move up").props("outline")
                remove_btn = ui.button("Remove").props("color=negative")
            with ui.row().classes("w-full items-end gap-2"):
                add_select = ui.select({}, label="Add from library", with_input=True).classes(
                    "min-w-[420px]"
                )
                add_btn = ui.button("Add")
                save_btn = ui.button("Save plan")

        with ui.card().classes("w-full"):
            ui.label("Balance").classes("text-lg font-semibold")
            balance_label = ui.label("Push 0 | Pull 0 | Core 0").classes("text-sm")
            suggestions_column = ui.column().classes("gap-1")

    def refresh_ui() -> None:
        plan = controller.plan
        plan_title.text = plan.name
        summary_label.text = (
            f"{len(plan.exercises)} exercises | {_fmt_minutes(plan.estimated_duration_minutes)}"
            f" | {plan.difficulty}"
        )
        plan_table.rows = [
            {
                "idx": idx,
                "name": item.name,
                "muscles": ", ".join(item.muscle_groups),
                "difficulty": item.difficulty,
                "sets": item.target_sets,
                "reps": item.target_reps,
                "rest": item.rest_time_seconds if item.rest_time_seconds is not None else "-",
            }
            for idx, item in enumerate(plan.exercises, start=1)
        ]
        plan_table.update()

        edit_select.options = {item.id: item.name for item in plan.exercises}
        if edit_select.value not in edit_select.options:
            edit_select.value = None
        edit_select.update()
        add_select.options = {
            exercise.id: _option_label(exercise) for exercise in controller.available()
        }
        add_select.value = None
        add_select.update()

        report = controller.report
        status = "balanced" if report.is_balanced else "unbalanced"
        balance_label.text = (
            f"Push {report.push_count} | Pull {report.pull_count} | "
            f"Core {report.core_count} ({status})"
        )
        suggestions_column.clear()
        with suggestions_column:
            if not report.suggestions:
                ui.label("No suggestions").classes("text-sm text-green-600")
            for text in report.suggestions:
                ui.label(text).classes("text-sm text-orange-600")

    def on_generate() -> None:
        count = int(count_input.value or 0)
        controller.generate(
            name=str(name_input.value or "My Workout"),
            duration_minutes=float(duration_input.value or 0),
            difficulty=str(difficulty_select.value or "intermediate"),
            body_parts=list(parts_select.value or []),
            exercise_count=count if count > 0 else None,
        )
        if not controller.plan.exercises:
            ui.notify("No exercises match these filters", color="warning")
        refresh_ui()

    def on_load_preset() -> None:
        if not preset_select.value:
            ui.notify("Pick a preset first", color="negative")
            return
        controller.load_preset(str(preset_select.value))
        refresh_ui()

    def on_clear() -> None:
        controller.reset(str(name_input.value or "My Workout"))
        refresh_ui()

    def run_edit(action: str) -> None:
        exercise_id = edit_select.value
        if not exercise_id:
            ui.notify("Pick an exercise from the plan", color="negative")
            return
        try:
            if action == "apply":
                controller.set_volume(
                    exercise_id, int(sets_input.value or 0), int(reps_input.value or 0)
                )
            elif action == "up":
                index = controller.plan.exercise_ids.index(exercise_id)
                controller.move(exercise_id, index - 1)
            else:
                controller.remove(exercise_id)
        except PlanEditError as exc:
            ui.notify(str(exc), color="negative")
        refresh_ui()

    def on_add() -> None:
        if not add_select.value:
            return
        try:
            controller.add(str(add_select.value))
        except PlanEditError as exc:
            ui.notify(str(exc), color="negative")
        refresh_ui()

    def on_save() -> None:
        try:
            if name_input.value:
                controller.rename(str(name_input.value))
            saved = controller.save()
        except ValueError as exc:
            ui.notify(str(exc), color="negative")
            return
        ui.notify(f"Plan saved: {saved.name}", color="positive")
        refresh_ui()

    generate_btn.on_click(on_generate)
    preset_btn.on_click(on_load_preset)
    clear_btn.on_click(on_clear)
    apply_btn.on_click(lambda: run_edit("apply"))
    up_btn.on_click(lambda: run_edit("up"))
    remove_btn.on_click(lambda: run_edit("remove"))
    add_btn.on_click(on_add)
    save_btn.on_click(on_save)

    refresh_ui()


def run_web_ui(
    *,
    catalog: Sequence[ExerciseDefinition] | None = None,
    host: str = "127.0.0.1",
    port: int = 8089,
) -> int:
    items = None if catalog is None else tuple(catalog)

    # Each client session gets its own controller and plan.
    @ui.page("/")
    def index() -> None:
        _build_page(PlanBuilderController(catalog=items))

    ui.run(host=host, port=port, reload=False, title="liftplan")
    return 0
