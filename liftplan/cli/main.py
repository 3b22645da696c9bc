"""Terminal CLI entrypoint for liftplan."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from liftplan.workout.advisor import analyze_balance
from liftplan.workout.editor import build_plan
from liftplan.workout.library import build_plan_from_preset, list_exercises, list_presets
from liftplan.workout.model import DIFFICULTIES, ExerciseDefinition, WorkoutPlan
from liftplan.workout.parser import CatalogParseError, load_catalog
from liftplan.workout.selector import generate_plan
from liftplan.workout.user_workouts import list_user_plans, load_user_plan, save_user_plan


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Balanced workout plan generator")
    parser.add_argument("--list-exercises", action="store_true", help="List catalog exercises")
    parser.add_argument("--list-presets", action="store_true", help="List built-in presets")
    parser.add_argument("--list-saved", action="store_true", help="List saved plans")
    parser.add_argument("--preset", default=None, help="Build the plan from a preset key")
    parser.add_argument("--generate", action="store_true", help="Generate a plan from filters")
    parser.add_argument(
        "--duration",
        type=float,
        default=45.0,
        help="Target session duration in minutes for --generate",
    )
    parser.add_argument(
        "--difficulty",
        choices=DIFFICULTIES,
        default="intermediate",
        help="Difficulty filter for --generate",
    )
    parser.add_argument(
        "--body-part",
        action="append",
        default=[],
        dest="body_parts",
        help="Target body part (repeatable). Omit for full body",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="Maximum number of exercises in the generated plan",
    )
    parser.add_argument("--name", default="Generated Workout", help="Plan name for --generate")
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Exercise catalog file (.json or .csv). Defaults to the built-in catalog",
    )
    parser.add_argument("--save", action="store_true", help="Save the resulting plan locally")
    parser.add_argument(
        "--plans-dir",
        type=Path,
        default=None,
        help="Directory for saved plans (default ~/.liftplan/plans)",
    )
    parser.add_argument("--analyze", type=Path, default=None, help="Analyze a saved plan file")
    parser.add_argument(
        "--ui-web",
        action="store_true",
        help="Launch web UI (NiceGUI) plan builder",
    )
    parser.add_argument("--web-host", default="127.0.0.1", help="Host bind for --ui-web")
    parser.add_argument("--web-port", type=int, default=8089, help="Port for --ui-web")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log selection decisions")
    return parser


def format_plan(plan: WorkoutPlan) -> list[str]:
    lines = [plan.name]
    if plan.description:
        lines.append(plan.description)
    for idx, item in enumerate(plan.exercises, start=1):
        rest = f"{item.rest_time_seconds}s" if item.rest_time_seconds is not None else "-"
        lines.append(
            f"{idx:>2}. {item.name:<28} {item.target_sets}x{item.target_reps:<4} rest {rest:<5}"
            f" [{', '.join(item.muscle_groups)}]"
        )
    lines.append(
        f"Estimated duration: {plan.estimated_duration_minutes:.1f} min | "
        f"Difficulty: {plan.difficulty}"
    )
    report = analyze_balance(plan)
    status = "balanced" if report.is_balanced else "unbalanced"
    lines.append(
        f"Balance: push={report.push_count} pull={report.pull_count} "
        f"core={report.core_count} ({status})"
    )
    for suggestion in report.suggestions:
        lines.append(f"  - {suggestion}")
    return lines


def _load_catalog(path: Path | None) -> list[ExerciseDefinition]:
    if path is None:
        return list(list_exercises())
    return load_catalog(path)


def run_generate(args: argparse.Namespace, catalog: list[ExerciseDefinition]) -> WorkoutPlan:
    picked = generate_plan(
        catalog,
        target_duration_minutes=args.duration,
        difficulty=args.difficulty,
        body_parts=args.body_parts,
        target_exercise_count=args.count,
    )
    return build_plan(args.name, picked, target_body_parts=args.body_parts)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        catalog = _load_catalog(args.catalog)
    except (OSError, CatalogParseError) as exc:
        print(f"Error: cannot load catalog: {exc}")
        return 1

    if args.ui_web:
        from liftplan.ui.web_app import run_web_ui

        return run_web_ui(catalog=catalog, host=args.web_host, port=args.web_port)

    if args.list_exercises:
        for exercise in catalog:
            print(
                f"{exercise.id:<24} {exercise.name:<28} {exercise.difficulty:<12} "
                f"{', '.join(exercise.muscle_groups)}"
            )
        return 0

    if args.list_presets:
        for preset in list_presets():
            parts = ", ".join(preset.body_parts) or "full body"
            print(
                f"{preset.key:<20} {preset.name:<22} {preset.duration_minutes:>3} min "
                f"{preset.difficulty:<12} {parts}"
            )
        return 0

    if args.list_saved:
        for item in list_user_plans(base_dir=args.plans_dir):
            print(
                f"{item.key:<24} {item.name:<28} {item.exercise_count:>2} exercises "
                f"{item.estimated_duration_minutes:.1f} min"
            )
        return 0

    if args.analyze is not None:
        try:
            plan = load_user_plan(args.analyze)
        except (OSError, CatalogParseError) as exc:
            print(f"Error: cannot load plan: {exc}")
            return 1
        print("\n".join(format_plan(plan)))
        return 0

    if args.preset is not None:
        try:
            plan = build_plan_from_preset(args.preset, catalog=catalog, target_exercise_count=args.count)
        except ValueError as exc:
            print(f"Error: {exc}")
            return 1
    elif args.generate:
        plan = run_generate(args, catalog)
    else:
        parser.print_help()
        return 1

    print("\n".join(format_plan(plan)))
    if not plan.exercises:
        print("No exercises matched the requested filters")
        return 0

    if args.save:
        saved = save_user_plan(plan, base_dir=args.plans_dir)
        print(f"Saved plan to {saved}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
