"""Exercise catalog and saved plan file parser (CSV/JSON)."""

from __future__ import annotations

import csv
import json
import re
from pathlib import Path

from liftplan.workout.editor import PlanEditError, add_exercise, new_plan
from liftplan.workout.model import (
    CATEGORIES,
    DEFAULT_REST_SECONDS,
    DEFAULT_TARGET_REPS,
    DEFAULT_TARGET_SETS,
    DIFFICULTIES,
    ExerciseDefinition,
    WorkoutPlan,
)


class CatalogParseError(ValueError):
    """Raised when a catalog or plan file is invalid."""


_LIST_SPLIT = re.compile(r"[;|]")


def load_catalog(path: str | Path) -> list[ExerciseDefinition]:
    file_path = Path(path)
    suffix = file_path.suffix.lower()
    if suffix == ".json":
        return _load_json(file_path)
    if suffix == ".csv":
        return _load_csv(file_path)
    raise CatalogParseError(
        f"Unsupported catalog format '{file_path.suffix}'. Use .json or .csv"
    )


def _read_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CatalogParseError(f"Invalid JSON: {exc}") from exc


def _load_json(path: Path) -> list[ExerciseDefinition]:
    data = _read_json(path)
    if isinstance(data, dict):
        data = data.get("exercises")
    if not isinstance(data, list):
        raise CatalogParseError("Catalog JSON must be an array or contain an 'exercises' array")

    exercises: list[ExerciseDefinition] = []
    for i, raw in enumerate(data):
        if not isinstance(raw, dict):
            raise CatalogParseError(f"Exercise {i + 1}: must be an object")
        exercises.append(exercise_from_dict(raw, index=i))
    return _check_unique(exercises)


def _load_csv(path: Path) -> list[ExerciseDefinition]:
    rows: list[ExerciseDefinition] = []
    with path.open("r", encoding="utf-8", newline="") as handle:
        reader = csv.DictReader(handle)
        fields = set(reader.fieldnames or [])
        required = {"id", "name", "category", "difficulty"}
        if not required.issubset(fields):
            raise CatalogParseError(
                "CSV must contain headers: id,name,category,difficulty[,muscle_groups,equipment]"
            )

        for i, row in enumerate(reader):
            rows.append(
                _build_exercise(
                    id_obj=row.get("id"),
                    name_obj=row.get("name"),
                    category_obj=row.get("category"),
                    muscles_obj=_split_list(row.get("muscle_groups")),
                    equipment_obj=_split_list(row.get("equipment")),
                    difficulty_obj=row.get("difficulty"),
                    index=i,
                )
            )
    return _check_unique(rows)


def exercise_from_dict(raw: dict[str, object], *, index: int = 0) -> ExerciseDefinition:
    return _build_exercise(
        id_obj=raw.get("id"),
        name_obj=raw.get("name"),
        category_obj=raw.get("category"),
        muscles_obj=raw.get("muscle_groups", raw.get("muscleGroups")),
        equipment_obj=raw.get("equipment"),
        difficulty_obj=raw.get("difficulty"),
        index=index,
    )


def exercise_to_dict(exercise: ExerciseDefinition) -> dict[str, object]:
    return {
        "id": exercise.id,
        "name": exercise.name,
        "category": exercise.category,
        "muscle_groups": list(exercise.muscle_groups),
        "equipment": list(exercise.equipment),
        "difficulty": exercise.difficulty,
    }


def _build_exercise(
    *,
    id_obj: object,
    name_obj: object,
    category_obj: object,
    muscles_obj: object,
    equipment_obj: object,
    difficulty_obj: object,
    index: int,
) -> ExerciseDefinition:
    exercise_id = _parse_str_field(raw=id_obj, field_name="id", index=index)
    name = _parse_str_field(raw=name_obj, field_name="name", index=index)
    category = _parse_choice_field(
        raw=category_obj, field_name="category", choices=CATEGORIES, index=index
    )
    difficulty = _parse_choice_field(
        raw=difficulty_obj, field_name="difficulty", choices=DIFFICULTIES, index=index
    )
    return ExerciseDefinition(
        id=exercise_id,
        name=name,
        category=category,  # type: ignore[arg-type]
        muscle_groups=_parse_list_field(raw=muscles_obj, field_name="muscle_groups", index=index),
        equipment=_parse_list_field(raw=equipment_obj, field_name="equipment", index=index),
        difficulty=difficulty,  # type: ignore[arg-type]
    )


def _check_unique(exercises: list[ExerciseDefinition]) -> list[ExerciseDefinition]:
    seen: set[str] = set()
    for i, exercise in enumerate(exercises):
        if exercise.id in seen:
            raise CatalogParseError(f"Exercise {i + 1}: duplicate id '{exercise.id}'")
        seen.add(exercise.id)
    return exercises


def _split_list(raw: str | None) -> list[str]:
    if raw is None or not raw.strip():
        return []
    return _LIST_SPLIT.split(raw)


def _parse_str_field(*, raw: object, field_name: str, index: int) -> str:
    if not isinstance(raw, str) or not raw.strip():
        raise CatalogParseError(f"Exercise {index + 1}: invalid {field_name}")
    return raw.strip()


def _parse_choice_field(
    *, raw: object, field_name: str, choices: tuple[str, ...], index: int
) -> str:
    value = str(raw).strip().lower() if raw is not None else ""
    if value not in choices:
        raise CatalogParseError(
            f"Exercise {index + 1}: {field_name} must be one of {', '.join(choices)}"
        )
    return value


def _parse_list_field(*, raw: object, field_name: str, index: int) -> tuple[str, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise CatalogParseError(f"Exercise {index + 1}: {field_name} must be a list")
    return tuple(str(item).strip().lower() for item in raw if str(item).strip())


def load_plan(path: str | Path) -> WorkoutPlan:
    """Load a saved plan JSON, recomputing duration and difficulty."""
    file_path = Path(path)
    data = _read_json(file_path)
    if not isinstance(data, dict):
        raise CatalogParseError("Plan JSON must be an object")

    name_obj = data.get("name", file_path.stem)
    if not isinstance(name_obj, str):
        raise CatalogParseError("Plan field 'name' must be a string")
    description_obj = data.get("description", "")
    body_parts_obj = data.get("target_body_parts", [])
    if not isinstance(body_parts_obj, list):
        raise CatalogParseError("Plan field 'target_body_parts' must be an array")
    items_obj = data.get("exercises")
    if not isinstance(items_obj, list):
        raise CatalogParseError("Plan field 'exercises' must be an array")

    plan = new_plan(
        name_obj.strip() or file_path.stem,
        description=str(description_obj or ""),
        target_body_parts=[str(part) for part in body_parts_obj],
    )
    for i, raw in enumerate(items_obj):
        if not isinstance(raw, dict) or not isinstance(raw.get("exercise"), dict):
            raise CatalogParseError(f"Exercise {i + 1}: must be an object with 'exercise'")
        exercise = exercise_from_dict(raw["exercise"], index=i)
        try:
            plan = add_exercise(
                plan,
                exercise,
                target_sets=_parse_int(raw.get("target_sets", DEFAULT_TARGET_SETS), "target_sets", i),
                target_reps=_parse_int(raw.get("target_reps", DEFAULT_TARGET_REPS), "target_reps", i),
                rest_time_seconds=_parse_optional_int(
                    raw.get("rest_time_seconds", DEFAULT_REST_SECONDS), "rest_time_seconds", i
                ),
            )
        except PlanEditError as exc:
            raise CatalogParseError(f"Exercise {i + 1}: {exc}") from exc
    return plan


def _parse_int(raw: object, field_name: str, index: int) -> int:
    if raw is None or isinstance(raw, bool):
        raise CatalogParseError(f"Exercise {index + 1}: invalid {field_name}")
    try:
        return int(str(raw).strip())
    except ValueError as exc:
        raise CatalogParseError(f"Exercise {index + 1}: invalid {field_name}") from exc


def _parse_optional_int(raw: object, field_name: str, index: int) -> int | None:
    if raw is None:
        return None
    return _parse_int(raw, field_name, index)
