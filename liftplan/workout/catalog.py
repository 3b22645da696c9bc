"""Catalog narrowing by difficulty and target body parts."""

from __future__ import annotations

from typing import Iterable

from liftplan.workout.model import ExerciseDefinition

# Permissive on purpose: only the opposite extreme is dropped.
_EXCLUDED_DIFFICULTY: dict[str, str] = {
    "beginner": "advanced",
    "advanced": "beginner",
}


def normalize_tag(value: str) -> str:
    return value.strip().lower()


# Region names that are not muscle groups themselves.
BODY_PART_ALIASES: dict[str, tuple[str, ...]] = {
    "legs": ("quadriceps", "hamstrings", "calves"),
    "arms": ("biceps", "triceps", "forearms"),
}


def expand_body_parts(body_parts: Iterable[str] | None) -> tuple[str, ...]:
    parts: list[str] = []
    for raw in body_parts or ():
        part = normalize_tag(raw)
        if not part:
            continue
        for term in (part, *BODY_PART_ALIASES.get(part, ())):
            if term not in parts:
                parts.append(term)
    return tuple(parts)


def _matches_body_parts(exercise: ExerciseDefinition, body_parts: tuple[str, ...]) -> bool:
    groups = [
        group for group in (normalize_tag(raw) for raw in exercise.muscle_groups or ()) if group
    ]
    for part in body_parts:
        for group in groups:
            if part in group or group in part:
                return True
    return False


def filter_catalog(
    catalog: Iterable[ExerciseDefinition] | None,
    difficulty: str | None,
    body_parts: Iterable[str] | None,
) -> list[ExerciseDefinition]:
    if catalog is None:
        return []

    excluded = _EXCLUDED_DIFFICULTY.get(normalize_tag(difficulty)) if difficulty else None
    parts = expand_body_parts(body_parts)

    out: list[ExerciseDefinition] = []
    for exercise in catalog:
        if excluded is not None and exercise.difficulty == excluded:
            continue
        if parts and not _matches_body_parts(exercise, parts):
            continue
        out.append(exercise)
    return out
