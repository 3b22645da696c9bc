"""Balance report and advisory suggestions for a plan."""

from __future__ import annotations

from liftplan.workout.balance import ExerciseSource, classify_exercise, iter_exercises
from liftplan.workout.model import BalanceReport


ADD_PULL = (
    "Add more pulling exercises (back, biceps, hamstrings, glutes) "
    "to balance your pushing work."
)
ADD_PUSH = (
    "Add more pushing exercises (chest, shoulders, triceps, quadriceps) "
    "to balance your pulling work."
)
ADD_CORE = "Add a core exercise (abs or core) to round out the session."
MIX_DIFFICULTY = (
    "Mix difficulty levels: pair beginner movements with intermediate or advanced ones."
)

CORE_CHECK_MIN_EXERCISES = 4
DIFFICULTY_CHECK_MIN_EXERCISES = 3


def analyze_balance(exercises: ExerciseSource) -> BalanceReport:
    """Count push/pull/core tags and list suggestions in display order.

    Counts overlap: an exercise tagged both push and pull adds to both.
    """
    items = iter_exercises(exercises)
    push_count = 0
    pull_count = 0
    core_count = 0
    for item in items:
        tags = classify_exercise(item)
        push_count += tags.is_push
        pull_count += tags.is_pull
        core_count += tags.is_core

    suggestions: list[str] = []
    if push_count > pull_count + 1:
        suggestions.append(ADD_PULL)
    elif pull_count > push_count + 1:
        suggestions.append(ADD_PUSH)

    if len(items) >= CORE_CHECK_MIN_EXERCISES and core_count == 0:
        suggestions.append(ADD_CORE)

    if len(items) >= DIFFICULTY_CHECK_MIN_EXERCISES:
        levels = {item.difficulty for item in items}
        has_beginner = "beginner" in levels
        has_harder = bool(levels & {"intermediate", "advanced"})
        if not (has_beginner and has_harder):
            suggestions.append(MIX_DIFFICULTY)

    return BalanceReport(
        push_count=push_count,
        pull_count=pull_count,
        core_count=core_count,
        is_balanced=abs(push_count - pull_count) <= 1,
        suggestions=tuple(suggestions),
    )
