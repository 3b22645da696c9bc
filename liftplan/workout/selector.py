"""Single-pass greedy selection of a balanced, time-boxed exercise list."""

from __future__ import annotations

import logging
from typing import Iterable

from liftplan.workout.balance import classify_exercise
from liftplan.workout.catalog import filter_catalog
from liftplan.workout.duration import estimate_duration
from liftplan.workout.model import ExerciseDefinition

logger = logging.getLogger(__name__)

# Below this many picks, candidates are taken regardless of balance.
BOOTSTRAP_COUNT = 2


def generate_plan(
    catalog: Iterable[ExerciseDefinition] | None,
    target_duration_minutes: float,
    difficulty: str | None,
    body_parts: Iterable[str] | None,
    target_exercise_count: int | None = None,
) -> list[ExerciseDefinition]:
    """Pick exercises in catalog order until the time or count budget is spent.

    Priority for each candidate, first match wins: the first core exercise
    once two picks exist, then push while push <= pull, then pull while
    pull <= push, then anything during the bootstrap phase. Nothing is
    reconsidered, so an adversarial catalog order can leave the result
    unbalanced; run ``analyze_balance`` on it afterwards.
    """
    candidates = filter_catalog(catalog, difficulty, body_parts)

    selected: list[ExerciseDefinition] = []
    seen: set[str] = set()
    push_count = 0
    pull_count = 0
    has_core = False

    for candidate in candidates:
        if candidate.id in seen:
            continue
        if estimate_duration(selected) >= target_duration_minutes:
            break
        if target_exercise_count is not None and len(selected) >= target_exercise_count:
            break

        tags = classify_exercise(candidate)
        if tags.is_core and not has_core and len(selected) >= BOOTSTRAP_COUNT:
            has_core = True
            reason = "core"
        elif tags.is_push and push_count <= pull_count:
            push_count += 1
            reason = "push"
        elif tags.is_pull and pull_count <= push_count:
            pull_count += 1
            reason = "pull"
        elif len(selected) < BOOTSTRAP_COUNT:
            if tags.is_push:
                push_count += 1
            if tags.is_pull:
                pull_count += 1
            reason = "bootstrap"
        else:
            logger.debug("skip %s (push=%d pull=%d)", candidate.id, push_count, pull_count)
            continue

        logger.debug("add %s as %s", candidate.id, reason)
        selected.append(candidate)
        seen.add(candidate.id)

    return selected
