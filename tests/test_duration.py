from __future__ import annotations

import pytest

from liftplan.workout.duration import estimate_duration, estimate_exercise_minutes
from liftplan.workout.model import ExerciseDefinition, PlannedExercise

PRESS = ExerciseDefinition(id="press", name="Press", category="strength", muscle_groups=("shoulders",))


def test_single_exercise_formula() -> None:
    planned = PlannedExercise(exercise=PRESS, target_sets=3, rest_time_seconds=60)
    assert estimate_duration([planned]) == pytest.approx(4.25)


def test_unset_rest_defaults_to_sixty_seconds() -> None:
    planned = PlannedExercise(exercise=PRESS, target_sets=4, rest_time_seconds=None)
    assert estimate_exercise_minutes(planned) == pytest.approx((4 * 45 + 3 * 60) / 60)


def test_single_set_has_no_rest() -> None:
    planned = PlannedExercise(exercise=PRESS, target_sets=1, rest_time_seconds=120)
    assert estimate_exercise_minutes(planned) == pytest.approx(0.75)


def test_definitions_use_default_parameters() -> None:
    assert estimate_duration([PRESS]) == pytest.approx(4.25)


def test_duration_is_non_decreasing_as_exercises_are_appended() -> None:
    items = [
        PlannedExercise(exercise=PRESS, target_sets=sets, rest_time_seconds=rest)
        for sets, rest in ((3, 60), (1, 0), (5, 90), (2, None), (4, 0))
    ]
    totals = [estimate_duration(items[:n]) for n in range(len(items) + 1)]
    assert totals[0] == 0.0
    assert all(later >= earlier for earlier, later in zip(totals, totals[1:]))
