from __future__ import annotations

from liftplan.workout.advisor import analyze_balance
from liftplan.workout.balance import classify_exercise
from liftplan.workout.model import ExerciseDefinition
from liftplan.workout.selector import generate_plan


def _ex(key: str, difficulty: str, *muscles: str) -> ExerciseDefinition:
    return ExerciseDefinition(
        id=key,
        name=key,
        category="strength",
        muscle_groups=muscles,
        difficulty=difficulty,  # type: ignore[arg-type]
    )


PUSH_UP = _ex("push_up", "beginner", "chest", "triceps")
SQUAT = _ex("squat", "beginner", "quadriceps", "glutes")
PULL_UP = _ex("pull_up", "intermediate", "back", "biceps")


def _mixed_catalog(size: int) -> list[ExerciseDefinition]:
    out: list[ExerciseDefinition] = []
    for i in range(size):
        if i % 3 == 0:
            out.append(_ex(f"push_{i}", "beginner", "chest"))
        elif i % 3 == 1:
            out.append(_ex(f"pull_{i}", "intermediate", "back"))
        else:
            out.append(_ex(f"core_{i}", "beginner", "abs"))
    return out


def test_small_catalog_is_fully_selected() -> None:
    picked = generate_plan([PUSH_UP, SQUAT, PULL_UP], 45, "intermediate", [])
    assert picked == [PUSH_UP, SQUAT, PULL_UP]
    report = analyze_balance(picked)
    assert report.is_balanced
    assert report.suggestions == ()


def test_generation_is_deterministic() -> None:
    catalog = _mixed_catalog(30)
    first = generate_plan(catalog, 40, "beginner", [])
    for _ in range(3):
        assert generate_plan(catalog, 40, "beginner", []) == first


def test_no_duplicate_ids_even_with_repeated_catalog_entries() -> None:
    catalog = [PUSH_UP, PUSH_UP, PULL_UP, PULL_UP, SQUAT, PUSH_UP]
    picked = generate_plan(catalog, 120, "intermediate", [])
    ids = [item.id for item in picked]
    assert len(ids) == len(set(ids))


def test_exercise_count_budget_is_respected() -> None:
    picked = generate_plan(_mixed_catalog(40), 500, "beginner", [], target_exercise_count=5)
    assert len(picked) == 5


def test_unreachable_duration_terminates_with_whole_usable_catalog() -> None:
    catalog = [PUSH_UP, PULL_UP]
    picked = generate_plan(catalog, 10_000, "intermediate", [])
    assert picked == [PUSH_UP, PULL_UP]


def test_duration_budget_stops_selection() -> None:
    # 4.25 min per exercise at default parameters
    picked = generate_plan(_mixed_catalog(30), 10, "beginner", [])
    assert len(picked) == 3


def test_degenerate_inputs_return_empty() -> None:
    assert generate_plan(None, 45, "beginner", []) == []
    assert generate_plan([], 45, "beginner", []) == []
    assert generate_plan([PUSH_UP, PULL_UP], 0, "beginner", []) == []
    assert generate_plan([PUSH_UP, PULL_UP], -5, "beginner", []) == []


def test_core_waits_for_two_selected_exercises() -> None:
    crunch = _ex("crunch", "beginner", "abs")
    plank = _ex("plank", "beginner", "core")
    picked = generate_plan([crunch, PUSH_UP, plank, PULL_UP], 60, "beginner", [])
    # crunch enters during bootstrap, plank is the first core pick after two
    assert [item.id for item in picked] == ["crunch", "push_up", "plank", "pull_up"]


def test_only_one_core_after_bootstrap() -> None:
    catalog = [PUSH_UP, PULL_UP, _ex("crunch", "beginner", "abs"), _ex("plank", "beginner", "core")]
    picked = generate_plan(catalog, 60, "intermediate", [])
    assert [item.id for item in picked] == ["push_up", "pull_up", "crunch"]


def test_bootstrap_admits_an_unbalanced_pair() -> None:
    bench = _ex("bench", "beginner", "chest")
    dips = _ex("dips", "beginner", "triceps")
    press = _ex("press", "beginner", "shoulders")
    picked = generate_plan([bench, dips, press], 60, "beginner", [])
    assert [item.id for item in picked] == ["bench", "dips"]


def test_push_is_skipped_until_pull_catches_up() -> None:
    bench = _ex("bench", "beginner", "chest")
    dips = _ex("dips", "beginner", "triceps")
    press = _ex("press", "beginner", "shoulders")
    row = _ex("row", "beginner", "back")
    curl = _ex("curl", "beginner", "biceps")
    picked = generate_plan([bench, row, dips, press, curl], 60, "beginner", [])
    assert [item.id for item in picked] == ["bench", "row", "dips", "curl"]


def test_body_part_and_difficulty_filters_are_applied() -> None:
    deadlift = _ex("deadlift", "advanced", "back", "hamstrings")
    picked = generate_plan([PUSH_UP, deadlift, PULL_UP], 60, "beginner", ["back"])
    assert picked == [PULL_UP]


def test_long_plan_from_even_catalog_is_balanced() -> None:
    catalog = _mixed_catalog(60)
    pushes = sum(classify_exercise(item).is_push for item in catalog)
    pulls = sum(classify_exercise(item).is_pull for item in catalog)
    assert pushes == pulls

    picked = generate_plan(catalog, 60, "intermediate", [])
    assert len(picked) >= 6
    assert analyze_balance(picked).is_balanced
