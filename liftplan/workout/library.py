"""Built-in exercise catalog and generation presets for common sessions."""

from __future__ import annotations

from dataclasses import dataclass

from liftplan.workout.editor import build_plan
from liftplan.workout.model import Difficulty, ExerciseDefinition, WorkoutPlan
from liftplan.workout.selector import generate_plan


def _exercise(
    key: str,
    name: str,
    category: str,
    muscles: tuple[str, ...],
    equipment: tuple[str, ...],
    difficulty: str,
) -> ExerciseDefinition:
    return ExerciseDefinition(
        id=key,
        name=name,
        category=category,  # type: ignore[arg-type]
        muscle_groups=muscles,
        equipment=equipment,
        difficulty=difficulty,  # type: ignore[arg-type]
    )


BUILTIN_CATALOG: tuple[ExerciseDefinition, ...] = (
    # Bodyweight
    _exercise("push_ups", "Push-ups", "strength", ("chest", "triceps", "shoulders"), ("bodyweight",), "beginner"),
    _exercise("squats", "Squats", "strength", ("quadriceps", "glutes", "hamstrings"), ("bodyweight",), "beginner"),
    _exercise("pull_ups", "Pull-ups", "strength", ("back", "biceps", "lats"), ("pull-up-bar",), "intermediate"),
    _exercise("plank", "Plank", "strength", ("abs", "shoulders", "back"), ("bodyweight",), "beginner"),
    _exercise("lunges", "Lunges", "strength", ("quadriceps", "glutes", "hamstrings"), ("bodyweight",), "beginner"),
    _exercise("inverted_rows", "Inverted Rows", "strength", ("back", "biceps"), ("bodyweight",), "intermediate"),
    _exercise("burpees", "Burpees", "cardio", ("quadriceps", "chest", "shoulders"), ("bodyweight",), "intermediate"),
    _exercise("mountain_climbers", "Mountain Climbers", "cardio", ("abs", "shoulders", "quadriceps"), ("bodyweight",), "intermediate"),
    _exercise("jumping_jacks", "Jumping Jacks", "cardio", ("quadriceps", "calves", "shoulders"), ("bodyweight",), "beginner"),
    # Dumbbell
    _exercise("db_bench_press", "Dumbbell Bench Press", "strength", ("chest", "triceps", "shoulders"), ("dumbbells", "bench"), "intermediate"),
    _exercise("db_rows", "Dumbbell Rows", "strength", ("back", "biceps", "lats"), ("dumbbells",), "intermediate"),
    _exercise("db_shoulder_press", "Dumbbell Shoulder Press", "strength", ("shoulders", "triceps"), ("dumbbells",), "intermediate"),
    _exercise("db_bicep_curls", "Dumbbell Bicep Curls", "strength", ("biceps", "forearms"), ("dumbbells",), "beginner"),
    _exercise("db_goblet_squats", "Dumbbell Goblet Squats", "strength", ("quadriceps", "glutes"), ("dumbbells",), "beginner"),
    _exercise("db_romanian_deadlift", "Dumbbell Romanian Deadlift", "strength", ("hamstrings", "glutes", "lower_back"), ("dumbbells",), "intermediate"),
    _exercise("triceps_dips", "Triceps Dips", "strength", ("triceps", "chest"), ("bench",), "intermediate"),
    # Barbell
    _exercise("bb_deadlift", "Barbell Deadlift", "strength", ("back", "glutes", "hamstrings"), ("barbell",), "advanced"),
    _exercise("bb_bench_press", "Barbell Bench Press", "strength", ("chest", "triceps", "shoulders"), ("barbell", "bench"), "intermediate"),
    _exercise("bb_back_squat", "Barbell Back Squat", "strength", ("quadriceps", "glutes"), ("barbell", "squat-rack"), "intermediate"),
    _exercise("bb_overhead_press", "Barbell Overhead Press", "strength", ("shoulders", "triceps"), ("barbell",), "advanced"),
    _exercise("bb_bent_over_row", "Barbell Bent-over Row", "strength", ("back", "biceps", "lats"), ("barbell",), "advanced"),
    # Core
    _exercise("russian_twists", "Russian Twists", "strength", ("abs", "obliques"), ("bodyweight",), "beginner"),
    _exercise("dead_bug", "Dead Bug", "strength", ("abs", "lower_back"), ("bodyweight",), "beginner"),
    _exercise("bicycle_crunches", "Bicycle Crunches", "strength", ("abs", "obliques"), ("bodyweight",), "beginner"),
    _exercise("hanging_leg_raises", "Hanging Leg Raises", "strength", ("abs", "core"), ("pull-up-bar",), "advanced"),
    # Flexibility
    _exercise("downward_dog", "Downward Dog", "flexibility", ("hamstrings", "calves", "shoulders"), ("bodyweight",), "beginner"),
    _exercise("childs_pose", "Child's Pose", "flexibility", ("back", "shoulders"), ("bodyweight",), "beginner"),
)


@dataclass(frozen=True)
class WorkoutPreset:
    key: str
    name: str
    body_parts: tuple[str, ...]
    duration_minutes: int
    difficulty: Difficulty
    description: str = ""


PRESETS: tuple[WorkoutPreset, ...] = (
    WorkoutPreset(
        key="full_body_strength",
        name="Full Body Strength",
        body_parts=("chest", "back", "shoulders", "legs"),
        duration_minutes=45,
        difficulty="intermediate",
        description="Compound work for every major muscle group.",
    ),
    WorkoutPreset(
        key="upper_body_power",
        name="Upper Body Power",
        body_parts=("chest", "back", "shoulders", "biceps", "triceps"),
        duration_minutes=40,
        difficulty="advanced",
    ),
    WorkoutPreset(
        key="upper_body_strength",
        name="Upper Body Strength",
        body_parts=("chest", "back", "shoulders", "biceps", "triceps"),
        duration_minutes=45,
        difficulty="intermediate",
    ),
    WorkoutPreset(
        key="arms_and_shoulders",
        name="Arms & Shoulders",
        body_parts=("arms", "shoulders"),
        duration_minutes=30,
        difficulty="intermediate",
    ),
    WorkoutPreset(
        key="lower_body_blast",
        name="Lower Body Blast",
        body_parts=("quadriceps", "hamstrings", "glutes"),
        duration_minutes=35,
        difficulty="intermediate",
    ),
    WorkoutPreset(
        key="quick_full_body",
        name="Quick Full Body",
        body_parts=(),
        duration_minutes=20,
        difficulty="intermediate",
    ),
    WorkoutPreset(
        key="beginner_full_body",
        name="Beginner Full Body",
        body_parts=(),
        duration_minutes=30,
        difficulty="beginner",
        description="Gentle full-body session with no body-part filter.",
    ),
)


def list_exercises() -> tuple[ExerciseDefinition, ...]:
    return BUILTIN_CATALOG


def list_presets() -> tuple[WorkoutPreset, ...]:
    return PRESETS


def get_preset(preset_key: str) -> WorkoutPreset:
    preset = next((item for item in PRESETS if item.key == preset_key), None)
    if preset is None:
        raise ValueError(f"Unknown workout preset '{preset_key}'")
    return preset


def build_plan_from_preset(
    preset_key: str,
    catalog: tuple[ExerciseDefinition, ...] | list[ExerciseDefinition] | None = None,
    target_exercise_count: int | None = None,
) -> WorkoutPlan:
    preset = get_preset(preset_key)
    source = BUILTIN_CATALOG if catalog is None else catalog
    exercises = generate_plan(
        source,
        target_duration_minutes=preset.duration_minutes,
        difficulty=preset.difficulty,
        body_parts=preset.body_parts,
        target_exercise_count=target_exercise_count,
    )
    return build_plan(
        preset.name,
        exercises,
        description=preset.description,
        target_body_parts=preset.body_parts,
    )
