"""User-saved workout plans stored locally."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path

from liftplan.workout.model import WorkoutPlan
from liftplan.workout.parser import exercise_to_dict, load_plan

logger = logging.getLogger(__name__)


def _default_plans_dir() -> Path:
    return Path.home() / ".liftplan" / "plans"


def _slugify(name: str) -> str:
    s = re.sub(r"[^a-zA-Z0-9]+", "-", name.strip().lower()).strip("-")
    return s or "custom-plan"


@dataclass(frozen=True)
class UserPlan:
    key: str
    name: str
    exercise_count: int
    estimated_duration_minutes: float
    path: Path


def list_user_plans(base_dir: Path | None = None) -> list[UserPlan]:
    root = base_dir or _default_plans_dir()
    if not root.exists():
        return []
    out: list[UserPlan] = []
    for file in sorted(root.glob("*.json")):
        try:
            payload = json.loads(file.read_text(encoding="utf-8"))
            name = str(payload.get("name", file.stem))
            count = len(payload.get("exercises", []))
            minutes = float(payload.get("estimated_duration_minutes", 0.0))
        except (OSError, ValueError, TypeError, AttributeError) as exc:
            logger.debug("unreadable plan file %s: %s", file, exc)
            name = file.stem
            count = 0
            minutes = 0.0
        out.append(
            UserPlan(
                key=file.stem,
                name=name,
                exercise_count=count,
                estimated_duration_minutes=minutes,
                path=file,
            )
        )
    return out


def load_user_plan(path: Path) -> WorkoutPlan:
    return load_plan(path)


def save_user_plan(
    plan: WorkoutPlan,
    *,
    base_dir: Path | None = None,
    overwrite_key: str | None = None,
) -> Path:
    if not plan.exercises:
        raise ValueError("Plan must include at least one exercise")
    root = base_dir or _default_plans_dir()
    root.mkdir(parents=True, exist_ok=True)
    key = overwrite_key or _slugify(plan.name)
    out = root / f"{key}.json"
    payload = {
        "name": plan.name,
        "description": plan.description,
        "target_body_parts": list(plan.target_body_parts),
        "estimated_duration_minutes": round(plan.estimated_duration_minutes, 2),
        "difficulty": plan.difficulty,
        "exercises": [
            {
                "exercise": exercise_to_dict(item.exercise),
                "target_sets": int(item.target_sets),
                "target_reps": int(item.target_reps),
                "rest_time_seconds": item.rest_time_seconds,
            }
            for item in plan.exercises
        ],
    }
    out.write_text(json.dumps(payload, ensure_ascii=True, indent=2), encoding="utf-8")
    return out
