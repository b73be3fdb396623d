"""Helpers that rebuild models from stored JSON blobs.

Stored blobs may come from older versions of the app or be hand-edited, so
the builders skip malformed parts instead of failing. A blob that cannot be
salvaged at all yields None.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from src.core.catalog import get_exercise
from src.models.exercise import ExerciseRecord
from src.models.user_profile import ProfileForm
from src.models.workout_log import CompletedExercises
from src.models.workout_plan import DaySlot, PlanResult

logger = logging.getLogger(__name__)


def form_from_dict(form_data: Any) -> Optional[ProfileForm]:
    if not isinstance(form_data, dict):
        return None

    # Drop individual fields that no longer validate and keep the rest.
    cleaned = dict(form_data)
    for _ in range(len(cleaned) + 1):
        try:
            return ProfileForm(**cleaned)
        except ValidationError as e:
            bad = {str(err["loc"][0]) for err in e.errors() if err["loc"]}
            if not bad & cleaned.keys():
                return None
            for field in bad:
                cleaned.pop(field, None)
    return None


def _exercise_from_entry(entry: Any) -> Optional[ExerciseRecord]:
    if isinstance(entry, str):
        return get_exercise(entry)
    if isinstance(entry, dict):
        return get_exercise(str(entry.get("id", "")))
    return None


def _day_from_dict(day_data: Any) -> Optional[DaySlot]:
    if not isinstance(day_data, dict):
        return None

    exercises: List[ExerciseRecord] = []
    seen = set()
    entries = day_data.get("exercises", [])
    if isinstance(entries, list):
        for entry in entries:
            exercise = _exercise_from_entry(entry)
            if exercise is None or exercise.id in seen:
                continue
            seen.add(exercise.id)
            exercises.append(exercise)

    try:
        return DaySlot(
            day=day_data.get("day", "Day"),
            split_type=day_data.get("split_type", "full"),
            label=day_data.get("label", ""),
            exercises=exercises,
        )
    except ValidationError:
        return None


def plan_to_dict(plan: PlanResult) -> Dict[str, Any]:
    """Serialize a plan snapshot. Exercises are stored by id only."""
    data = plan.model_dump(mode="json", exclude={"schedule"})
    data["schedule"] = [
        {
            "day": slot.day,
            "split_type": slot.split_type,
            "label": slot.label,
            "exercises": [ex.id for ex in slot.exercises],
        }
        for slot in plan.schedule
    ]
    return data


def plan_from_dict(plan_data: Any) -> Optional[PlanResult]:
    """Rebuild a plan snapshot, resolving exercise ids against the catalog."""
    if not isinstance(plan_data, dict):
        return None

    schedule = []
    raw_schedule = plan_data.get("schedule", [])
    if isinstance(raw_schedule, list):
        for day_data in raw_schedule:
            day = _day_from_dict(day_data)
            if day is not None:
                schedule.append(day)

    fields = {k: v for k, v in plan_data.items() if k != "schedule"}
    try:
        return PlanResult(**fields, schedule=schedule)
    except (ValidationError, TypeError) as e:
        logger.warning(f"Discarding unreadable plan snapshot: {e}")
        return None


def completed_from_list(data: Any) -> CompletedExercises:
    if not isinstance(data, list):
        return CompletedExercises()
    return CompletedExercises(keys={key for key in data if isinstance(key, str)})
