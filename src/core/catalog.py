"""Exercise catalog built once from the source data.

The source schema (category, target muscle, equipment, level) is translated
into the fields the schedule generator filters on through the lookup tables
below. The resulting catalog is a tuple of frozen records and is never
mutated.
"""

import logging
from typing import Dict, Iterable, Optional, Tuple

from src.data.exercises import RAW_EXERCISES
from src.models.exercise import ExerciseRecord, RawExercise

logger = logging.getLogger(__name__)

SPLIT_BY_MUSCLE = {
    "chest": "push",
    "back": "pull",
    "legs": "legs",
    "core": "core",
    "full_body": "push",
}
INTENSITY_BY_LEVEL = {"beginner": 4, "intermediate": 6, "advanced": 9}
AGE_RANGE_BY_LEVEL = {"beginner": (12, 75), "intermediate": (14, 65), "advanced": (16, 55)}
MUSCLE_GROUPS = {
    "chest": ["chest", "triceps"],
    "back": ["back", "biceps"],
    "legs": ["quads", "glutes"],
    "core": ["core"],
    "full_body": ["chest", "back", "quads"],
}
MUSCLE_LABELS = {
    "chest": "Chest",
    "back": "Back",
    "legs": "Legs",
    "core": "Core",
    "full_body": "Full Body",
}
LEVEL_LABELS = {"beginner": "Easy", "intermediate": "Medium", "advanced": "Hard"}

# (sets, reps) by category; strength defaults to 3 x 10-12, advanced to 4 x 8-10.
PRESCRIPTION_BY_CATEGORY = {
    "cardio": (1, "15-20 min"),
    "flexibility": (1, "20-30 s"),
}
ADVANCED_PRESCRIPTION = (4, "8-10")
DEFAULT_PRESCRIPTION = (3, "10-12")

DEFAULT_INTENSITY = 5
DEFAULT_AGE_RANGE = (14, 65)


def _split_type(raw: RawExercise) -> str:
    if raw.category in ("cardio", "flexibility"):
        return raw.category
    return SPLIT_BY_MUSCLE.get(raw.target_muscle or "", "push")


def _prescription(raw: RawExercise) -> Tuple[int, str]:
    if raw.category in PRESCRIPTION_BY_CATEGORY:
        return PRESCRIPTION_BY_CATEGORY[raw.category]
    if raw.level == "advanced":
        return ADVANCED_PRESCRIPTION
    return DEFAULT_PRESCRIPTION


def _muscle_groups(raw: RawExercise) -> list:
    if raw.category in ("cardio", "flexibility"):
        return [raw.category]
    return list(MUSCLE_GROUPS.get(raw.target_muscle or "", [raw.target_muscle or ""]))


def _muscle_label(raw: RawExercise) -> str:
    if raw.target_muscle in MUSCLE_LABELS:
        return MUSCLE_LABELS[raw.target_muscle]
    return "Cardio" if raw.category == "cardio" else "Flexibility"


def normalize_exercise(raw: RawExercise) -> ExerciseRecord:
    """Map one source entry onto the internal exercise schema."""
    sets, reps = _prescription(raw)
    min_age, max_age = AGE_RANGE_BY_LEVEL.get(raw.level, DEFAULT_AGE_RANGE)
    excluded = [injury.lower() for injury in raw.excluded_injuries]
    high_impact = raw.level == "advanced" or (raw.category == "cardio" and "knee" in excluded)

    return ExerciseRecord(
        id=raw.id,
        name=raw.name,
        instructions=raw.instructions,
        category=raw.category,
        target_muscle=raw.target_muscle,
        split_type=_split_type(raw),
        location_requirement="gym-only" if raw.equipment == "gym_machine" else "any",
        intensity=INTENSITY_BY_LEVEL.get(raw.level, DEFAULT_INTENSITY),
        contraindications=frozenset(injury.capitalize() for injury in excluded),
        min_age=min_age,
        max_age=max_age,
        sets=sets,
        reps=reps,
        level=raw.level,
        level_label=LEVEL_LABELS.get(raw.level, "Medium"),
        muscle_groups=_muscle_groups(raw),
        muscle_label=_muscle_label(raw),
        impact_level="High" if high_impact else "Low",
        gif_url=raw.gif_url,
    )


def build_catalog(raw_entries: Iterable[dict]) -> Tuple[ExerciseRecord, ...]:
    """
    Normalize source entries into an immutable catalog.

    Args:
        raw_entries: Dictionaries in the source schema

    Returns:
        Tuple of ExerciseRecord in source order. Later duplicates of an id are dropped.
    """
    records = []
    seen = set()
    for entry in raw_entries:
        raw = RawExercise(**entry)
        if raw.id in seen:
            logger.warning(f"Duplicate exercise id {raw.id} in source catalog, skipping")
            continue
        seen.add(raw.id)
        records.append(normalize_exercise(raw))
    return tuple(records)


EXERCISE_CATALOG: Tuple[ExerciseRecord, ...] = build_catalog(RAW_EXERCISES)

_CATALOG_INDEX: Dict[str, ExerciseRecord] = {ex.id: ex for ex in EXERCISE_CATALOG}


def get_exercise(exercise_id: str) -> Optional[ExerciseRecord]:
    """Look up a catalog record by id."""
    return _CATALOG_INDEX.get(exercise_id)
