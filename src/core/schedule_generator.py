"""Weekly schedule generation.

Maps a profile and a training-day count onto a fixed day template, then
fills each day from the exercise catalog. Selection is deterministic: the
same profile and catalog always give the same plan.
"""

import logging
from typing import Iterable, List, NamedTuple, Optional, Sequence, Set

from src.core.catalog import EXERCISE_CATALOG
from src.models.exercise import ExerciseRecord
from src.models.user_profile import UserProfile
from src.models.workout_plan import DaySlot

logger = logging.getLogger(__name__)


class TemplateDay(NamedTuple):
    day: str
    split_type: str
    label: str


DAY_TEMPLATES = {
    3: (
        TemplateDay("Day 1", "full", "Full Body A"),
        TemplateDay("Day 2", "full", "Full Body B"),
        TemplateDay("Day 3", "full", "Full Body C + Cardio"),
    ),
    4: (
        TemplateDay("Day 1", "upper", "Upper (Strength)"),
        TemplateDay("Day 2", "lower", "Lower (Strength)"),
        TemplateDay("Day 3", "upper", "Upper (Volume)"),
        TemplateDay("Day 4", "lower", "Lower (Volume) + Cardio"),
    ),
    5: (
        TemplateDay("Day 1", "push", "Push"),
        TemplateDay("Day 2", "pull", "Pull"),
        TemplateDay("Day 3", "legs", "Legs"),
        TemplateDay("Day 4", "upper", "Upper + Core"),
        TemplateDay("Day 5", "lower", "Lower + Cardio"),
    ),
    6: (
        TemplateDay("Day 1", "push", "Push"),
        TemplateDay("Day 2", "pull", "Pull"),
        TemplateDay("Day 3", "legs", "Legs"),
        TemplateDay("Day 4", "push", "Push (Volume)"),
        TemplateDay("Day 5", "pull", "Pull (Volume)"),
        TemplateDay("Day 6", "legs", "Legs + Cardio"),
    ),
}

TARGET_SPLITS = {
    "push": ("push",),
    "pull": ("pull",),
    "legs": ("legs",),
    "upper": ("push", "pull"),
    "lower": ("legs",),
    "full": ("push", "pull", "legs"),
}
DEFAULT_TARGET_SPLITS = ("push", "pull", "legs")

# Always admitted to the pool; selected by their own rules after the main lifts.
ACCESSORY_SPLITS = ("core", "cardio")

CARDIO_GOALS = ("endurance", "lose")
CARDIO_LABEL_TAG = "cardio"


def day_template(days: int) -> List[TemplateDay]:
    """Ordered day template for a weekly day count; empty for unsupported counts."""
    return list(DAY_TEMPLATES.get(days, ()))


def is_eligible(exercise: ExerciseRecord, profile: UserProfile) -> bool:
    """Hard exclusions: injury, age and training location."""
    if profile.injury != "None" and profile.injury in exercise.contraindications:
        return False
    if not exercise.allows_age(profile.age):
        return False
    if profile.location == "home" and exercise.location_requirement == "gym-only":
        return False
    return True


def candidate_pool(
    split_type: str, profile: UserProfile, catalog: Iterable[ExerciseRecord] = EXERCISE_CATALOG
) -> List[ExerciseRecord]:
    """Eligible exercises for one day, in catalog order."""
    targets = TARGET_SPLITS.get(split_type, DEFAULT_TARGET_SPLITS)
    return [
        ex
        for ex in catalog
        if (ex.split_type in targets or ex.split_type in ACCESSORY_SPLITS) and is_eligible(ex, profile)
    ]


def needs_cardio(slot: TemplateDay, goal: str) -> bool:
    return CARDIO_LABEL_TAG in slot.label.lower() or goal in CARDIO_GOALS


def _unused(pool: Sequence[ExerciseRecord], split_type: str, used: Set[str]) -> List[ExerciseRecord]:
    return [ex for ex in pool if ex.split_type == split_type and ex.id not in used]


def build_day(
    slot: TemplateDay,
    day_index: int,
    profile: UserProfile,
    catalog: Sequence[ExerciseRecord] = EXERCISE_CATALOG,
) -> DaySlot:
    """
    Select the exercises of one template day.

    Main lifts per target split come first (highest intensity, catalog order
    on ties), then core accessories in catalog order, then one rotating cardio
    exercise when the day or the goal calls for it.
    """
    pool = candidate_pool(slot.split_type, profile, catalog)
    is_full = slot.split_type == "full"
    per_type = 2 if is_full else 3
    core_count = 1 if is_full else 2

    exercises: List[ExerciseRecord] = []
    used: Set[str] = set()

    for split in TARGET_SPLITS.get(slot.split_type, DEFAULT_TARGET_SPLITS):
        ranked = sorted(_unused(pool, split, used), key=lambda ex: ex.intensity, reverse=True)
        for ex in ranked[:per_type]:
            exercises.append(ex)
            used.add(ex.id)

    for ex in _unused(pool, "core", used)[:core_count]:
        exercises.append(ex)
        used.add(ex.id)

    if needs_cardio(slot, profile.goal):
        cardio = _unused(pool, "cardio", used)
        if cardio:
            pick = cardio[day_index % len(cardio)]
            exercises.append(pick)
            used.add(pick.id)

    return DaySlot(day=slot.day, split_type=slot.split_type, label=slot.label, exercises=exercises)


def generate_schedule(
    profile: UserProfile,
    days: Optional[int] = None,
    catalog: Sequence[ExerciseRecord] = EXERCISE_CATALOG,
) -> List[DaySlot]:
    """
    Build the weekly schedule.

    Args:
        profile: Validated user profile
        days: Training days per week; defaults to the profile's choice
        catalog: Exercise catalog to draw from (read only)

    Returns:
        One DaySlot per template day, or an empty list for unsupported day counts
    """
    if days is None:
        days = profile.training_days_per_week

    template = day_template(days)
    if not template:
        logger.warning(f"No day template for {days} training days, returning empty schedule")
        return []

    schedule = [build_day(slot, i, profile, catalog) for i, slot in enumerate(template)]
    logger.info(
        f"Generated {len(schedule)}-day schedule with "
        f"{sum(len(d.exercises) for d in schedule)} exercises"
    )
    return schedule
