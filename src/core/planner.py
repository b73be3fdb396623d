"""Plan assembly: metrics plus weekly schedule for one profile."""

import logging
from typing import Sequence

from src.core import health_metrics
from src.core.catalog import EXERCISE_CATALOG
from src.core.schedule_generator import generate_schedule
from src.models.exercise import ExerciseRecord
from src.models.user_profile import UserProfile
from src.models.workout_plan import PlanResult

logger = logging.getLogger(__name__)


def build_plan(
    profile: UserProfile, catalog: Sequence[ExerciseRecord] = EXERCISE_CATALOG
) -> PlanResult:
    """Compute every health metric and the schedule in one pass."""
    bmi_value = health_metrics.bmi(profile.weight_kg, profile.height_cm)
    bmr_value = health_metrics.bmr(profile.gender, profile.weight_kg, profile.height_cm, profile.age)
    tdee_value = health_metrics.tdee(bmr_value, profile.activity_level)

    plan = PlanResult(
        bmi=bmi_value,
        bmi_category=health_metrics.bmi_category(bmi_value).key,
        bmr=bmr_value,
        tdee=tdee_value,
        calorie_target=health_metrics.calorie_target(tdee_value, profile.goal),
        water_intake_liters=health_metrics.water_intake_liters(profile.weight_kg),
        health_score=health_metrics.health_score(bmi_value, profile.activity_level, profile.injury),
        schedule=generate_schedule(profile, catalog=catalog),
        goal=profile.goal,
        injury=profile.injury,
        age=profile.age,
    )
    logger.info(
        f"Built plan: BMI {plan.bmi:.1f} ({plan.bmi_category}), "
        f"{plan.calorie_target} kcal, score {plan.health_score}"
    )
    return plan
