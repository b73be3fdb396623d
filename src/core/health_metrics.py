"""Health metrics derived from the questionnaire.

All functions are pure. Inputs are assumed to be inside the ranges that
UserProfile enforces.
"""

import math
from typing import NamedTuple


class BmiBand(NamedTuple):
    max_bmi: float
    key: str
    label: str
    color: str
    emoji: str


BMI_CATEGORIES = (
    BmiBand(18.5, "underweight", "Underweight", "#38bdf8", "🔵"),
    BmiBand(25.0, "healthy", "Healthy weight", "#22c55e", "🟢"),
    BmiBand(30.0, "overweight", "Overweight", "#eab308", "🟡"),
    BmiBand(math.inf, "obese", "Obese", "#ef4444", "🔴"),
)
BMI_BANDS_BY_KEY = {band.key: band for band in BMI_CATEGORIES}

ACTIVITY_MULTIPLIERS = {"sedentary": 1.4, "active": 1.6, "athlete": 1.85}
DEFAULT_ACTIVITY_MULTIPLIER = 1.5

CALORIE_DEFICIT = 500
CALORIE_SURPLUS = 350
WATER_LITERS_PER_KG = 0.033


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up, as the dashboard has always displayed them."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def bmi(weight_kg: float, height_cm: float) -> float:
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


def bmi_category(value: float) -> BmiBand:
    """First band whose upper bound lies above the BMI."""
    for band in BMI_CATEGORIES:
        if value < band.max_bmi:
            return band
    return BMI_CATEGORIES[-1]


def bmr(gender: str, weight_kg: float, height_cm: float, age: int) -> float:
    """Basal metabolic rate, Mifflin-St Jeor."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if gender == "male":
        return base + 5
    return base - 161


def tdee(bmr_value: float, activity_level: str) -> float:
    """Total daily energy expenditure."""
    return bmr_value * ACTIVITY_MULTIPLIERS.get(activity_level, DEFAULT_ACTIVITY_MULTIPLIER)


def calorie_target(tdee_value: float, goal: str) -> int:
    if goal == "lose":
        return int(round_half_up(tdee_value - CALORIE_DEFICIT))
    if goal == "gain":
        return int(round_half_up(tdee_value + CALORIE_SURPLUS))
    return int(round_half_up(tdee_value))


def water_intake_liters(weight_kg: float) -> float:
    return round_half_up(weight_kg * WATER_LITERS_PER_KG, 1)


def health_score(bmi_value: float, activity_level: str, injury: str) -> int:
    """Composite 0-100 score from BMI band, activity and injury status."""
    score = 70
    if 18.5 <= bmi_value < 25:
        score += 15
    elif 25 <= bmi_value < 30:
        score += 5
    else:
        score -= 5

    if activity_level == "athlete":
        score += 15
    elif activity_level == "active":
        score += 10

    if injury != "None":
        score -= 10

    return max(0, min(100, score))


def health_score_label(score: int) -> str:
    if score >= 80:
        return "Excellent"
    if score >= 60:
        return "Good"
    return "Needs improvement"


def calorie_adjustment_note(goal: str) -> str:
    return {
        "lose": f"{CALORIE_DEFICIT} kcal deficit",
        "gain": f"{CALORIE_SURPLUS} kcal surplus",
    }.get(goal, "Maintenance")


def water_glasses(liters: float) -> int:
    """Approximate number of 250 ml glasses."""
    return int(round_half_up(liters * 4))
