"""Routines, tips and display lookups shown alongside a plan."""

from typing import List, NamedTuple

from src.core.health_metrics import BMI_BANDS_BY_KEY, BmiBand
from src.models.exercise import ExerciseRecord
from src.models.workout_plan import PlanResult


class RoutineStep(NamedTuple):
    name: str
    duration: str
    description: str


class Tip(NamedTuple):
    icon: str
    title: str
    text: str


class SplitDisplay(NamedTuple):
    icon: str
    label: str


class ExerciseDemo(NamedTuple):
    gif_url: str
    placeholder: str
    badges: List[str]
    prescription: str
    intensity: int
    intensity_band: str


WARMUP = (
    RoutineStep("Neck Rolls", "1 min", "Slowly roll your neck in each direction 10 times."),
    RoutineStep("Shoulder Circles", "1 min", "Circle your shoulders forward, then backward, 15 times."),
    RoutineStep("Hip Circles", "1 min", "Hands on your waist, draw wide circles with your hips."),
    RoutineStep("Marching in Place", "2 min", "March in place, raising the knees a little higher each minute."),
    RoutineStep("Leg Swings", "2 min", "Swing each leg forward and back in a relaxed arc."),
)

COOLDOWN = (
    RoutineStep("Slow Walk", "2 min", "Walk slowly to bring your heart rate down."),
    RoutineStep("Quad Stretch", "1 min", "Hold your foot behind you and draw it toward your glutes."),
    RoutineStep("Hamstring Stretch", "1 min", "Extend one leg and hinge toward your toes."),
    RoutineStep("Chest and Shoulder Opener", "1 min", "Clasp your hands behind your back and open the chest."),
    RoutineStep("Box Breathing", "2 min", "Inhale 4 s, hold 4 s, exhale 6 s."),
)

SPLIT_DISPLAY = {
    "push": SplitDisplay("🏋️", "Push"),
    "pull": SplitDisplay("🧗", "Pull"),
    "legs": SplitDisplay("🦵", "Legs"),
    "upper": SplitDisplay("💪", "Upper Body"),
    "lower": SplitDisplay("🦵", "Lower Body"),
    "full": SplitDisplay("🔥", "Full Body"),
    "core": SplitDisplay("🎯", "Core"),
    "cardio": SplitDisplay("❤️", "Cardio"),
    "flexibility": SplitDisplay("🧘", "Flexibility"),
}
DEFAULT_SPLIT_DISPLAY = SplitDisplay("🏋️", "Workout")

# (upper bound inclusive, band) for difficulty meters.
INTENSITY_BANDS = ((3, "easy"), (6, "medium"), (10, "hard"))

INJURY_LABELS = {"Knee": "knee", "Back": "back", "Shoulder": "shoulder"}

DEMO_PLACEHOLDER = "Demo coming soon"

EXTRA_WATER_ON_TRAINING_DAYS = 0.5


def split_display(split_type: str) -> SplitDisplay:
    return SPLIT_DISPLAY.get(split_type, DEFAULT_SPLIT_DISPLAY)


def intensity_band(intensity: int) -> str:
    for upper, band in INTENSITY_BANDS:
        if intensity <= upper:
            return band
    return INTENSITY_BANDS[-1][1]


def bmi_band(plan: PlanResult) -> BmiBand:
    return BMI_BANDS_BY_KEY[plan.bmi_category]


def protein_range(goal: str) -> str:
    """Daily protein recommendation in grams per kilogram of body weight."""
    return "1.8-2.2 g/kg" if goal == "gain" else "1.4-1.6 g/kg"


def build_tips(plan: PlanResult) -> List[Tip]:
    tips = []
    if plan.injury != "None":
        tips.append(
            Tip(
                "🛡️",
                "Safety first",
                f"Exercises that load an injured {INJURY_LABELS.get(plan.injury, plan.injury.lower())} "
                "were left out of your plan. Always check with your doctor.",
            )
        )
    tips.append(
        Tip(
            "💧",
            "Hydration",
            f"Drink {plan.water_intake_liters} L of water a day. "
            f"Add {EXTRA_WATER_ON_TRAINING_DAYS} L on training days.",
        )
    )
    tips.append(
        Tip("😴", "Recovery", "Sleep 7-9 hours a night. Muscles grow while you rest, not while you train.")
    )
    tips.append(
        Tip(
            "🍽️",
            "Nutrition",
            f"Aim for {plan.calorie_target} kcal a day with {protein_range(plan.goal)} of protein.",
        )
    )
    return tips


def exercise_demo(exercise: ExerciseRecord) -> ExerciseDemo:
    """Content of the exercise detail view.

    The placeholder is empty when a demo animation exists.
    """
    badges = [exercise.level_label] + [group.replace("_", " ").title() for group in exercise.muscle_groups]
    return ExerciseDemo(
        gif_url=exercise.gif_url,
        placeholder="" if exercise.gif_url else DEMO_PLACEHOLDER,
        badges=badges,
        prescription=f"{exercise.sets} × {exercise.reps}",
        intensity=exercise.intensity,
        intensity_band=intensity_band(exercise.intensity),
    )
