"""Workout plan data models."""

from typing import List, Literal

from pydantic import BaseModel, Field

from .exercise import ExerciseRecord
from .user_profile import Goal, Injury

DaySplit = Literal["push", "pull", "legs", "upper", "lower", "full"]


class DaySlot(BaseModel):
    """Single training day with its selected exercises."""

    day: str = Field(..., description="Day label, e.g. 'Day 1'")
    split_type: DaySplit = Field(..., description="Split tag of the day template")
    label: str = Field(..., description="Display label, e.g. 'Upper (Strength)'")
    exercises: List[ExerciseRecord] = Field(
        default_factory=list, description="Ordered exercises, shared with the catalog"
    )

    @property
    def title(self) -> str:
        return f"{self.day} - {self.label}"

    class Config:
        json_schema_extra = {
            "example": {
                "day": "Day 1",
                "split_type": "upper",
                "label": "Upper (Strength)",
                "exercises": [],
            }
        }


class PlanResult(BaseModel):
    """Health metrics plus the weekly schedule produced by one generation."""

    bmi: float
    bmi_category: str = Field(..., description="underweight, healthy, overweight or obese")
    bmr: float
    tdee: float
    calorie_target: int
    water_intake_liters: float
    health_score: int = Field(..., ge=0, le=100)
    schedule: List[DaySlot] = Field(default_factory=list)
    goal: Goal = "lose"
    injury: Injury = "None"
    age: int = Field(..., ge=10, le=100)

    class Config:
        json_schema_extra = {
            "example": {
                "bmi": 22.86,
                "bmi_category": "healthy",
                "bmr": 1648.75,
                "tdee": 2638.0,
                "calorie_target": 2138,
                "water_intake_liters": 2.3,
                "health_score": 95,
                "schedule": [],
                "goal": "lose",
                "injury": "None",
                "age": 30,
            }
        }
