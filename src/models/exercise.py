"""Exercise catalog data models."""

from typing import FrozenSet, List, Literal, Optional

from pydantic import BaseModel, Field

Category = Literal["strength", "cardio", "flexibility"]
TargetMuscle = Literal["chest", "back", "legs", "core", "full_body"]
Equipment = Literal["bodyweight", "dumbbell", "barbell", "kettlebell", "band", "gym_machine"]
Level = Literal["beginner", "intermediate", "advanced"]
SplitType = Literal["push", "pull", "legs", "core", "cardio", "flexibility"]
LocationRequirement = Literal["gym-only", "any"]


class RawExercise(BaseModel):
    """Exercise entry as it appears in the source catalog."""

    id: str = Field(..., description="Unique exercise ID, e.g. 'ex_push_up'")
    name: str = Field(..., description="Exercise name")
    instructions: str = Field(default="", description="How to perform the movement")
    category: Category
    target_muscle: Optional[TargetMuscle] = Field(
        None, description="Primary muscle area; empty for cardio and flexibility"
    )
    equipment: Equipment = "bodyweight"
    level: Level = "intermediate"
    excluded_injuries: List[str] = Field(
        default_factory=list, description="Lower-case injury tags: knee, back, shoulder"
    )
    gif_url: str = ""


class ExerciseRecord(BaseModel):
    """Normalized exercise used by the schedule generator and the session timer."""

    id: str
    name: str
    instructions: str = ""
    category: Category
    target_muscle: Optional[TargetMuscle] = None
    split_type: SplitType
    location_requirement: LocationRequirement = "any"
    intensity: int = Field(..., ge=1, le=10)
    contraindications: FrozenSet[str] = Field(default_factory=frozenset)
    min_age: int = Field(..., ge=0)
    max_age: int = Field(..., ge=0)
    sets: int = Field(3, ge=1)
    reps: str = "10-12"
    level: Level = "intermediate"
    level_label: str = "Medium"
    muscle_groups: List[str] = Field(default_factory=list)
    muscle_label: str = ""
    impact_level: Literal["High", "Low"] = "Low"
    gif_url: str = ""

    def allows_age(self, age: int) -> bool:
        return self.min_age <= age <= self.max_age

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": "ex_push_up",
                "name": "Push-Up",
                "instructions": "Keep your body in a straight line and lower your chest to the floor.",
                "category": "strength",
                "target_muscle": "chest",
                "split_type": "push",
                "location_requirement": "any",
                "intensity": 4,
                "contraindications": ["Shoulder"],
                "min_age": 12,
                "max_age": 75,
                "sets": 3,
                "reps": "10-12",
                "level": "beginner",
                "level_label": "Easy",
            }
        }
