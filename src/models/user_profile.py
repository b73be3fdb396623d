"""User profile data model."""

from typing import Dict, Literal, Optional

from pydantic import BaseModel, Field, ValidationError

Gender = Literal["male", "female"]
ActivityLevel = Literal["sedentary", "active", "athlete"]
Goal = Literal["lose", "gain", "endurance", "maintain"]
Location = Literal["gym", "home"]
Injury = Literal["None", "Knee", "Back", "Shoulder"]
TrainingDays = Literal[3, 4, 5, 6]

# Field-level messages shown by the questionnaire for the personal info step.
FIELD_MESSAGES = {
    "age": "Age must be between 10 and 100",
    "height_cm": "Height must be between 100 and 250 cm",
    "weight_kg": "Weight must be between 30 and 250 kg",
}


class UserProfile(BaseModel):
    """Validated questionnaire answers used for one plan generation."""

    gender: Gender = Field(..., description="Biological sex for the BMR formula")
    age: int = Field(..., ge=10, le=100, description="Age in years")
    height_cm: float = Field(..., ge=100, le=250, description="Height in centimeters")
    weight_kg: float = Field(..., ge=30, le=250, description="Body weight in kilograms")
    activity_level: ActivityLevel = "active"
    goal: Goal = "lose"
    location: Location = "gym"
    injury: Injury = "None"
    training_days_per_week: TrainingDays = 4

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "gender": "male",
                "age": 30,
                "height_cm": 175,
                "weight_kg": 70,
                "activity_level": "active",
                "goal": "lose",
                "location": "home",
                "injury": "Knee",
                "training_days_per_week": 4,
            }
        }


class ProfileForm(BaseModel):
    """Questionnaire state as the user fills it in, persisted between visits."""

    step: int = Field(0, ge=0, description="Current wizard step (0-2), 3 once the plan is shown")
    user_name: str = Field(default="", description="Optional display name")
    gender: Gender = "male"
    age: Optional[int] = None
    height_cm: Optional[float] = None
    weight_kg: Optional[float] = None
    activity_level: ActivityLevel = "active"
    goal: Goal = "lose"
    location: Location = "gym"
    injury: Injury = "None"
    training_days_per_week: TrainingDays = 4

    def to_profile(self) -> UserProfile:
        """Build a validated profile. Raises pydantic.ValidationError on bad input."""
        return UserProfile(
            gender=self.gender,
            age=self.age,
            height_cm=self.height_cm,
            weight_kg=self.weight_kg,
            activity_level=self.activity_level,
            goal=self.goal,
            location=self.location,
            injury=self.injury,
            training_days_per_week=self.training_days_per_week,
        )

    def field_errors(self) -> Dict[str, str]:
        """Return {field: message} for every field that fails validation."""
        try:
            self.to_profile()
        except ValidationError as e:
            errors: Dict[str, str] = {}
            for error in e.errors():
                field = str(error["loc"][0]) if error["loc"] else "form"
                errors.setdefault(field, FIELD_MESSAGES.get(field, error["msg"]))
            return errors
        return {}
