"""Completed exercise log data model."""

from typing import List, Set

from pydantic import BaseModel, Field


def completion_key(day_index: int, exercise_id: str) -> str:
    """Key of one exercise on one plan day, e.g. '2_ex_plank'."""
    return f"{day_index}_{exercise_id}"


class CompletedExercises(BaseModel):
    """Exercises the user ticked off in the current plan."""

    keys: Set[str] = Field(default_factory=set, description="Keys of the form '{dayIndex}_{exerciseId}'")

    def is_done(self, day_index: int, exercise_id: str) -> bool:
        return completion_key(day_index, exercise_id) in self.keys

    def toggle(self, day_index: int, exercise_id: str) -> bool:
        """Flip the done flag and return the new value."""
        key = completion_key(day_index, exercise_id)
        if key in self.keys:
            self.keys.discard(key)
            return False
        self.keys.add(key)
        return True

    def count_for_day(self, day_index: int) -> int:
        prefix = f"{day_index}_"
        return sum(1 for key in self.keys if key.startswith(prefix))

    def to_list(self) -> List[str]:
        return sorted(self.keys)

    class Config:
        json_schema_extra = {"example": {"keys": ["0_ex_push_up", "1_ex_plank"]}}
