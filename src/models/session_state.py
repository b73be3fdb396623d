"""Guided workout session state."""

from enum import Enum

from pydantic import BaseModel, Field


class Phase(str, Enum):
    READY = "ready"
    WORK = "work"
    REST = "rest"
    FINISHED = "finished"


class SessionState(BaseModel):
    """Mutable state of one guided session, owned by a single SessionTimer."""

    phase: Phase = Phase.READY
    current_exercise_index: int = Field(0, ge=0)
    seconds_remaining: int = Field(3, ge=0)
    paused: bool = False
    sound_enabled: bool = True

    class Config:
        validate_assignment = True
