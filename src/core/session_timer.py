"""Guided workout session timer.

A phase state machine over a fixed exercise list:

    ready --3s--> work --30s--> rest --10s--> work (next exercise) ... finished

tick() is called once per second by the host while the session runs. The
timer owns its SessionState; every transition reads and writes that single
value.
"""

import logging
from typing import Callable, List, Optional, Sequence

from src.core.cues import Cue
from src.models.exercise import ExerciseRecord
from src.models.session_state import Phase, SessionState

logger = logging.getLogger(__name__)

READY_DURATION = 3
WORK_DURATION = 30
REST_DURATION = 10

PHASE_DURATIONS = {
    Phase.READY: READY_DURATION,
    Phase.WORK: WORK_DURATION,
    Phase.REST: REST_DURATION,
}

# Remaining seconds that get an anticipatory countdown beep.
COUNTDOWN_SECONDS = 3

CueCallback = Callable[[Cue], None]


class SessionTimer:
    """Drives one session over an ordered exercise list."""

    def __init__(
        self,
        exercises: Sequence[ExerciseRecord],
        on_cue: Optional[CueCallback] = None,
        sound_enabled: bool = True,
    ) -> None:
        if not exercises:
            raise ValueError("A session needs at least one exercise")
        self.exercises: List[ExerciseRecord] = list(exercises)
        self.on_cue = on_cue
        self.state = SessionState(
            phase=Phase.READY,
            current_exercise_index=0,
            seconds_remaining=READY_DURATION,
            sound_enabled=sound_enabled,
        )
        self.closed = False

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def is_finished(self) -> bool:
        return self.state.phase == Phase.FINISHED

    @property
    def is_running(self) -> bool:
        return not (self.closed or self.state.paused or self.is_finished)

    @property
    def current_exercise(self) -> Optional[ExerciseRecord]:
        if self.is_finished:
            return None
        return self.exercises[self.state.current_exercise_index]

    @property
    def next_exercise(self) -> Optional[ExerciseRecord]:
        if self.is_finished:
            return None
        index = self.state.current_exercise_index + 1
        return self.exercises[index] if index < len(self.exercises) else None

    @property
    def elapsed_fraction(self) -> float:
        """Share of the current phase already elapsed, for progress rings."""
        if self.is_finished:
            return 1.0
        return 1 - self.state.seconds_remaining / PHASE_DURATIONS[self.state.phase]

    def _emit(self, cue: Cue) -> None:
        if self.state.sound_enabled and self.on_cue is not None:
            self.on_cue(cue)

    def _start_work(self, index: int) -> None:
        self.state.current_exercise_index = index
        self.state.phase = Phase.WORK
        self.state.seconds_remaining = WORK_DURATION
        self._emit(Cue.WORK_START)

    def _finish(self) -> None:
        self.state.phase = Phase.FINISHED
        self.state.seconds_remaining = 0
        self._emit(Cue.FINISH)
        logger.info(f"Session finished after {len(self.exercises)} exercises")

    def tick(self) -> None:
        """Advance the countdown by one second."""
        if not self.is_running:
            return

        remaining = self.state.seconds_remaining - 1
        if 0 < remaining <= COUNTDOWN_SECONDS:
            self._emit(Cue.TICK)

        if remaining > 0:
            self.state.seconds_remaining = remaining
            return

        if self.state.phase == Phase.READY:
            self._start_work(self.state.current_exercise_index)
        elif self.state.phase == Phase.WORK:
            self.state.phase = Phase.REST
            self.state.seconds_remaining = REST_DURATION
            self._emit(Cue.REST_START)
        elif self.state.current_exercise_index + 1 < len(self.exercises):
            self._start_work(self.state.current_exercise_index + 1)
        else:
            self._finish()

    def skip(self) -> None:
        """Jump straight to the next exercise's work phase, bypassing rest."""
        if self.closed or self.is_finished:
            return
        if self.state.current_exercise_index + 1 >= len(self.exercises):
            self._finish()
        else:
            self._start_work(self.state.current_exercise_index + 1)

    def pause(self) -> None:
        if not self.closed:
            self.state.paused = True

    def resume(self) -> None:
        if not self.closed:
            self.state.paused = False

    def toggle_pause(self) -> bool:
        if self.state.paused:
            self.resume()
        else:
            self.pause()
        return self.state.paused

    def restart(self) -> None:
        """Back to the get-ready countdown of the first exercise, from any phase."""
        if self.closed:
            return
        self.state.current_exercise_index = 0
        self.state.phase = Phase.READY
        self.state.seconds_remaining = READY_DURATION
        self.state.paused = False

    def toggle_sound(self) -> bool:
        self.state.sound_enabled = not self.state.sound_enabled
        return self.state.sound_enabled

    def close(self) -> None:
        self.closed = True
