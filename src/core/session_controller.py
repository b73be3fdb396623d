"""Lifetime of the active guided session.

Only one session is active per interaction context. Starting a new one, or
switching days, closes the previous session first. Every session gets a fresh
token; the host's recurring tick passes the token back so ticks scheduled for
a session that has since been closed are dropped instead of mutating a
discarded timer.
"""

import itertools
import logging
from typing import Callable, Optional, Sequence

from src.core.cues import Cue, CuePlayer, ToneEmitter
from src.core.session_timer import SessionTimer
from src.models.exercise import ExerciseRecord

logger = logging.getLogger(__name__)

TICK_INTERVAL_SECONDS = 1.0

_tokens = itertools.count(1)


class SessionController:
    """Owns the active SessionTimer and the tone emitter created for it."""

    def __init__(self, emitter_factory: Optional[Callable[[], ToneEmitter]] = None) -> None:
        """
        Args:
            emitter_factory: Creates the tone emitter on the first audible cue of a session.
                Without a factory sessions are silent.
        """
        self.emitter_factory = emitter_factory
        self.timer: Optional[SessionTimer] = None
        self.token: Optional[int] = None
        self.day_label: str = ""
        self._player: Optional[CuePlayer] = None

    @property
    def active(self) -> bool:
        return self.timer is not None

    @property
    def tick_interval(self) -> Optional[float]:
        """Seconds until the next tick, or None while the recurring timer must be suspended."""
        if self.timer is None or not self.timer.is_running:
            return None
        return TICK_INTERVAL_SECONDS

    def _on_cue(self, token: int, cue: Cue) -> None:
        if token != self.token:
            return
        if self._player is None:
            if self.emitter_factory is None:
                return
            try:
                self._player = CuePlayer(self.emitter_factory())
            except Exception as e:
                logger.debug(f"Could not create tone emitter: {e}")
                return
        self._player.play(cue)

    def start(self, exercises: Sequence[ExerciseRecord], day_label: str = "") -> Optional[int]:
        """
        Close any running session and start a new one.

        Returns:
            Token of the new session, or None when the day has no exercises
        """
        self.close()
        if not exercises:
            logger.warning(f"Not starting a session for '{day_label}': no exercises")
            return None

        token = next(_tokens)
        self.timer = SessionTimer(exercises, on_cue=lambda cue: self._on_cue(token, cue))
        self.token = token
        self.day_label = day_label
        logger.info(f"Started session {token} for '{day_label}' with {len(exercises)} exercises")
        return token

    def tick(self, token: Optional[int]) -> bool:
        """Run one tick for the session identified by token. Returns False for stale ticks."""
        if self.timer is None or token is None or token != self.token:
            return False
        self.timer.tick()
        return True

    def pause(self) -> None:
        if self.timer:
            self.timer.pause()

    def resume(self) -> None:
        if self.timer:
            self.timer.resume()

    def toggle_pause(self) -> None:
        if self.timer:
            self.timer.toggle_pause()

    def skip(self) -> None:
        if self.timer:
            self.timer.skip()

    def restart(self) -> None:
        if self.timer:
            self.timer.restart()

    def toggle_sound(self) -> None:
        if self.timer:
            self.timer.toggle_sound()

    def close(self) -> None:
        """Discard the session; pending ticks for it become stale."""
        if self.timer is None:
            return
        closed_token = self.token
        self.token = None
        self.timer.close()
        self.timer = None
        self.day_label = ""
        if self._player is not None:
            self._player.close()
            self._player = None
        logger.info(f"Closed session {closed_token}")
