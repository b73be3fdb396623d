"""Audio cues requested by the session timer."""

import logging
from enum import Enum
from typing import NamedTuple, Optional, Protocol


logger = logging.getLogger(__name__)


class Cue(str, Enum):
    TICK = "tick"
    WORK_START = "work-start"
    REST_START = "rest-start"
    FINISH = "finish"


class ToneSpec(NamedTuple):
    frequency: float
    duration: float
    count: int


CUE_TONES = {
    Cue.TICK: ToneSpec(800, 0.08, 1),
    Cue.WORK_START: ToneSpec(1000, 0.12, 1),
    Cue.REST_START: ToneSpec(600, 0.18, 2),
    Cue.FINISH: ToneSpec(1200, 0.15, 3),
}


class ToneEmitter(Protocol):
    def play(self, frequency: float, duration: float, count: int) -> None: ...

    def close(self) -> None: ...


class CuePlayer:
    """Turns cues into tones. Emitter failures never reach the caller."""

    def __init__(self, emitter: ToneEmitter) -> None:
        self.emitter: Optional[ToneEmitter] = emitter

    def play(self, cue: Cue) -> None:
        if self.emitter is None:
            return
        tone = CUE_TONES[cue]
        try:
            self.emitter.play(tone.frequency, tone.duration, tone.count)
        except Exception as e:
            logger.debug(f"Tone emitter failed for cue {cue.value}: {e}")

    def close(self) -> None:
        if self.emitter is None:
            return
        try:
            self.emitter.close()
        except Exception as e:
            logger.debug(f"Tone emitter failed to close: {e}")
        self.emitter = None
