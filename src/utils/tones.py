"""Beep synthesis for session cues."""

import io
import logging
import wave
from typing import List

import numpy as np

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050
BEEP_SPACING = 0.25  # seconds between the starts of repeated beeps
PEAK_GAIN = 0.35
FLOOR_GAIN = 0.001


def synthesize_beeps(
    frequency: float, duration: float, count: int = 1, sample_rate: int = SAMPLE_RATE
) -> bytes:
    """
    Render count sine beeps as a mono 16-bit WAV clip.

    Each beep decays exponentially from PEAK_GAIN to FLOOR_GAIN over its duration.
    """
    count = max(1, count)
    beep_samples = int(duration * sample_rate)
    spacing_samples = int(BEEP_SPACING * sample_rate)
    total = spacing_samples * (count - 1) + beep_samples

    t = np.arange(beep_samples) / sample_rate
    envelope = PEAK_GAIN * np.power(FLOOR_GAIN / PEAK_GAIN, t / duration)
    beep = np.sin(2 * np.pi * frequency * t) * envelope

    signal = np.zeros(total)
    for i in range(count):
        start = i * spacing_samples
        signal[start:start + beep_samples] += beep

    pcm = (np.clip(signal, -1.0, 1.0) * 32767).astype("<i2")
    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as wav:
        wav.setnchannels(1)
        wav.setsampwidth(2)
        wav.setframerate(sample_rate)
        wav.writeframes(pcm.tobytes())
    return buffer.getvalue()


class StreamlitToneEmitter:
    """Queues synthesized beeps for the session page to play with st.audio."""

    def __init__(self) -> None:
        self.pending: List[bytes] = []
        self.closed = False

    def play(self, frequency: float, duration: float, count: int) -> None:
        if self.closed:
            return
        self.pending.append(synthesize_beeps(frequency, duration, count))

    def drain(self) -> List[bytes]:
        clips, self.pending = self.pending, []
        return clips

    def close(self) -> None:
        self.closed = True
        self.pending = []
        logger.debug("Tone emitter disposed")
