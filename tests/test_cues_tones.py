"""Tests for cue playback and beep synthesis."""

import io
import wave

from src.core.cues import CUE_TONES, Cue, CuePlayer
from src.utils.tones import SAMPLE_RATE, StreamlitToneEmitter, synthesize_beeps


class RecordingEmitter:
    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []
        self.closed = False

    def play(self, frequency, duration, count):
        if self.fail:
            raise OSError("no audio device")
        self.calls.append((frequency, duration, count))

    def close(self):
        if self.fail:
            raise OSError("no audio device")
        self.closed = True


def test_cue_tones():
    assert CUE_TONES[Cue.REST_START].count == 2
    assert CUE_TONES[Cue.FINISH].count == 3
    assert CUE_TONES[Cue.FINISH].frequency == 1200


def test_player_forwards_tone():
    emitter = RecordingEmitter()
    CuePlayer(emitter).play(Cue.WORK_START)
    assert emitter.calls == [(1000, 0.12, 1)]


def test_player_swallows_emitter_errors():
    player = CuePlayer(RecordingEmitter(fail=True))
    player.play(Cue.TICK)
    player.close()
    assert player.emitter is None


def test_closed_player_is_silent():
    emitter = RecordingEmitter()
    player = CuePlayer(emitter)
    player.close()
    player.play(Cue.FINISH)
    assert emitter.closed
    assert emitter.calls == []


def _read_wav(data):
    with wave.open(io.BytesIO(data), "rb") as wav:
        return wav.getnchannels(), wav.getsampwidth(), wav.getframerate(), wav.getnframes()


def test_single_beep_wav():
    data = synthesize_beeps(800, 0.08)
    assert data[:4] == b"RIFF"
    assert data[8:12] == b"WAVE"
    assert _read_wav(data) == (1, 2, SAMPLE_RATE, int(0.08 * SAMPLE_RATE))


def test_repeated_beeps_are_spaced():
    data = synthesize_beeps(1200, 0.15, count=3)
    frames = _read_wav(data)[3]
    assert frames == 2 * int(0.25 * SAMPLE_RATE) + int(0.15 * SAMPLE_RATE)


def test_streamlit_emitter_queues_clips():
    emitter = StreamlitToneEmitter()
    emitter.play(600, 0.18, 2)
    emitter.play(800, 0.08, 1)
    clips = emitter.drain()
    assert len(clips) == 2
    assert emitter.drain() == []


def test_streamlit_emitter_close():
    emitter = StreamlitToneEmitter()
    emitter.play(800, 0.08, 1)
    emitter.close()
    emitter.play(800, 0.08, 1)
    assert emitter.closed
    assert emitter.drain() == []
