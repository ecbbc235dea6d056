"""Audio synthesis via FluidSynth + SoundFonts for note and cue effects."""

from __future__ import annotations

import logging
import sys
import time
from pathlib import Path

import fluidsynth

from wordfall.effects import Effect, PlayCue, PlayNote
from wordfall.models import Cue, NoteId
from wordfall.songs import note_to_midi

logger = logging.getLogger(__name__)

NOTE_CHANNEL = 0
CUE_CHANNEL = 9  # General MIDI percussion
NOTE_DURATION_S = 0.4
CUE_DURATION_S = 0.2

# Cue -> (percussion note, velocity)
CUE_SOUNDS: dict[Cue, tuple[int, int]] = {
    Cue.WRONG_KEY: (37, 100),  # side stick
    Cue.LINE_MISS: (39, 90),  # hand clap
    Cue.BOUNDARY_BREACH: (49, 110),  # crash cymbal
}


def _detect_audio_driver() -> str:
    """Auto-detect the appropriate FluidSynth audio driver for the platform."""
    if sys.platform == "linux":
        return "pulseaudio"
    elif sys.platform == "darwin":
        return "coreaudio"
    elif sys.platform == "win32":
        return "dsound"
    return "alsa"


class AudioEngine:
    """Plays the engine's PlayNote / PlayCue effects through FluidSynth."""

    def __init__(self, soundfont_path: str | Path | None = None, velocity: int = 90) -> None:
        self.fs = fluidsynth.Synth(gain=0.8)
        self.fs.start(driver=_detect_audio_driver())
        self.velocity = velocity
        self._sfid: int | None = None
        self._pending_offs: list[tuple[float, int, int]] = []  # (off_time, pitch, channel)
        if soundfont_path:
            self.load_soundfont(soundfont_path)

    def load_soundfont(self, path: str | Path) -> None:
        self._sfid = self.fs.sfload(str(path))
        self.fs.program_select(NOTE_CHANNEL, self._sfid, 0, 0)
        self.fs.program_select(CUE_CHANNEL, self._sfid, 128, 0)

    def __call__(self, effect: Effect) -> None:
        if isinstance(effect, PlayNote):
            self.play_note(effect.note_id)
        elif isinstance(effect, PlayCue):
            self.play_cue(effect.cue)

    def play_note(self, note_id: NoteId) -> None:
        pitch = note_to_midi(note_id)
        if pitch is None:
            logger.warning("Cannot play unknown note %r", note_id)
            return
        self._play(NOTE_CHANNEL, pitch, self.velocity, NOTE_DURATION_S)

    def play_cue(self, cue: Cue) -> None:
        pitch, velocity = CUE_SOUNDS[cue]
        self._play(CUE_CHANNEL, pitch, velocity, CUE_DURATION_S)

    def _play(self, channel: int, pitch: int, velocity: int, duration: float) -> None:
        self.fs.noteon(channel, pitch, velocity)
        self._pending_offs.append((time.time() + duration, pitch, channel))

    def flush_pending_offs(self) -> None:
        """Call each frame to release notes whose duration has elapsed."""
        now = time.time()
        remaining: list[tuple[float, int, int]] = []
        for off_time, pitch, channel in self._pending_offs:
            if now >= off_time:
                self.fs.noteoff(channel, pitch)
            else:
                remaining.append((off_time, pitch, channel))
        self._pending_offs = remaining

    def all_notes_off(self) -> None:
        for _, pitch, channel in self._pending_offs:
            self.fs.noteoff(channel, pitch)
        self._pending_offs.clear()

    def shutdown(self) -> None:
        self.all_notes_off()
        self.fs.delete()
