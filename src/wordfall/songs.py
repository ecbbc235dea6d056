"""Load song sheets (JSON, MIDI, MusicXML) into SongConfig."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

import mido

from wordfall.models import NoteId, SongConfig

logger = logging.getLogger(__name__)

SONGS_DIR = Path(__file__).parent / "data" / "songs"

_NOTE_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
_NOTE_OFFSETS = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}
_NOTE_RE = re.compile(r"^([A-Ga-g])([#b]?)(-?\d+)$")

JSON_SUFFIXES = (".json",)
MIDI_SUFFIXES = (".mid", ".midi")
MUSICXML_SUFFIXES = (".xml", ".mxl", ".musicxml")


class SongLoadError(Exception):
    """Raised when a song file cannot be parsed."""


def note_to_midi(note: NoteId) -> int | None:
    """MIDI number for a note id (``"C4"`` is 60). None if it cannot be parsed."""
    if isinstance(note, bool):
        return None
    if isinstance(note, int):
        return note if 0 <= note <= 127 else None
    match = _NOTE_RE.match(str(note).strip())
    if not match:
        return None
    letter, accidental, octave = match.groups()
    pitch = (int(octave) + 1) * 12 + _NOTE_OFFSETS[letter.upper()]
    if accidental == "#":
        pitch += 1
    elif accidental == "b":
        pitch -= 1
    return pitch if 0 <= pitch <= 127 else None


def midi_to_note(pitch: int) -> str:
    return f"{_NOTE_NAMES[pitch % 12]}{pitch // 12 - 1}"


def load_song(file_path: str | Path, words_per_minute: float | None = None) -> SongConfig:
    """Load a song sheet.

    Args:
        file_path: Path to a .json sheet, a .mid/.midi file, or a MusicXML file.
        words_per_minute: Tempo for MIDI/MusicXML files, which carry notes only.

    Raises:
        SongLoadError: If the file cannot be parsed.
    """
    path = Path(file_path)
    try:
        if path.suffix in JSON_SUFFIXES:
            return _load_json(path)
        elif path.suffix in MIDI_SUFFIXES:
            return _with_tempo(SongConfig(title=path.stem, notes=_load_midi_notes(path)), words_per_minute)
        elif path.suffix in MUSICXML_SUFFIXES:
            return _with_tempo(SongConfig(title=path.stem, notes=_load_musicxml_notes(path)), words_per_minute)
        else:
            raise SongLoadError(f"Unsupported file format: {path.suffix}")
    except SongLoadError:
        raise
    except Exception as exc:
        raise SongLoadError(f"Failed to load {path.name}: {exc}") from exc


def _with_tempo(song: SongConfig, words_per_minute: float | None) -> SongConfig:
    if words_per_minute is None:
        return song
    return SongConfig.from_dict({
        "title": song.title,
        "wordsPerMinute": words_per_minute,
        "notes": list(song.notes),
    })


def _load_json(path: Path) -> SongConfig:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise SongLoadError(f"{path.name} must contain a JSON object")
    title = data.get("title") or path.stem.replace("_", " ").title()
    return SongConfig.from_dict(data, title=str(title))


def _load_midi_notes(path: Path) -> tuple[NoteId, ...]:
    mid = mido.MidiFile(str(path))
    tempo = 500_000  # default 120 BPM
    onsets: list[tuple[float, int, int]] = []  # (time, track, pitch)

    for track_idx, track in enumerate(mid.tracks):
        abs_time = 0.0
        for msg in track:
            abs_time += mido.tick2second(msg.time, mid.ticks_per_beat, tempo)
            if msg.type == "set_tempo":
                tempo = msg.tempo
            elif msg.type == "note_on" and msg.velocity > 0:
                onsets.append((abs_time, track_idx, msg.note))

    onsets.sort()
    return tuple(midi_to_note(pitch) for _, _, pitch in onsets)


def _load_musicxml_notes(path: Path) -> tuple[NoteId, ...]:
    from music21 import converter

    score = converter.parse(str(path))
    onsets: list[tuple[float, int]] = []
    for n in score.flatten().notes:
        pitches = n.pitches if hasattr(n, "pitches") else [n.pitch]
        for p in pitches:
            onsets.append((float(n.offset), p.midi))
    onsets.sort()
    return tuple(midi_to_note(pitch) for _, pitch in onsets)


def load_song_library(directory: str | Path) -> dict[str, SongConfig]:
    """Load every supported song in ``directory``, keyed by title. Bad files are skipped."""
    root = Path(directory)
    library: dict[str, SongConfig] = {}
    if not root.is_dir():
        logger.warning("Songs directory %s does not exist", root)
        return library

    suffixes = JSON_SUFFIXES + MIDI_SUFFIXES + MUSICXML_SUFFIXES
    for path in sorted(root.iterdir()):
        if path.suffix not in suffixes:
            continue
        try:
            song = load_song(path)
        except SongLoadError as exc:
            logger.warning("Skipping song: %s", exc)
            continue
        library[song.title] = song
    return dict(sorted(library.items()))


def default_library() -> dict[str, SongConfig]:
    return load_song_library(SONGS_DIR)
