"""Tests for song sheet loading and note names."""

import json

import mido
import pytest

from wordfall.songs import (
    SongLoadError,
    default_library,
    load_song,
    load_song_library,
    midi_to_note,
    note_to_midi,
)


@pytest.mark.parametrize("note, pitch", [
    ("C4", 60), ("D#5", 75), ("Bb4", 70), ("a0", 21), (61, 61),
])
def test_note_to_midi(note, pitch):
    assert note_to_midi(note) == pitch


@pytest.mark.parametrize("note", ["H2", "", "C", 200, True])
def test_unparseable_notes(note):
    assert note_to_midi(note) is None


def test_midi_to_note():
    assert midi_to_note(60) == "C4"
    assert midi_to_note(61) == "C#4"


def test_load_json_song(tmp_path):
    path = tmp_path / "ode_to_joy.json"
    path.write_text(json.dumps({"wordsPerMinute": 80, "notes": ["E4", "E4", "F4"]}))
    song = load_song(path)
    assert song.title == "Ode To Joy"
    assert song.words_per_minute == 80
    assert song.notes == ("E4", "E4", "F4")


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{")
    with pytest.raises(SongLoadError):
        load_song(path)


def test_unsupported_format_raises(tmp_path):
    path = tmp_path / "song.txt"
    path.write_text("E4 D4")
    with pytest.raises(SongLoadError):
        load_song(path)


def _write_midi(path, pitches):
    mid = mido.MidiFile()
    track = mido.MidiTrack()
    mid.tracks.append(track)
    for pitch in pitches:
        track.append(mido.Message("note_on", note=pitch, velocity=80, time=0))
        track.append(mido.Message("note_off", note=pitch, velocity=0, time=240))
    mid.save(str(path))


def test_load_midi_song(tmp_path):
    path = tmp_path / "riff.mid"
    _write_midi(path, [64, 62, 60])
    song = load_song(path)
    assert song.title == "riff"
    assert song.notes == ("E4", "D4", "C4")
    assert song.words_per_minute == 60


def test_midi_song_tempo_override(tmp_path):
    path = tmp_path / "riff.mid"
    _write_midi(path, [60])
    assert load_song(path, words_per_minute=90).words_per_minute == 90


def test_library_skips_bad_files(tmp_path):
    (tmp_path / "good.json").write_text(json.dumps({"title": "Good", "notes": ["C4"]}))
    (tmp_path / "bad.json").write_text("not json")
    (tmp_path / "readme.md").write_text("ignored")
    library = load_song_library(tmp_path)
    assert list(library) == ["Good"]


def test_missing_library_directory(tmp_path):
    assert load_song_library(tmp_path / "nope") == {}


def test_default_library():
    library = default_library()
    assert list(library) == ["Fur Elise", "Moonlight Sonata"]
    assert library["Fur Elise"].notes[:3] == ("E5", "D#5", "E5")
    assert all(note_to_midi(n) is not None for song in library.values() for n in song.notes)
