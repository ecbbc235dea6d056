"""Tests for core data models."""

from wordfall.models import ScoreState, SongConfig, SpawnPolicy


def test_song_defaults_when_fields_missing():
    song = SongConfig.from_dict({"notes": ["E5"]})
    assert song.words_per_minute == 60
    assert song.pixels_per_interval == 15
    assert song.delay_per_movement_ms == 50
    assert song.notes == ("E5",)


def test_invalid_tempo_falls_back_to_default():
    for bad in ("fast", -10, 0, True, None):
        assert SongConfig.from_dict({"wordsPerMinute": bad}).words_per_minute == 60


def test_constructor_replaces_non_positive_timing_fields():
    song = SongConfig(words_per_minute=0, pixels_per_interval=-5, delay_per_movement_ms=0, letter_delay_ms=0)
    assert song.words_per_minute == 60
    assert song.pixels_per_interval == 15
    assert song.delay_per_movement_ms == 50
    assert song.letter_delay_ms == 200


def test_constructor_keeps_valid_timing_fields():
    song = SongConfig(words_per_minute=45, delay_per_movement_ms=20)
    assert (song.words_per_minute, song.delay_per_movement_ms) == (45, 20)


def test_snake_case_keys_are_accepted():
    song = SongConfig.from_dict({"words_per_minute": 90, "pixels_per_interval": 10})
    assert song.words_per_minute == 90
    assert song.pixels_per_interval == 10


def test_invalid_notes_are_dropped():
    song = SongConfig.from_dict({"notes": ["C4", "", 64, 300, None, False]})
    assert song.notes == ("C4", 64)


def test_non_list_notes_become_empty():
    assert SongConfig.from_dict({"notes": "C4 D4"}).notes == ()


def test_fixed_spawn_policy():
    song = SongConfig.from_dict({"spawnPolicy": "fixed", "letterDelayMs": 120})
    assert song.spawn_policy == SpawnPolicy.FIXED
    assert song.letter_delay_ms == 120


def test_unknown_spawn_policy_uses_tempo():
    assert SongConfig.from_dict({"spawnPolicy": "swing"}).spawn_policy == SpawnPolicy.TEMPO


def test_non_dict_sheet_uses_defaults():
    assert SongConfig.from_dict(["nope"]) == SongConfig()


def test_accuracy_is_100_before_any_attempt():
    assert ScoreState().accuracy() == 100.0


def test_accuracy_is_derived_from_counters():
    score = ScoreState()
    score.record_hit(300)
    score.record_miss()
    score.record_hit(100)
    score.record_miss()
    assert score.accuracy() == 50.0
    assert score.total_hits <= score.total_possible


def test_multiplier_grows_every_fifteen_hits():
    score = ScoreState()
    for _ in range(14):
        score.record_hit(100)
    assert score.multiplier == 1
    score.record_hit(100)
    assert score.multiplier == 2
    for _ in range(15):
        score.record_hit(100)
    assert score.multiplier == 3
    assert score.max_combo == 30


def test_miss_resets_combo_and_multiplier():
    score = ScoreState()
    for _ in range(16):
        score.record_hit(50)
    score.record_miss()
    assert (score.combo, score.multiplier) == (0, 1)
    assert score.max_combo == 16


def test_reset():
    score = ScoreState()
    score.record_hit(300)
    score.reset()
    assert score == ScoreState()
