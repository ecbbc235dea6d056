"""Tests for lane state."""

from wordfall.lane import LaneState


def test_spawned_letters_are_uppercase_at_top():
    lane = LaneState(1000, 600)
    letter = lane.spawn("c", 40, word_index=0)
    assert letter.char == "C"
    assert letter.top == 0
    assert letter.left == 40


def test_active_letter_is_lowest():
    lane = LaneState(1000, 600)
    first = lane.spawn("a", 0, 0)
    lane.move_all(30)
    lane.spawn("b", 40, 0)
    assert lane.active_letter().id == first.id


def test_active_letter_tie_goes_to_earliest_spawned():
    lane = LaneState(1000, 600)
    first = lane.spawn("a", 0, 0)
    lane.spawn("b", 40, 1)
    assert lane.active_letter().id == first.id


def test_active_letter_of_empty_lane():
    assert LaneState(1000, 600).active_letter() is None


def test_remove_word_only_removes_that_word():
    lane = LaneState(1000, 600)
    lane.spawn("a", 0, 0)
    lane.spawn("b", 40, 0)
    keep = lane.spawn("c", 80, 1)
    removed = lane.remove_word(0)
    assert [l.char for l in removed] == ["A", "B"]
    assert lane.letters == (keep,)


def test_move_replaces_letters():
    lane = LaneState(1000, 600)
    before = lane.spawn("a", 0, 0)
    lane.move_all(15)
    after = lane.letters[0]
    assert before.top == 0
    assert after.top == 15
    assert after.id == before.id


def test_snapshot_marks_active():
    lane = LaneState(1000, 600)
    lane.spawn("a", 0, 0)
    lane.move_all(15)
    lane.spawn("b", 40, 0)
    snapshot = lane.snapshot()
    assert snapshot.active.char == "A"
    assert [v.active for v in snapshot.letters] == [True, False]
