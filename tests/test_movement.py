"""Tests for the movement tick, freeze, and boundary breach."""

from wordfall.lane import LaneState
from wordfall.models import SongConfig
from wordfall.movement import MovementClock
from wordfall.timers import TimerQueue


def make_clock(song=None):
    timers = TimerQueue()
    lane = LaneState(1000, 600)
    breaches = []
    clock = MovementClock(timers, lane, song or SongConfig(), on_breach=breaches.append)
    return timers, lane, clock, breaches


def test_each_tick_moves_every_letter_by_one_interval():
    timers, lane, clock, _ = make_clock()
    lane.spawn("a", 0, 0)
    lane.spawn("b", 40, 0)
    clock.start()
    timers.advance(100)
    assert [l.top for l in lane.letters] == [30, 30]


def test_tick_period_follows_song():
    timers, lane, clock, _ = make_clock(SongConfig(pixels_per_interval=10, delay_per_movement_ms=100))
    lane.spawn("a", 0, 0)
    clock.start()
    timers.advance(99)
    assert lane.letters[0].top == 0
    timers.advance(1)
    assert lane.letters[0].top == 10


def test_breach_clears_the_whole_board():
    timers, lane, clock, breaches = make_clock()
    lane.spawn("a", 0, 0)
    lane.spawn("b", 40, 1)
    lane.move_all(570)
    assert clock.step() is True
    assert len(lane) == 0
    assert [l.char for l in breaches[0]] == ["A", "B"]


def test_no_breach_above_the_limit():
    timers, lane, clock, breaches = make_clock()
    lane.spawn("a", 0, 0)
    lane.move_all(555)
    assert clock.step() is False
    assert lane.letters[0].top == 570
    assert breaches == []


def test_freeze_holds_letters_then_releases():
    timers, lane, clock, _ = make_clock()
    lane.spawn("a", 0, 0)
    clock.start()
    clock.freeze(300)
    timers.advance(250)
    assert lane.letters[0].top == 0
    assert clock.frozen
    timers.advance(100)
    assert not clock.frozen
    assert lane.letters[0].top > 0


def test_stop_and_restart_resume_from_same_position():
    timers, lane, clock, _ = make_clock()
    lane.spawn("a", 0, 0)
    clock.start()
    timers.advance(100)
    clock.stop()
    timers.advance(1000)
    assert lane.letters[0].top == 30
    clock.start()
    timers.advance(49)
    assert lane.letters[0].top == 30
    timers.advance(1)
    assert lane.letters[0].top == 45


def test_start_twice_keeps_one_tick():
    timers, lane, clock, _ = make_clock()
    lane.spawn("a", 0, 0)
    clock.start()
    clock.start()
    timers.advance(50)
    assert lane.letters[0].top == 15
