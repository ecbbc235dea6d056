"""Game engine — owns the lane, score, timers and the three mutation sources."""

from __future__ import annotations

import itertools
import logging
import random
from typing import Iterable

from wordfall.config import INDICATOR_LIFETIME_MS, LANE_HEIGHT, LANE_WIDTH
from wordfall.effects import (
    Effect,
    EffectListener,
    HitIndicatorShown,
    LaneSnapshot,
    PlayCue,
    ScoreSnapshot,
)
from wordfall.evaluator import InputJudge, is_ignored_key
from wordfall.lane import LaneState
from wordfall.models import Cue, HitIndicator, HitKind, JudgeRules, Judgement, Letter, ScoreState, SongConfig
from wordfall.movement import MovementClock
from wordfall.spawner import SpawnScheduler
from wordfall.timers import TimerHandle, TimerQueue
from wordfall.words import WordSource

logger = logging.getLogger(__name__)

PAUSE_KEY = "Escape"


class GameEngine:
    """Single-threaded engine driven by ``update(elapsed_ms)`` and ``handle_key(key)``.

    Collaborators observe the game through effect records delivered to
    subscribed listeners and through the read-only snapshot methods; they
    never mutate engine state directly.
    """

    def __init__(
        self,
        song: SongConfig | None = None,
        words: Iterable[str] | WordSource = (),
        rules: JudgeRules | None = None,
        rng: random.Random | None = None,
        timers: TimerQueue | None = None,
        lane_width: float = LANE_WIDTH,
        lane_height: float = LANE_HEIGHT,
    ) -> None:
        self._song = song or SongConfig()
        self.timers = timers or TimerQueue()
        self.lane = LaneState(lane_width, lane_height)
        self.score = ScoreState()
        self.word_source = words if isinstance(words, WordSource) else WordSource(words, rng=rng)

        self._running = False
        self._closed = False
        self._listeners: list[EffectListener] = []
        self._indicators: dict[int, HitIndicator] = {}
        self._indicator_timers: dict[int, TimerHandle] = {}
        self._indicator_ids = itertools.count(1)

        self.spawner = SpawnScheduler(
            self.timers, self.lane, self.word_source, self._song,
            is_running=lambda: self._running,
            on_spawn=self._letter_spawned,
        )
        self.movement = MovementClock(
            self.timers, self.lane, self._song,
            on_move=self._publish_lane,
            on_breach=self._boundary_breached,
        )
        self.judge = InputJudge(
            self.timers, self.lane, self.score, self.spawner, self.movement,
            self._song, sink=self, rules=rules,
        )

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def song(self) -> SongConfig:
        return self._song

    @property
    def running(self) -> bool:
        return self._running

    @property
    def locked(self) -> bool:
        return self.judge.locked

    @property
    def frozen(self) -> bool:
        return self.movement.frozen

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def note_index(self) -> int:
        return self.judge.note_index

    @property
    def letters(self) -> tuple[Letter, ...]:
        return self.lane.letters

    @property
    def active_letter(self) -> Letter | None:
        return self.lane.active_letter()

    @property
    def indicators(self) -> tuple[HitIndicator, ...]:
        return tuple(self._indicators.values())

    def lane_snapshot(self) -> LaneSnapshot:
        return self.lane.snapshot()

    def score_snapshot(self) -> ScoreSnapshot:
        s = self.score
        return ScoreSnapshot(score=s.score, multiplier=s.multiplier, combo=s.combo,
                             accuracy=s.accuracy(), max_combo=s.max_combo)

    # ------------------------------------------------------------------
    # Effects
    # ------------------------------------------------------------------
    def subscribe(self, listener: EffectListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: EffectListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, effect: Effect) -> None:
        for listener in list(self._listeners):
            try:
                listener(effect)
            except Exception:
                logger.exception("Effect listener %r failed on %s", listener, type(effect).__name__)

    def show_indicator(self, kind: HitKind, x: float, y: float) -> None:
        indicator = HitIndicator(
            id=next(self._indicator_ids), kind=kind, x=x, y=y,
            expires_at_ms=self.timers.now + INDICATOR_LIFETIME_MS,
        )
        self._indicators[indicator.id] = indicator
        self._indicator_timers[indicator.id] = self.timers.call_later(
            INDICATOR_LIFETIME_MS, self._expire_indicator, indicator.id)
        self.emit(HitIndicatorShown(indicator))

    def _expire_indicator(self, indicator_id: int) -> None:
        self._indicators.pop(indicator_id, None)
        self._indicator_timers.pop(indicator_id, None)

    def _clear_indicators(self) -> None:
        for handle in self._indicator_timers.values():
            handle.cancel()
        self._indicator_timers.clear()
        self._indicators.clear()

    def _publish_lane(self) -> None:
        self.emit(self.lane_snapshot())

    def _publish_score(self) -> None:
        self.emit(self.score_snapshot())

    def _letter_spawned(self, letter: Letter) -> None:
        self._publish_lane()

    def _boundary_breached(self, cleared: list[Letter]) -> None:
        self.spawner.cancel_all()
        self.score.record_miss()
        self.emit(PlayCue(Cue.BOUNDARY_BREACH))
        self._publish_lane()
        self._publish_score()
        self.spawner.skip_to_next_word()

    # ------------------------------------------------------------------
    # Control surface
    # ------------------------------------------------------------------
    def start(self) -> None:
        self.resume()

    def resume(self) -> None:
        if self._closed or self._running:
            return
        self._running = True
        logger.debug("Running")
        self.movement.start()
        self.spawner.resume()

    def pause(self) -> None:
        if not self._running:
            return
        self._running = False
        logger.debug("Paused")
        self.movement.stop()
        self.spawner.pause()

    def toggle_pause(self) -> None:
        if self._running:
            self.pause()
        else:
            self.resume()

    def select_song(self, song: SongConfig) -> None:
        """Swap the song and flush every per-song piece of state in one step."""
        if self._closed:
            return
        self.spawner.reset()
        self.movement.stop()
        self.movement.unfreeze()
        self.judge.reset()
        self.lane.clear()
        self.score.reset()
        self._clear_indicators()

        self._song = song
        self.spawner.song = song
        self.movement.song = song
        self.judge.song = song
        logger.info("Selected song %r (%s wpm, %d notes)", song.title, song.words_per_minute, len(song.notes))

        self._publish_lane()
        self._publish_score()
        if self._running:
            self.movement.start()
            self.spawner.start_next_word()

    def handle_key(self, key: str) -> Judgement | None:
        if self._closed:
            return None
        if key == PAUSE_KEY:
            self.toggle_pause()
            return None
        if is_ignored_key(key) or not self._running:
            return None
        result = self.judge.judge(key)
        if result is not None:
            self._publish_lane()
            self._publish_score()
        return result

    def update(self, elapsed_ms: float) -> None:
        """Let ``elapsed_ms`` of game time pass, firing every due timer."""
        if self._closed:
            return
        self.timers.advance(elapsed_ms)

    def shutdown(self) -> None:
        if self._closed:
            return
        self._running = False
        self.spawner.cancel_all()
        self.movement.stop()
        self.movement.unfreeze()
        self.judge.unlock()
        self._clear_indicators()
        self.timers.cancel_all()
        self._listeners.clear()
        self._closed = True
        logger.debug("Engine shut down")
