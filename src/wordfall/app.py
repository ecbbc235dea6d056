"""Top-level application: initializes pygame, wires the engine to audio and rendering, runs the loop."""

from __future__ import annotations

import logging

import pygame

from wordfall.config import FPS, LANE_HEIGHT, LANE_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from wordfall.engine import GameEngine
from wordfall.keyboard_input import key_name
from wordfall.models import SongConfig
from wordfall.renderer import colors as colors_mod
from wordfall.renderer.hud import render_hud
from wordfall.renderer.lane import render_lane
from wordfall.songs import default_library, load_song_library
from wordfall.words import WordListError, default_words, load_word_list

logger = logging.getLogger(__name__)

SONG_CYCLE_KEY = "Tab"


class App:
    def __init__(
        self,
        songs_dir: str = "",
        words_path: str = "",
        song_title: str = "",
        soundfont: str = "",
    ) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        self.lane_rect = pygame.Rect(
            (WINDOW_WIDTH - LANE_WIDTH) // 2, WINDOW_HEIGHT - LANE_HEIGHT - 20, LANE_WIDTH, LANE_HEIGHT)

        self.library = self._load_library(songs_dir)
        self._titles = list(self.library) or ["Untitled"]
        self._song_pos = self._titles.index(song_title) if song_title in self._titles else 0
        if song_title and song_title not in self._titles:
            logger.warning("Unknown song %r; available: %s", song_title, ", ".join(self._titles))

        self.engine = GameEngine(song=self._current_song(), words=self._load_words(words_path))
        self.audio = self._try_audio(soundfont)
        if self.audio:
            self.engine.subscribe(self.audio)

    def _current_song(self) -> SongConfig:
        return self.library.get(self._titles[self._song_pos], SongConfig())

    def next_song(self) -> None:
        self._song_pos = (self._song_pos + 1) % len(self._titles)
        if self.audio:
            self.audio.all_notes_off()
        self.engine.select_song(self._current_song())

    def run(self) -> None:
        self.engine.start()
        running = True
        while running:
            dt_ms = self.clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    continue
                key = key_name(event)
                if key == SONG_CYCLE_KEY:
                    self.next_song()
                elif key is not None:
                    self.engine.handle_key(key)
            if running:
                self.engine.update(dt_ms)
                if self.audio:
                    self.audio.flush_pending_offs()
            self.draw()
            pygame.display.flip()

        self._cleanup()
        pygame.quit()

    def draw(self) -> None:
        self.screen.fill(colors_mod.BG)
        render_lane(self.screen, self.lane_rect, self.engine.lane_snapshot(),
                    self.engine.indicators, paused=not self.engine.running)
        render_hud(self.screen, self.engine.score_snapshot(), self.engine.song.title)

    def _cleanup(self) -> None:
        self.engine.shutdown()
        if self.audio:
            self.audio.shutdown()

    @staticmethod
    def _load_library(songs_dir: str) -> dict[str, SongConfig]:
        library = load_song_library(songs_dir) if songs_dir else {}
        if not library:
            library = default_library()
        return library

    @staticmethod
    def _load_words(words_path: str) -> list[str]:
        if words_path:
            try:
                return load_word_list(words_path)
            except WordListError as exc:
                logger.warning("%s; using the built-in word list", exc)
        return default_words()

    @staticmethod
    def _try_audio(soundfont: str):
        try:
            from wordfall.audio import AudioEngine
            return AudioEngine(soundfont or None)
        except Exception as exc:
            logger.warning("Audio disabled: %s", exc)
            return None
