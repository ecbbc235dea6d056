"""Heads-up display — score, multiplier, combo, best combo, accuracy."""

from __future__ import annotations

import pygame

from wordfall.effects import ScoreSnapshot
from wordfall.renderer.colors import HUD_TEXT


def render_hud(surface: pygame.Surface, snapshot: ScoreSnapshot, song_title: str = "") -> None:
    font = pygame.font.SysFont("monospace", 20)

    lines = [
        f"Score: {snapshot.score}",
        f"Multiplier: x{snapshot.multiplier}",
        f"Combo: {snapshot.combo}",
        f"Best combo: {snapshot.max_combo}",
        f"Accuracy: {snapshot.accuracy:.0f}%",
    ]
    if song_title:
        lines.append(f"Song: {song_title}")

    y = 10
    for line in lines:
        text = font.render(line, True, HUD_TEXT)
        surface.blit(text, (10, y))
        y += 28
