"""Falling-letter lane, target line, and hit indicators."""

from __future__ import annotations

import pygame

from wordfall.config import LETTER_HEIGHT, TARGET_LINE_OFFSET
from wordfall.effects import LaneSnapshot, LetterView
from wordfall.models import HitIndicator
from wordfall.renderer.colors import (
    INDICATOR_COLORS,
    LANE_BG,
    LANE_BORDER,
    LETTER_ACTIVE,
    PAUSED_TEXT,
    TARGET_LINE,
    WORD_COLORS,
)


def letter_color(view: LetterView) -> tuple[int, int, int]:
    if view.active:
        return LETTER_ACTIVE
    return WORD_COLORS[view.word_index % len(WORD_COLORS)]


def render_lane(
    surface: pygame.Surface,
    rect: pygame.Rect,
    snapshot: LaneSnapshot,
    indicators: tuple[HitIndicator, ...] = (),
    paused: bool = False,
) -> None:
    """Draw the lane inside ``rect``; letter offsets are relative to its top-left."""
    pygame.draw.rect(surface, LANE_BG, rect)
    pygame.draw.rect(surface, LANE_BORDER, rect, width=2, border_radius=8)

    target_y = rect.bottom - TARGET_LINE_OFFSET
    pygame.draw.rect(surface, TARGET_LINE, pygame.Rect(rect.x, target_y, rect.w, 4))

    font = pygame.font.SysFont("monospace", LETTER_HEIGHT, bold=True)
    for view in snapshot.letters:
        text = font.render(view.char, True, letter_color(view))
        surface.blit(text, (rect.x + int(view.left), rect.y + int(view.top)))

    small = pygame.font.SysFont("monospace", 16, bold=True)
    for indicator in indicators:
        text = small.render(indicator.kind.name, True, INDICATOR_COLORS[indicator.kind])
        surface.blit(text, (rect.x + int(indicator.x), rect.y + int(indicator.y) - 18))

    if paused:
        big = pygame.font.SysFont("monospace", 32)
        text = big.render("Paused", True, PAUSED_TEXT)
        surface.blit(text, text.get_rect(center=rect.center))
