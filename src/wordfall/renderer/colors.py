"""Color palette."""

from wordfall.models import HitKind

# RGB tuples
BG = (18, 18, 24)
LANE_BG = (17, 17, 17)
LANE_BORDER = (51, 51, 51)
TARGET_LINE = (255, 165, 0)
WORD_COLORS = ((235, 90, 90), (90, 140, 235))  # alternate by word index
LETTER_ACTIVE = (255, 215, 80)
HUD_TEXT = (220, 220, 220)
PAUSED_TEXT = (220, 60, 60)

INDICATOR_COLORS: dict[HitKind, tuple[int, int, int]] = {
    HitKind.PERFECT: (80, 220, 100),
    HitKind.OK: (180, 220, 80),
    HitKind.BAD: (245, 166, 66),
    HitKind.MISS: (220, 60, 60),
    HitKind.WRONG: (200, 60, 200),
}
