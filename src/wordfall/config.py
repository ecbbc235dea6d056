"""Global constants and default settings."""

WINDOW_WIDTH = 1100
WINDOW_HEIGHT = 720
FPS = 60
WINDOW_TITLE = "WordFall"

# Lane geometry (pixels)
LANE_WIDTH = 1000
LANE_HEIGHT = 600
LETTER_SPACING = 40
LETTER_HEIGHT = 24
TARGET_LINE_OFFSET = 150  # distance of the target line from the lane bottom

# Hit evaluation windows (pixels from the target line)
PERFECT_WINDOW_PX = 40
OK_WINDOW_PX = 60
BAD_WINDOW_PX = 90

SCORE_VALUES = {
    "PERFECT": 300,
    "OK": 100,
    "BAD": 50,
}
COMBO_PER_MULTIPLIER = 15

# Miss recovery (milliseconds)
INPUT_LOCK_MS = 300
FREEZE_MS = 300
INDICATOR_LIFETIME_MS = 500

# Spawning
AVERAGE_WORD_LENGTH = 5  # characters per "word" for tempo normalisation
INTER_WORD_DELAY_MS = 150

# Song defaults
DEFAULT_WORDS_PER_MINUTE = 60
DEFAULT_PIXELS_PER_INTERVAL = 15
DEFAULT_DELAY_PER_MOVEMENT_MS = 50
DEFAULT_LETTER_DELAY_MS = 200
