"""Layout constants and color definitions."""

# Window
SCREEN_W = 1024
SCREEN_H = 640

# Refresh period bounds (ms); Up/Down step by REFRESH_STEP_MS
DEFAULT_REFRESH_MS = 50
MIN_REFRESH_MS = 10
MAX_REFRESH_MS = 100
REFRESH_STEP_MS = 5

# Boxes
BOX_PAD = 12
BORDER_W = 2

# Help overlay
HELP_W = 320
HELP_H = 200
HELP_MARGIN = 16

# Colors
BG_COLOR = (12, 12, 16)
TEXT_COLOR = (190, 190, 190)
TEXT_DIM = (110, 110, 110)
BORDER_SELECTED = (60, 200, 90)
BORDER_IDLE = (130, 130, 130)
HELP_BORDER = (80, 80, 80)
PROMPT_BG = (0, 0, 0)
YES_COLOR = (60, 200, 90)
NO_COLOR = (220, 70, 70)
