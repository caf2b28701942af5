# src/connectfour/config.py

from __future__ import annotations

ROWS = 6
COLS = 7
CONNECT_N = 4

# Evaluation weights
WIN_SCORE = 1000          # terminal score base; depth remaining is added on top
CENTER_WEIGHT = 3
WINDOW_FOUR = 100
WINDOW_THREE = 10
WINDOW_TWO = 2
WINDOW_OPP_THREE = -80    # outweighs our own three so blocks come first

# Difficulty
DEFAULT_HARD_DEPTH = 6
MIN_DEPTH = 1
MAX_DEPTH = 8
RANDOM_MAX_DEPTH = 1      # depth <= this plays random moves
TACTICAL_MAX_DEPTH = 3    # depth <= this plays win/block/random

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 1  # short pause so AI moves aren’t instant
