"""
config.py — Shared constants for the entire application.
No logic, no imports from internal modules.
"""

from pathlib import Path

# ── Window & Grid ─────────────────────────────────────────────────
GRID_SIZE       = 20
CELL            = 20
PANEL_H         = 60
GAME_W = GAME_H = GRID_SIZE * CELL
OFFSET_X        = 10
OFFSET_Y        = PANEL_H + 10
WIDTH           = GAME_W + 2 * OFFSET_X
HEIGHT          = OFFSET_Y + GAME_H + 10
FPS             = 60

# ── Colors ────────────────────────────────────────────────────────
BG          = (10,  10,  15)
GRID_COL    = (15,  20,  32)
HEAD_COL    = (46,  204, 113)
BODY_COL    = (82,  214, 129)
BODY_DIM    = (30,  120, 70)
FOOD_COL    = (231, 76,  60)
ACCENT_COL  = (255, 228, 77)
UI_COL      = (120, 120, 170)
BLACK       = (0,   0,   0)
PANEL_BG    = (12,  12,  20)
BORDER_COL  = (26,  26,  62)

# ── Gameplay ──────────────────────────────────────────────────────
START_LENGTH = 3

# interval_ms = milliseconds between ticks
DIFFICULTIES = {
    "easy":   {"label": "EASY",   "interval_ms": 150, "color": (0,   200, 100)},
    "normal": {"label": "NORMAL", "interval_ms": 100, "color": (255, 200, 0)},
    "hard":   {"label": "HARD",   "interval_ms": 60,  "color": (255, 51,  102)},
}
DIFFICULTY_ORDER = ("easy", "normal", "hard")
DEFAULT_DIFFICULTY = "easy"

# ── Game States ───────────────────────────────────────────────────
STATE_MENU    = "menu"
STATE_RUNNING = "running"
STATE_PAUSED  = "paused"
STATE_OVER    = "over"

# ── End reasons ───────────────────────────────────────────────────
END_WALL       = "wall"
END_SELF       = "self"
END_BOARD_FULL = "board_full"

# ── Persistence ───────────────────────────────────────────────────
SCORES_KEY          = "snakeHighScores"
SCORES_ENV_VAR      = "CLASSIC_SNAKE_SCORES"
DEFAULT_SCORES_PATH = Path.home() / ".classic_snake" / "storage.json"
