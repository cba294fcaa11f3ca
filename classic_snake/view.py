"""
view.py — View layer.

Draws whatever the controller hands it; keeps no state the game depends on.
The only memory it has is cosmetic (score rack-up, title and food pulse).

Public API:
    GameView(screen)
    view.render(mode, difficulty, frame, best_scores, result)
"""

import math
import pygame

from .config import (
    WIDTH, PANEL_H, GAME_W, GAME_H,
    OFFSET_X, OFFSET_Y, CELL, GRID_SIZE,
    BG, GRID_COL, HEAD_COL, BODY_COL, BODY_DIM, FOOD_COL, ACCENT_COL,
    UI_COL, BLACK, PANEL_BG, BORDER_COL,
    DIFFICULTIES, DIFFICULTY_ORDER,
    STATE_MENU, STATE_OVER, STATE_PAUSED, END_WALL,
)

# name -> (size, bold)
FONT_SPECS = {
    "title": (40, True),
    "big":   (24, True),
    "med":   (17, False),
    "small": (13, True),
    "tiny":  (11, False),
}

GAME_OVER_TEXT = {
    # (won, hit wall) -> title, subtitle
    (True,  False): ("YOU WIN!",  "THE BOARD IS FULL"),
    (False, True):  ("GAME OVER", "YOU HIT THE WALL"),
    (False, False): ("GAME OVER", "YOU BIT YOURSELF"),
}


def _blend(c1: tuple, c2: tuple, t: float) -> tuple:
    t = max(0.0, min(1.0, t))
    return tuple(int(a + (b - a) * t) for a, b in zip(c1[:3], c2[:3]))


def _rgba(color: tuple, alpha: int) -> tuple:
    return (*color[:3], max(0, min(255, alpha)))


def _cell_rect(cell: tuple[int, int], inset: int = 1) -> pygame.Rect:
    return pygame.Rect(OFFSET_X + cell[0] * CELL + inset, OFFSET_Y + cell[1] * CELL + inset,
                       CELL - 2 * inset, CELL - 2 * inset)


def _heading(segments) -> tuple[int, int]:
    """Unit vector from neck to head; right for a one-cell snake."""
    if len(segments) < 2:
        return 1, 0
    (hx, hy), (nx, ny) = segments[0], segments[1]
    return hx - nx, hy - ny


class GameView:
    """Renders one frame: board, HUD, then the overlay for the current screen."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self.fonts = {name: self._load_font(size, bold)
                      for name, (size, bold) in FONT_SPECS.items()}
        self._board = self._build_board()
        self._disp_score: float = 0.0
        self._anim_tick: int = 0

    # ── Main entry ───────────────────────────────────────────────
    def render(self, mode: str, difficulty: str, frame, best_scores: dict, result=None) -> None:
        """
        mode        : STATE_MENU / STATE_RUNNING / STATE_PAUSED / STATE_OVER
        difficulty  : active (or last chosen) difficulty name
        frame       : latest RenderRequest from the session, or None
        best_scores : difficulty name -> best score
        result      : SessionEnded once the session is over
        """
        self._anim_tick += 1
        score = frame.score if frame is not None else 0
        self._disp_score += (score - self._disp_score) * 0.25

        self.screen.fill(BG)
        self.screen.blit(self._board, (OFFSET_X, OFFSET_Y))

        if mode != STATE_MENU and frame is not None:
            if frame.food is not None:
                self._draw_food(frame.food)
            self._draw_snake(frame.segments)

        self._draw_frame_border()
        self._draw_panel(mode, difficulty, best_scores.get(difficulty, 0))

        if mode == STATE_MENU:
            self._draw_menu(difficulty, best_scores)
        elif mode == STATE_PAUSED:
            self._draw_paused()
        elif mode == STATE_OVER and result is not None:
            self._draw_game_over(result)

        pygame.display.flip()

    # ── Board ────────────────────────────────────────────────────
    @staticmethod
    def _build_board() -> pygame.Surface:
        board = pygame.Surface((GAME_W, GAME_H))
        board.fill(_blend(BG, GRID_COL, 0.4))
        for i in range(GRID_SIZE + 1):
            pygame.draw.line(board, GRID_COL, (i * CELL, 0), (i * CELL, GAME_H))
            pygame.draw.line(board, GRID_COL, (0, i * CELL), (GAME_W, i * CELL))
        return board

    def _draw_food(self, food: tuple[int, int]) -> None:
        pulse = 0.85 + 0.15 * math.sin(self._anim_tick * 0.10)
        center = _cell_rect(food, 0).center
        r = max(2, int((CELL / 2 - 2) * pulse))

        halo = pygame.Surface((CELL * 2, CELL * 2), pygame.SRCALPHA)
        pygame.draw.circle(halo, _rgba(FOOD_COL, int(60 * pulse)), (CELL, CELL), r + 5)
        self.screen.blit(halo, (center[0] - CELL, center[1] - CELL))

        pygame.draw.circle(self.screen, FOOD_COL, center, r)
        pygame.draw.circle(self.screen, (255, 200, 190), (center[0] - 3, center[1] - 3), 3)

    def _draw_snake(self, segments) -> None:
        length = len(segments)
        for i, cell in enumerate(segments):
            if i == 0:
                color = HEAD_COL
            else:
                color = _blend(BODY_COL, BODY_DIM, i / max(length - 1, 1) * 0.6)
            rect = _cell_rect(cell)
            pygame.draw.rect(self.screen, color, rect,
                             border_radius=rect.w // 3 if i == 0 else rect.w // 5)

            # Top-half shading
            shade = pygame.Surface((rect.w, rect.h // 2), pygame.SRCALPHA)
            shade.fill((255, 255, 255, 70))
            self.screen.blit(shade, rect.topleft)

        if segments:
            self._draw_eyes(segments)

    def _draw_eyes(self, segments) -> None:
        cx, cy = _cell_rect(segments[0], 0).center
        dx, dy = _heading(segments)
        px, py = -dy, dx  # perpendicular

        for sign in (+1, -1):
            ex = cx + dx * 4 + sign * px * 4
            ey = cy + dy * 4 + sign * py * 4
            pygame.draw.rect(self.screen, (235, 235, 235), (ex - 2, ey - 2, 4, 4))
            pygame.draw.rect(self.screen, BLACK, (ex - 1, ey - 1, 2, 2))

    def _draw_frame_border(self) -> None:
        outer = pygame.Rect(OFFSET_X - 1, OFFSET_Y - 1, GAME_W + 2, GAME_H + 2)
        pygame.draw.rect(self.screen, BORDER_COL, outer, 1)
        arm = 14
        for corner, (sx, sy) in (
            (outer.topleft, (1, 1)), (outer.topright, (-1, 1)),
            (outer.bottomleft, (1, -1)), (outer.bottomright, (-1, -1)),
        ):
            x, y = corner
            pygame.draw.lines(self.screen, HEAD_COL, False,
                              [(x, y + sy * arm), (x, y), (x + sx * arm, y)], 2)

    # ── HUD Panel ─────────────────────────────────────────────────
    def _draw_panel(self, mode: str, difficulty: str, best: int) -> None:
        pygame.draw.rect(self.screen, PANEL_BG, (0, 0, WIDTH, PANEL_H))
        pygame.draw.line(self.screen, BORDER_COL, (0, PANEL_H - 1), (WIDTH, PANEL_H - 1), 1)

        small, big = self.fonts["small"], self.fonts["big"]
        self.screen.blit(small.render("SCORE", True, HEAD_COL), (16, 6))
        self.screen.blit(big.render(str(round(self._disp_score)), True, HEAD_COL), (16, 24))

        label = small.render("BEST", True, ACCENT_COL)
        value = big.render(str(best), True, ACCENT_COL)
        self.screen.blit(label, label.get_rect(topright=(WIDTH - 16, 6)))
        self.screen.blit(value, value.get_rect(topright=(WIDTH - 16, 24)))

        self._draw_difficulty_pips(WIDTH // 2, 12, difficulty)
        diff = DIFFICULTIES[difficulty]
        name = small.render(diff["label"], True, diff["color"])
        self.screen.blit(name, name.get_rect(center=(WIDTH // 2, 28)))

        if mode == STATE_PAUSED:
            badge = self.fonts["tiny"].render("[ PAUSED ]", True, ACCENT_COL)
            self.screen.blit(badge, badge.get_rect(midbottom=(WIDTH // 2, PANEL_H - 4)))

    def _draw_difficulty_pips(self, cx: int, cy: int, active: str) -> None:
        """One pip per difficulty, the active one lit in its colour."""
        spacing = 12
        x0 = cx - (len(DIFFICULTY_ORDER) - 1) * spacing // 2
        for i, name in enumerate(DIFFICULTY_ORDER):
            lit = name == active
            color = DIFFICULTIES[name]["color"] if lit else _blend(UI_COL, BG, 0.3)
            pygame.draw.circle(self.screen, color, (x0 + i * spacing, cy), 4 if lit else 2)

    # ── Overlays ──────────────────────────────────────────────────
    def _shade_board(self) -> None:
        veil = pygame.Surface((GAME_W, GAME_H), pygame.SRCALPHA)
        veil.fill((5, 5, 12, 215))
        self.screen.blit(veil, (OFFSET_X, OFFSET_Y))

    def _centered(self, text: str, font: str, color: tuple, cy: int, gap: int = 8) -> int:
        """Blit `text` centred on the board at `cy`; return the next free line."""
        surf = self.fonts[font].render(text, True, color)
        self.screen.blit(surf, surf.get_rect(midtop=(WIDTH // 2, cy)))
        return cy + surf.get_height() + gap

    def _title(self, text: str, color: tuple, cy: int) -> int:
        # Slab behind the title breathes slowly
        alpha = int(30 + 15 * math.sin(self._anim_tick * 0.05))
        surf = self.fonts["title"].render(text, True, color)
        slab = pygame.Surface((surf.get_width() + 40, surf.get_height() + 12), pygame.SRCALPHA)
        slab.fill(_rgba(color, alpha))
        self.screen.blit(slab, slab.get_rect(midtop=(WIDTH // 2, cy - 6)))
        self.screen.blit(surf, surf.get_rect(midtop=(WIDTH // 2, cy)))
        return cy + surf.get_height() + 14

    def _button(self, label: str, color: tuple, cy: int) -> int:
        rect = pygame.Rect(0, cy, max(240, self.fonts["small"].size(label)[0] + 40), 34)
        rect.centerx = WIDTH // 2
        fill = pygame.Surface(rect.size, pygame.SRCALPHA)
        fill.fill(_rgba(color, 22))
        self.screen.blit(fill, rect)
        pygame.draw.rect(self.screen, color, rect, 2, border_radius=4)
        txt = self.fonts["small"].render(label, True, color)
        self.screen.blit(txt, txt.get_rect(center=rect.center))
        return rect.bottom + 8

    def _draw_menu(self, selected: str, best_scores: dict) -> None:
        self._shade_board()
        cy = self._title("SNAKE", HEAD_COL, OFFSET_Y + 24)
        cy = self._centered("SELECT A MODE", "med", UI_COL, cy, gap=16)

        for i, name in enumerate(DIFFICULTY_ORDER, start=1):
            diff = DIFFICULTIES[name]
            color = diff["color"] if name == selected else _blend(UI_COL, diff["color"], 0.5)
            cy = self._button(f"{i}  {diff['label']:<6}  BEST {best_scores.get(name, 0)}", color, cy)

        cy = self._centered("UP/DOWN CHOOSE  |  ENTER PLAYS  |  Q QUITS", "tiny", UI_COL, cy + 6)
        self._centered("ARROWS MOVE  SPACE PAUSE  R RESTART  ESC MENU", "tiny", UI_COL, cy)

    def _draw_paused(self) -> None:
        self._shade_board()
        cy = self._title("PAUSED", ACCENT_COL, OFFSET_Y + GAME_H // 2 - 40)
        self._centered("PRESS  SPACE  TO RESUME", "med", UI_COL, cy)

    def _draw_game_over(self, result) -> None:
        self._shade_board()
        title, sub = GAME_OVER_TEXT[(result.won, result.reason == END_WALL)]
        color = HEAD_COL if result.won else FOOD_COL

        cy = self._title(title, color, OFFSET_Y + 36)
        cy = self._centered(sub, "med", _blend(UI_COL, color, 0.5), cy, gap=18)
        cy = self._centered(f"FINAL SCORE  {result.score}", "big", HEAD_COL, cy)
        if result.new_best:
            cy = self._centered("★  NEW HIGH SCORE  ★", "small", ACCENT_COL, cy)
        else:
            cy = self._centered(f"BEST: {result.best}", "small", UI_COL, cy)
        cy = self._centered(f"MODE: {DIFFICULTIES[result.difficulty]['label']}", "tiny", UI_COL,
                            cy + 4, gap=18)
        cy = self._button("R / ENTER — PLAY AGAIN", color, cy)
        self._button("ESC — CHANGE MODE", UI_COL, cy)

    @staticmethod
    def _load_font(size: int, bold: bool) -> pygame.font.Font:
        try:
            return pygame.font.SysFont("courier", size, bold=bold)
        except (pygame.error, OSError):
            return pygame.font.Font(None, size)
