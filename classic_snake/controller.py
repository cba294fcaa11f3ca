"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame event loop.
  - Translate raw keyboard events into session input events.
  - Schedule ticks: one repeating pygame timer per session, cancelled
    before a new one is installed so two tick streams never overlap.
  - Apply the effects the session returns (keep the latest frame,
    remember the end-of-session result).
  - Switch between the menu and a session.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

The controller is the only layer that imports pygame directly for events.
"""

import logging
import sys
from typing import Optional

import pygame

from .config import (
    WIDTH, HEIGHT, FPS,
    DIFFICULTIES, DIFFICULTY_ORDER, DEFAULT_DIFFICULTY,
    STATE_MENU, STATE_RUNNING, STATE_PAUSED, STATE_OVER,
)
from .model import (
    Direction, GameSession, RenderRequest, SessionEnded,
    Tick, TogglePause, Turn,
)
from .view import GameView

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1

DIRECTION_KEYS = {
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP:    Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
}

DIFFICULTY_KEYS = {
    pygame.K_1: "easy",
    pygame.K_2: "normal",
    pygame.K_3: "hard",
    pygame.K_e: "easy",
    pygame.K_n: "normal",
    pygame.K_h: "hard",
}


class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    """

    def __init__(self, score_store, difficulty: Optional[str] = None):
        pygame.init()
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("SNAKE")
        self.clock  = pygame.time.Clock()
        self.view   = GameView(self.screen)
        self.scores = score_store

        self.difficulty: str = DEFAULT_DIFFICULTY
        self.session: Optional[GameSession] = None
        self.frame: Optional[RenderRequest] = None
        self.result: Optional[SessionEnded] = None
        self.timer_ms: int = 0
        self.session_id: int = 0

        if difficulty is not None:
            self.start_session(difficulty)

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the player quits."""
        while True:
            self.clock.tick(FPS)
            self._handle_events()
            self.view.render(
                self.mode, self.difficulty, self.frame,
                self.scores.all_best(), self.result,
            )

    @property
    def mode(self) -> str:
        if self.session is None:
            return STATE_MENU
        return self.session.state

    # ── Session lifecycle ─────────────────────────────────────────
    def start_session(self, difficulty: str) -> None:
        """Begin a fresh session, replacing any running one."""
        if difficulty not in DIFFICULTIES:
            raise ValueError(f"unknown difficulty: {difficulty!r}")
        self._cancel_timer()
        self.difficulty = difficulty
        self.result = None
        self.session = GameSession(difficulty, self.scores)
        self.session_id += 1
        self._apply(self.session.start())
        self._schedule_timer(self.session.interval_ms)

    def restart(self) -> None:
        self.start_session(self.difficulty)

    def show_menu(self) -> None:
        """Abandon the current session (if any) and return to the menu."""
        self._cancel_timer()
        if self.session is not None and not self.session.ended:
            logger.info("session abandoned at score %d", self.session.score)
        self.session = None
        self.frame = None
        self.result = None

    def dispatch(self, event) -> None:
        """Forward one input event to the session and apply its effects."""
        if self.session is None:
            return
        self._apply(self.session.handle(event))

    # ── Effects & timer ───────────────────────────────────────────
    def _apply(self, effects: list) -> None:
        for effect in effects:
            if isinstance(effect, RenderRequest):
                self.frame = effect
            elif isinstance(effect, SessionEnded):
                self._cancel_timer()
                self.result = effect

    def _schedule_timer(self, interval_ms: int) -> None:
        # Ticks carry the session they were scheduled for.
        tick = pygame.event.Event(TICK_EVENT, session=self.session_id)
        pygame.time.set_timer(tick, interval_ms)
        self.timer_ms = interval_ms

    def _cancel_timer(self) -> None:
        pygame.time.set_timer(TICK_EVENT, 0)
        self.timer_ms = 0
        # Drop ticks already queued by the old timer.
        pygame.event.clear(TICK_EVENT)

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()
            elif event.type == TICK_EVENT:
                # A tick fetched in the same batch as a restart belongs
                # to the previous session.
                if getattr(event, "session", None) == self.session_id:
                    self.dispatch(Tick())
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)

    def _handle_keydown(self, key: int) -> None:
        # Q quits from any state
        if key == pygame.K_q:
            self._quit()

        mode = self.mode

        if mode == STATE_MENU:
            self._handle_menu_keys(key)
        elif mode in (STATE_RUNNING, STATE_PAUSED):
            self._handle_playing_keys(key)
        elif mode == STATE_OVER:
            self._handle_over_keys(key)

    # ── Per-state key handlers ────────────────────────────────────
    def _handle_menu_keys(self, key: int) -> None:
        if key in DIFFICULTY_KEYS:
            self.start_session(DIFFICULTY_KEYS[key])
        elif key == pygame.K_RETURN:
            self.start_session(self.difficulty)
        elif key in (pygame.K_UP, pygame.K_DOWN):
            # Move the highlighted mode without starting
            i = DIFFICULTY_ORDER.index(self.difficulty)
            i += 1 if key == pygame.K_DOWN else -1
            self.difficulty = DIFFICULTY_ORDER[i % len(DIFFICULTY_ORDER)]

    def _handle_playing_keys(self, key: int) -> None:
        if key in DIRECTION_KEYS:
            self.dispatch(Turn(DIRECTION_KEYS[key]))
        elif key in (pygame.K_SPACE, pygame.K_p):
            self.dispatch(TogglePause())
        elif key == pygame.K_r:
            self.restart()
        elif key == pygame.K_ESCAPE:
            self.show_menu()

    def _handle_over_keys(self, key: int) -> None:
        if key in (pygame.K_r, pygame.K_SPACE, pygame.K_RETURN):
            self.restart()
        elif key in (pygame.K_ESCAPE, pygame.K_m):
            self.show_menu()

    # ── Utilities ─────────────────────────────────────────────────
    @staticmethod
    def _quit() -> None:
        pygame.quit()
        sys.exit()
