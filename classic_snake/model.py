"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling.
The controller feeds it input events and applies the effects it returns.

Classes:
    Direction      — immutable (dx, dy) value object with a name
    Snake          — body, heading, buffered next heading
    Turn, TogglePause, Tick       — input events
    RenderRequest, SessionEnded   — effects emitted back to the controller
    GameSession    — one play-through at a fixed difficulty
"""

import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Optional

from .config import (
    GRID_SIZE, START_LENGTH, DIFFICULTIES,
    STATE_RUNNING, STATE_PAUSED, STATE_OVER,
    END_WALL, END_SELF, END_BOARD_FULL,
)
from .grid import Cell, in_bounds, random_empty_cell, step

logger = logging.getLogger(__name__)


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction."""
    LEFT  = None  # filled below after class definition
    RIGHT = None
    UP    = None
    DOWN  = None

    def __init__(self, name: str, x: int, y: int):
        self.name = name
        self.x = x
        self.y = y

    def is_opposite(self, other: "Direction") -> bool:
        return self.x == -other.x and self.y == -other.y

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction.{self.name.upper()}"


Direction.LEFT  = Direction("left",  -1,  0)
Direction.RIGHT = Direction("right",  1,  0)
Direction.UP    = Direction("up",     0, -1)
Direction.DOWN  = Direction("down",   0,  1)
ALL_DIRS = [Direction.RIGHT, Direction.LEFT, Direction.DOWN, Direction.UP]


# ──────────────────────────── Snake ──────────────────────────────
class Snake:
    """
    Body segments (head first) plus the applied and buffered headings.
    No rendering. No input handling. No bounds knowledge.
    """

    def __init__(self, segments, heading: Direction):
        self.body: deque[Cell] = deque(segments)
        self.dir: Direction = heading
        self._next_dir: Direction = heading

    # ── Accessors ────────────────────────────────────────────────
    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def pending(self) -> Direction:
        return self._next_dir

    def __len__(self) -> int:
        return len(self.body)

    # ── Commands ─────────────────────────────────────────────────
    def request_direction(self, new_dir: Direction) -> bool:
        """Buffer a direction change. Returns False if it would reverse the snake."""
        if new_dir.is_opposite(self.dir):
            return False
        self._next_dir = new_dir
        return True

    def turn(self) -> None:
        """Adopt the buffered direction as the heading."""
        self.dir = self._next_dir

    def next_head(self) -> Cell:
        return step(self.head, self.dir.x, self.dir.y)

    def advance(self, new_head: Cell, grow: bool = False) -> None:
        self.body.appendleft(new_head)
        if not grow:
            self.body.pop()

    # ── Queries ──────────────────────────────────────────────────
    def occupies(self, cell: Cell) -> bool:
        return cell in self.body


# ──────────────────────── Events & effects ───────────────────────
@dataclass(frozen=True)
class Turn:
    direction: Direction


@dataclass(frozen=True)
class TogglePause:
    pass


@dataclass(frozen=True)
class Tick:
    pass


@dataclass(frozen=True)
class RenderRequest:
    segments: tuple
    food: Optional[Cell]
    score: int
    grid_size: int


@dataclass(frozen=True)
class SessionEnded:
    difficulty: str
    reason: str
    score: int
    best: int
    new_best: bool

    @property
    def won(self) -> bool:
        return self.reason == END_BOARD_FULL


# ─────────────────────────── GameSession ─────────────────────────
class GameSession:
    """
    One play-through at a fixed difficulty.

    The controller schedules tick() every `interval_ms` and forwards player
    input; every call returns the list of effects to apply (render requests,
    session end). The best score is only written through `score_store`
    when the session ends.
    """

    def __init__(
        self,
        difficulty: str,
        score_store,
        grid_size: int = GRID_SIZE,
        rng: Optional[random.Random] = None,
    ):
        if difficulty not in DIFFICULTIES:
            raise ValueError(f"unknown difficulty: {difficulty!r}")
        self.difficulty = difficulty
        self.grid_size = grid_size
        self._scores = score_store
        self._rng = rng or random.Random()
        self.state: str = STATE_RUNNING
        self.score: int = 0
        self.snake: Snake = None
        self.food: Optional[Cell] = None
        self.result: Optional[SessionEnded] = None
        self._reset()

    # ── Public API ───────────────────────────────────────────────
    @property
    def interval_ms(self) -> int:
        return DIFFICULTIES[self.difficulty]["interval_ms"]

    @property
    def paused(self) -> bool:
        return self.state == STATE_PAUSED

    @property
    def ended(self) -> bool:
        return self.state == STATE_OVER

    def start(self) -> list:
        """(Re)initialise the session and return the initial render request."""
        self._reset()
        logger.info("session started: difficulty=%s", self.difficulty)
        return [self.render_request()]

    def set_direction(self, direction: Direction) -> None:
        if self.ended:
            return
        self.snake.request_direction(direction)

    def toggle_pause(self) -> None:
        if self.state == STATE_RUNNING:
            self.state = STATE_PAUSED
        elif self.state == STATE_PAUSED:
            self.state = STATE_RUNNING

    def tick(self) -> list:
        """Advance the snake one cell. No-op unless running."""
        if self.state != STATE_RUNNING:
            return []

        self.snake.turn()
        head = self.snake.next_head()

        if not in_bounds(head, self.grid_size):
            return [self.end(END_WALL)]
        if self.snake.occupies(head):
            return [self.end(END_SELF)]

        ate = head == self.food
        self.snake.advance(head, grow=ate)
        if not ate:
            return [self.render_request()]

        self.score += 1
        self.food = random_empty_cell(self.snake.body, self.grid_size, self._rng)
        effects = [self.render_request()]
        if self.food is None:
            effects.append(self.end(END_BOARD_FULL))
        return effects

    def end(self, reason: str) -> SessionEnded:
        """Terminate the session and record the best score if beaten."""
        if self.result is not None:
            return self.result
        self.state = STATE_OVER

        best = self._scores.get_best(self.difficulty)
        new_best = self.score > best
        if new_best:
            self._scores.set_best(self.difficulty, self.score)
            best = self.score
            logger.info("new best for %s: %d", self.difficulty, best)

        self.result = SessionEnded(self.difficulty, reason, self.score, best, new_best)
        logger.info("session ended: reason=%s score=%d best=%d",
                    reason, self.score, best)
        return self.result

    def handle(self, event) -> list:
        """Apply one input event and return the resulting effects."""
        if isinstance(event, Tick):
            return self.tick()
        if isinstance(event, Turn):
            self.set_direction(event.direction)
            return []
        if isinstance(event, TogglePause):
            self.toggle_pause()
            return []
        raise TypeError(f"unsupported event: {event!r}")

    def render_request(self) -> RenderRequest:
        return RenderRequest(tuple(self.snake.body), self.food, self.score, self.grid_size)

    # ── Private helpers ──────────────────────────────────────────
    def _reset(self) -> None:
        mid = self.grid_size // 2
        self.snake = Snake(
            [(mid - i, mid) for i in range(START_LENGTH)],
            Direction.RIGHT,
        )
        self.food = random_empty_cell(self.snake.body, self.grid_size, self._rng)
        self.score = 0
        self.state = STATE_RUNNING
        self.result = None
