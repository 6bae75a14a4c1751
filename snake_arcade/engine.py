"""Game state engine: tick rule, collisions, food and score bookkeeping.

The engine knows nothing about timing or drawing. Something external calls
``tick()`` once per ``GAME_SPEED`` ms while the game is running (see
``snake_arcade.driver``) and reads ``snapshot()`` to draw a frame. All calls
are expected on one thread.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from config import BOARD_SIZE, HIGHSCORE_KEY, TAIL_IS_SOLID
from .food import Food
from .snake import Direction, Snake
from .storage import MemoryStore

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class Status(Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


class TickResult(Enum):
    IDLE = "idle"
    MOVED = "moved"
    ATE = "ate"
    WALL_COLLISION = "wall_collision"
    SELF_COLLISION = "self_collision"

    @property
    def is_collision(self) -> bool:
        return self in (TickResult.WALL_COLLISION, TickResult.SELF_COLLISION)


@dataclass(frozen=True)
class GameState:
    """Read-only view of the engine for renderers."""

    snake: Tuple[Cell, ...]
    food: Cell
    direction: Direction
    score: int
    high_score: int
    is_playing: bool
    is_game_over: bool
    board_size: int = BOARD_SIZE
    has_started: bool = False

    @property
    def status(self) -> Status:
        if self.is_game_over:
            return Status.GAME_OVER
        if self.is_playing:
            return Status.RUNNING
        return Status.IDLE


class GameEngine:
    """Holds all mutable game state and applies the tick rule."""

    def __init__(
        self,
        store=None,
        rng: Optional[random.Random] = None,
        board_size: int = BOARD_SIZE,
        tail_is_solid: bool = TAIL_IS_SOLID,
        highscore_key: str = HIGHSCORE_KEY,
    ):
        if board_size < 1:
            raise ValueError(f"board_size must be positive, got {board_size}")
        self.store = store if store is not None else MemoryStore()
        self.rng = rng if rng is not None else random.Random()
        self.board_size = board_size
        self.tail_is_solid = tail_is_solid
        self.highscore_key = highscore_key

        self.snake = Snake()
        if any(self.snake.check_wall_collision(cell, board_size) for cell in self.snake.segments):
            raise ValueError(f"starting snake does not fit a {board_size}x{board_size} board")
        self.food = Food(board_size=board_size)
        self.high_score = self._load_high_score()
        self.reset()

    def _load_high_score(self) -> int:
        try:
            saved = self.store.get(self.highscore_key)
            if saved is None:
                return 0
            return max(0, int(saved))
        except Exception:
            logger.warning("Could not load high score", exc_info=True)
            return 0

    def _save_high_score(self):
        """Persist the high score; failures leave in-memory state alone."""
        try:
            ok = self.store.set(self.highscore_key, self.high_score)
        except Exception:
            logger.warning("Could not save high score %d", self.high_score, exc_info=True)
            return
        if ok is False:
            logger.warning("High score %d was not saved", self.high_score)

    @property
    def status(self) -> Status:
        return self.snapshot().status

    def snapshot(self) -> GameState:
        return GameState(
            snake=self.snake.cells(),
            food=self.food.position,
            direction=self.direction,
            score=self.score,
            high_score=self.high_score,
            is_playing=self.is_playing,
            is_game_over=self.is_game_over,
            board_size=self.board_size,
            has_started=self.has_started,
        )

    def set_direction(self, direction: Direction):
        """Steer the snake.

        Ignored while not playing, for anything that is not a Direction, and
        for a reversal of either the current direction or the direction of the
        last move, so two quick turns inside one tick cannot fold the snake
        back onto its neck.
        """
        if not self.is_playing or not isinstance(direction, Direction):
            return
        if direction.is_reverse_of(self.direction) or direction.is_reverse_of(self._heading()):
            return
        self.direction = direction

    def _heading(self):
        """Direction of the last move, read off the head and neck."""
        if len(self.snake) < 2:
            return None
        (hx, hy), (nx, ny) = self.snake.segments[0], self.snake.segments[1]
        try:
            return Direction((hx - nx, hy - ny))
        except ValueError:
            return None

    def tick(self) -> TickResult:
        """Advance the game by one step."""
        if not self.is_playing or self.is_game_over:
            return TickResult.IDLE

        new_head = self.snake.next_head(self.direction)

        if self.snake.check_wall_collision(new_head, self.board_size):
            self._game_over()
            return TickResult.WALL_COLLISION

        # A growing snake keeps its tail, so the tail cell is solid when eating
        ate = self.food.check_collision(new_head)
        if self.snake.check_self_collision(new_head, include_tail=self.tail_is_solid or ate):
            self._game_over()
            return TickResult.SELF_COLLISION

        self.snake.advance(new_head, grow=ate)
        if not ate:
            return TickResult.MOVED

        self.score += self.food.score
        if self.score > self.high_score:
            self.high_score = self.score
            self._save_high_score()
        self.food.respawn(self.snake.segments, self.rng)
        return TickResult.ATE

    def _game_over(self):
        self.is_game_over = True
        self.is_playing = False
        logger.info("Game over with score %d (high score %d)", self.score, self.high_score)

    def start(self):
        """Start or resume; a finished game is reset first."""
        if self.is_game_over:
            self.reset()
        self.is_playing = True
        self.has_started = True

    def pause(self):
        self.is_playing = False

    def toggle(self):
        """Pause a running game, otherwise start it."""
        if self.is_playing:
            self.pause()
        else:
            self.start()

    def reset(self):
        """Back to a fresh idle game. The high score is kept."""
        self.snake.reset()
        self.food.respawn(self.snake.segments, self.rng)
        self.direction = Direction.RIGHT
        self.score = 0
        self.is_game_over = False
        self.is_playing = False
        self.has_started = False
