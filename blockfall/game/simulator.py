"""
Board simulator: active piece, movement, locking, scoring, and game status.

This module ties the Board and the shape templates together into one game
session. All mutable state (grid, active piece, score, status, fast-fall
flag) lives on a single ``BoardSimulator`` instance and only changes through
its methods.
"""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from typing import Any

import numpy as np

from blockfall.config import merge_config
from blockfall.game.board import Board
from blockfall.game.pieces import SHAPES, rotate_shape


class GameStatus(enum.Enum):
    """Lifecycle of a game session."""
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Direction(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"


# Unit offsets (dx, dy) for each direction
DIRECTION_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
}


@dataclass
class Piece:
    """The active piece: a square boolean shape and its top-left origin."""
    shape: np.ndarray
    x: int
    y: int
    kind: int = 0


class BoardSimulator:
    """One game session of the falling-block puzzle.

    Attributes:
        board: The game board.
        piece: The active piece, or None between lock and spawn, before the
            first start, and after game over.
        score: Current score.
        status: Current GameStatus.
        fast_fall: Whether the fast-descent modifier is held.
    """

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        seed: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize a session in the NOT_STARTED state.

        Args:
            config: Settings dict (see ``blockfall.config``). Defaults apply
                for missing keys.
            seed: Seed for the piece randomizer. Ignored if ``rng`` is given.
            rng: Random generator to draw pieces from.

        Raises:
            ValueError: If ``config`` holds unknown keys or invalid values.
        """
        self.config = merge_config(config)

        self.board = Board(self.config["rows"], self.config["cols"])
        self.piece: Piece | None = None
        self.score: int = 0
        self.status = GameStatus.NOT_STARTED
        self.fast_fall: bool = False
        self._rng = rng if rng is not None else random.Random(seed)

    # ── Read access for the renderer and score display ──────────────────

    @property
    def grid(self) -> np.ndarray:
        """Copy of the board grid."""
        return self.board.get_grid()

    @property
    def score_text(self) -> str:
        return f"Score: {self.score}"

    @property
    def is_running(self) -> bool:
        return self.status is GameStatus.RUNNING

    @property
    def fall_interval_ms(self) -> int:
        """Tick interval in milliseconds for the current fast-fall state."""
        if self.fast_fall:
            return self.config["fast_fall_speed_ms"]
        return self.config["fall_speed_ms"]

    # ── Lifecycle ───────────────────────────────────────────────────────

    def start(self) -> Piece:
        """Begin a new game: empty board, zero score, fresh piece.

        Returns:
            The first active piece.
        """
        self.status = GameStatus.RUNNING
        self.score = 0
        self.fast_fall = False
        self.reset_board()
        return self.spawn_piece()

    def pause(self) -> None:
        """Freeze a running game. No effect in any other status."""
        if self.status is GameStatus.RUNNING:
            self.status = GameStatus.PAUSED
            self.fast_fall = False

    def toggle(self) -> GameStatus:
        """Start/pause button: pause when running, otherwise start a new game.

        Returns:
            The status after the toggle.
        """
        if self.status is GameStatus.RUNNING:
            self.pause()
        else:
            self.start()
        return self.status

    def set_fast_fall(self, enabled: bool) -> None:
        self.fast_fall = bool(enabled)

    # ── Board operations ────────────────────────────────────────────────

    def reset_board(self) -> None:
        """Clear the grid to all empty."""
        self.board.reset()

    def spawn_piece(self) -> Piece:
        """Pick a shape uniformly at random and make it the active piece.

        The piece is placed at the spawn offset without a collision check;
        an overlapping spawn locks on its next downward step.

        Returns:
            The new active piece.
        """
        kind = self._rng.randrange(len(SHAPES))
        self.piece = Piece(
            shape=SHAPES[kind],
            x=self.config["spawn_x"],
            y=self.config["spawn_y"],
            kind=kind,
        )
        return self.piece

    def can_place(self, shape: np.ndarray, x: int, y: int) -> bool:
        """Pure predicate: does ``shape`` fit with its origin at (x, y)?"""
        return self.board.can_place(shape, x, y)

    def move(self, direction: Direction | str) -> bool:
        """Move the active piece one cell.

        A blocked left/right move is dropped. A blocked down move locks the
        piece, clears lines, and spawns the next piece unless the game is over.

        Args:
            direction: A Direction or its string value ('left', 'right', 'down').

        Returns:
            True if the piece moved, False otherwise (including a lock).

        Raises:
            ValueError: If ``direction`` is not a known direction.
        """
        direction = Direction(direction)
        if self.piece is None or not self.is_running:
            return False

        dx, dy = DIRECTION_OFFSETS[direction]
        new_x = self.piece.x + dx
        new_y = self.piece.y + dy
        if self.can_place(self.piece.shape, new_x, new_y):
            self.piece.x = new_x
            self.piece.y = new_y
            return True

        if direction is Direction.DOWN:
            self._lock_piece()
            self.clear_lines()
            if self.status is not GameStatus.GAME_OVER:
                self.spawn_piece()
        return False

    def rotate(self) -> bool:
        """Rotate the active piece 90 degrees clockwise in place.

        There are no wall kicks: if the rotated shape does not fit at the
        current origin the request is ignored.

        Returns:
            True if the rotation was applied.
        """
        if self.piece is None or not self.is_running:
            return False

        rotated = rotate_shape(self.piece.shape)
        if self.can_place(rotated, self.piece.x, self.piece.y):
            self.piece.shape = rotated
            return True
        return False

    def clear_lines(self) -> int:
        """Remove full rows and add ``line_clear_points`` per row to the score.

        Returns:
            Number of rows cleared.
        """
        cleared = self.board.clear_lines()
        self.score += cleared * self.config["line_clear_points"]
        return cleared

    def check_game_over(self) -> bool:
        """End the game if anything occupies the top row.

        Only meaningful right after placement processing; the tick calls it
        after every downward step.

        Returns:
            True if the game is (now) over.
        """
        if self.status is GameStatus.GAME_OVER:
            return True
        if self.board.top_row_occupied():
            self.status = GameStatus.GAME_OVER
            self.piece = None
            self.fast_fall = False
            return True
        return False

    def tick(self) -> None:
        """One timer tick: step down, then check for game over."""
        if not self.is_running:
            return
        self.move(Direction.DOWN)
        self.check_game_over()

    def _lock_piece(self) -> None:
        """Copy the active piece into the grid and drop it."""
        if self.piece is None:
            return
        self.board.lock(self.piece.shape, self.piece.x, self.piece.y)
        self.piece = None
