"""Game logic: board, pieces, simulator, and input commands."""

from blockfall.game.pieces import SHAPES, rotate_shape, shape_cells
from blockfall.game.board import Board, ROWS, COLS
from blockfall.game.simulator import BoardSimulator, Direction, GameStatus, Piece
from blockfall.game.commands import Command, CommandLog, dispatch, replay

__all__ = [
    "SHAPES",
    "shape_cells",
    "rotate_shape",
    "Board",
    "ROWS",
    "COLS",
    "BoardSimulator",
    "Direction",
    "GameStatus",
    "Piece",
    "Command",
    "CommandLog",
    "dispatch",
    "replay",
]
