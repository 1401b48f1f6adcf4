"""Core game logic for Lines of Action."""

from .geometry import ALL_SQUARES, BOARD_SIZE, DIRECTIONS, NotationError, Square, sq
from .state import Move, MoveRecord, Piece
from .board import (
    DEFAULT_MOVE_LIMIT,
    INITIAL_PIECES,
    Board,
    IllegalMoveError,
    board_from_rows,
)

__all__ = [
    "ALL_SQUARES",
    "BOARD_SIZE",
    "DIRECTIONS",
    "DEFAULT_MOVE_LIMIT",
    "INITIAL_PIECES",
    "Board",
    "IllegalMoveError",
    "Move",
    "MoveRecord",
    "NotationError",
    "Piece",
    "Square",
    "board_from_rows",
    "sq",
]
