from __future__ import annotations

import re
from typing import Dict, Optional, Tuple, Union

BOARD_SIZE = 8

# N, NE, E, SE, S, SW, W, NW as (dcol, drow); N increases the row.
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
)

ROW_COL = re.compile(r"^[a-h][1-8]$")


class NotationError(ValueError):
    pass


def opposite_direction(direction: int) -> int:
    return (direction + 4) % len(DIRECTIONS)


class Square:
    """One of the 64 board cells. Instances are interned; use :func:`sq`."""

    __slots__ = ("col", "row", "index", "_adjacent")

    def __init__(self, col: int, row: int) -> None:
        self.col = col
        self.row = row
        self.index = row * BOARD_SIZE + col
        self._adjacent: Optional[Tuple["Square", ...]] = None

    @staticmethod
    def parse(notation: str) -> "Square":
        if not isinstance(notation, str) or not ROW_COL.match(notation):
            raise NotationError(f"Invalid square designator: {notation!r}")
        return _SQUARES[ord(notation[1]) - ord("1")][ord(notation[0]) - ord("a")]

    @staticmethod
    def exists(col: int, row: int) -> bool:
        return 0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE

    def direction(self, to: "Square") -> Optional[int]:
        """Return the compass index of the ray from self through TO, or None
        when the two squares share no row, column or diagonal."""
        dc = to.col - self.col
        dr = to.row - self.row
        if dc == 0 and dr == 0:
            return None
        if dc != 0 and dr != 0 and abs(dc) != abs(dr):
            return None
        step = ((dc > 0) - (dc < 0), (dr > 0) - (dr < 0))
        return DIRECTIONS.index(step)

    def distance(self, to: "Square") -> int:
        return max(abs(to.col - self.col), abs(to.row - self.row))

    def is_valid_move(self, to: "Square") -> bool:
        return self.direction(to) is not None

    def move_dest(self, direction: int, steps: int) -> Optional["Square"]:
        dc, dr = DIRECTIONS[direction]
        col = self.col + dc * steps
        row = self.row + dr * steps
        if not Square.exists(col, row):
            return None
        return _SQUARES[row][col]

    def adjacent(self) -> Tuple["Square", ...]:
        if self._adjacent is None:
            neighbours = []
            for direction in range(len(DIRECTIONS)):
                dest = self.move_dest(direction, 1)
                if dest is not None:
                    neighbours.append(dest)
            self._adjacent = tuple(neighbours)
        return self._adjacent

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Square):
            return NotImplemented
        return self.index == other.index

    def __hash__(self) -> int:
        return self.index

    def __str__(self) -> str:
        return f"{chr(ord('a') + self.col)}{self.row + 1}"

    def __repr__(self) -> str:
        return f"Square({self})"


_SQUARES: Tuple[Tuple[Square, ...], ...] = tuple(
    tuple(Square(col, row) for col in range(BOARD_SIZE)) for row in range(BOARD_SIZE)
)

ALL_SQUARES: Tuple[Square, ...] = tuple(s for row in _SQUARES for s in row)

_BY_NAME: Dict[str, Square] = {str(s): s for s in ALL_SQUARES}


def sq(col_or_name: Union[int, str], row: Optional[int] = None) -> Square:
    """Return the interned square at (COL, ROW), or the one named like "c4"."""
    if isinstance(col_or_name, str):
        if row is not None:
            raise TypeError("sq() takes a notation string or a (col, row) pair")
        found = _BY_NAME.get(col_or_name)
        if found is None:
            raise NotationError(f"Invalid square designator: {col_or_name!r}")
        return found
    if row is None or not Square.exists(col_or_name, row):
        raise ValueError(f"Square ({col_or_name}, {row}) is off the board.")
    return _SQUARES[row][col_or_name]
