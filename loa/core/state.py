from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .geometry import NotationError, Square


class Piece(IntEnum):
    EMPTY = 0
    WHITE = 1
    BLACK = 2

    def opposite(self) -> "Piece":
        if self == Piece.WHITE:
            return Piece.BLACK
        if self == Piece.BLACK:
            return Piece.WHITE
        raise ValueError("EMPTY has no opposite.")

    @property
    def abbrev(self) -> str:
        return _ABBREVS[self]

    @property
    def full_name(self) -> str:
        return self.name.capitalize()


_ABBREVS = {Piece.EMPTY: "-", Piece.WHITE: "w", Piece.BLACK: "b"}


@dataclass(frozen=True)
class Move:
    """A move FROM_SQ -> TO_SQ. CAPTURE is derived from the position, so it
    takes no part in equality."""

    from_sq: Square
    to_sq: Square
    capture: bool = field(default=False, compare=False)

    @staticmethod
    def parse(notation: str) -> "Move":
        if not isinstance(notation, str) or len(notation) != 4:
            raise NotationError(f"Invalid move designator: {notation!r}")
        return Move(Square.parse(notation[:2]), Square.parse(notation[2:]))

    def capture_move(self) -> "Move":
        return Move(self.from_sq, self.to_sq, capture=True)

    def __str__(self) -> str:
        return f"{self.from_sq}{self.to_sq}"


@dataclass(frozen=True)
class MoveRecord:
    move: Move
    captured: Piece = Piece.EMPTY
