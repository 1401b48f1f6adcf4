from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from .geometry import BOARD_SIZE, DIRECTIONS, Square, opposite_direction, sq
from .state import Move, MoveRecord, Piece

# Moves per side before the game is declared a tie.
DEFAULT_MOVE_LIMIT = 60

_E, _W, _B = Piece.EMPTY, Piece.WHITE, Piece.BLACK

# Bottom row (row 1) first.
INITIAL_PIECES: Tuple[Tuple[Piece, ...], ...] = (
    (_E, _B, _B, _B, _B, _B, _B, _E),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_E, _B, _B, _B, _B, _B, _B, _E),
)

CENTER_SQUARES: Tuple[Square, ...] = tuple(sq(c, r) for r in range(2, 6) for c in range(2, 6))

BoardContents = Sequence[Sequence[Piece]]


class IllegalMoveError(ValueError):
    pass


class Board:
    """The state of a game of Lines of Action.

    ``Board()`` is the standard opening with BLACK to move,
    ``Board(contents, turn)`` takes an 8x8 grid given bottom row first
    (``get(sq(c, r)) == contents[r][c]``) and ``Board(other)`` is an
    independent copy of another board.
    """

    def __init__(
        self,
        contents: Union["Board", BoardContents, None] = None,
        turn: Piece = Piece.BLACK,
    ) -> None:
        self._cells = np.zeros(BOARD_SIZE * BOARD_SIZE, dtype=np.int8)
        self._history: List[MoveRecord] = []
        self._turn = turn
        self._move_limit = 2 * DEFAULT_MOVE_LIMIT
        self._winner_known = False
        self._winner: Optional[Piece] = None
        self._regions: Optional[Dict[Piece, List[int]]] = None
        if isinstance(contents, Board):
            self.copy_from(contents)
        else:
            self.initialize(INITIAL_PIECES if contents is None else contents, turn)

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    def initialize(self, contents: BoardContents, side: Piece) -> None:
        if len(contents) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in contents):
            raise ValueError("Board contents must be 8x8.")
        if side not in (Piece.WHITE, Piece.BLACK):
            raise ValueError("Side to move must be WHITE or BLACK.")
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                self._cells[row * BOARD_SIZE + col] = Piece(contents[row][col])
        self._history.clear()
        self._turn = side
        self._move_limit = 2 * DEFAULT_MOVE_LIMIT
        self._invalidate()

    def clear(self) -> None:
        self.initialize(INITIAL_PIECES, Piece.BLACK)

    def copy_from(self, board: "Board") -> None:
        if board is self:
            return
        self._cells = board._cells.copy()
        self._history = list(board._history)
        self._turn = board._turn
        self._move_limit = board._move_limit
        self._winner_known = board._winner_known
        self._winner = board._winner
        if board._regions is None:
            self._regions = None
        else:
            self._regions = {color: list(sizes) for color, sizes in board._regions.items()}

    def copy(self) -> "Board":
        return Board(self)

    def _invalidate(self) -> None:
        self._winner_known = False
        self._winner = None
        self._regions = None

    # ------------------------------------------------------------------
    # Basic queries and mutation
    # ------------------------------------------------------------------
    def get(self, square: Square) -> Piece:
        return Piece(int(self._cells[square.index]))

    def set(self, square: Square, piece: Piece, next_turn: Optional[Piece] = None) -> None:
        """Put PIECE on SQUARE and, if NEXT_TURN is given, make it that side's move."""
        self._cells[square.index] = piece
        if next_turn is not None:
            self._turn = next_turn
        self._invalidate()

    @property
    def turn(self) -> Piece:
        return self._turn

    @property
    def move_limit(self) -> int:
        return self._move_limit

    def set_move_limit(self, limit: int) -> None:
        """Set the per-side LIMIT after which the game is a tie."""
        if 2 * limit <= self.moves_made():
            raise ValueError("move limit too small")
        self._move_limit = 2 * limit
        self._winner_known = False
        self._winner = None

    def moves_made(self) -> int:
        return len(self._history)

    @property
    def moves(self) -> Tuple[Move, ...]:
        return tuple(record.move for record in self._history)

    def last_move(self) -> Optional[Move]:
        return self._history[-1].move if self._history else None

    def as_array(self) -> np.ndarray:
        """Return a (row, col) view copy of the cells as Piece values."""
        return self._cells.reshape(BOARD_SIZE, BOARD_SIZE).copy()

    # ------------------------------------------------------------------
    # Legality
    # ------------------------------------------------------------------
    def is_legal(self, move_or_from: Union[Move, Square], to: Optional[Square] = None) -> bool:
        """Return True iff the move is legal for the piece standing on its
        origin. The capture flag of a Move is ignored. Squares that share no
        line are never a legal move."""
        if isinstance(move_or_from, Move):
            from_sq, to_sq = move_or_from.from_sq, move_or_from.to_sq
        else:
            from_sq, to_sq = move_or_from, to
        if to_sq is None:
            raise TypeError("is_legal() needs a Move or two squares")
        if from_sq.direction(to_sq) is None:
            return False
        mover = self._cells[from_sq.index]
        if mover == Piece.EMPTY or mover == self._cells[to_sq.index]:
            return False
        if self.count_line_of_action(from_sq, to_sq) != from_sq.distance(to_sq):
            return False
        return not self.blocked(from_sq, to_sq)

    def count_line_of_action(self, from_sq: Square, to_sq: Square) -> int:
        """Number of pieces on the whole line through FROM_SQ along the axis
        towards TO_SQ, FROM_SQ included."""
        direction = from_sq.direction(to_sq)
        if direction is None:
            raise ValueError(f"{from_sq} and {to_sq} are not on a common line.")
        return self._line_count(from_sq, direction)

    def _line_count(self, from_sq: Square, direction: int) -> int:
        count = 1
        for d in (direction, opposite_direction(direction)):
            steps = 1
            square = from_sq.move_dest(d, steps)
            while square is not None:
                if self._cells[square.index] != Piece.EMPTY:
                    count += 1
                steps += 1
                square = from_sq.move_dest(d, steps)
        return count

    def blocked(self, from_sq: Square, to_sq: Square) -> bool:
        """True iff an enemy of the piece on FROM_SQ stands strictly between
        FROM_SQ and TO_SQ."""
        direction = from_sq.direction(to_sq)
        if direction is None:
            raise ValueError(f"{from_sq} and {to_sq} are not on a common line.")
        mover = self._cells[from_sq.index]
        for steps in range(1, from_sq.distance(to_sq)):
            occupant = self._cells[from_sq.move_dest(direction, steps).index]
            if occupant != Piece.EMPTY and occupant != mover:
                return True
        return False

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------
    def make_move(self, move: Move) -> None:
        if not self.is_legal(move):
            raise IllegalMoveError(f"Illegal move {move}.")
        from_idx, to_idx = move.from_sq.index, move.to_sq.index
        captured = Piece(int(self._cells[to_idx]))
        if captured != Piece.EMPTY:
            move = move.capture_move()
        elif move.capture:
            move = Move(move.from_sq, move.to_sq)
        self._cells[to_idx] = self._cells[from_idx]
        self._cells[from_idx] = Piece.EMPTY
        self._history.append(MoveRecord(move, captured))
        self._turn = self._turn.opposite()
        self._invalidate()

    def retract(self) -> None:
        """Undo the last move, putting back any piece it captured."""
        if not self._history:
            raise IllegalMoveError("No moves to retract.")
        record = self._history.pop()
        from_idx, to_idx = record.move.from_sq.index, record.move.to_sq.index
        self._cells[from_idx] = self._cells[to_idx]
        self._cells[to_idx] = record.captured
        self._turn = self._turn.opposite()
        self._invalidate()

    def legal_moves(self) -> List[Move]:
        return self.legal_moves_for(self._turn)

    def legal_moves_for(self, color: Piece) -> List[Move]:
        """All legal moves of COLOR, ordered by origin column, origin row,
        direction and distance."""
        moves: List[Move] = []
        for col in range(BOARD_SIZE):
            for row in range(BOARD_SIZE):
                from_sq = sq(col, row)
                if self._cells[from_sq.index] != color:
                    continue
                for direction in range(len(DIRECTIONS)):
                    # Only the square at the line count can be a legal target.
                    to_sq = from_sq.move_dest(direction, self._line_count(from_sq, direction))
                    if to_sq is None or not self.is_legal(from_sq, to_sq):
                        continue
                    capture = self._cells[to_sq.index] not in (Piece.EMPTY, color)
                    moves.append(Move(from_sq, to_sq, capture))
        return moves

    # ------------------------------------------------------------------
    # Connectivity
    # ------------------------------------------------------------------
    def compute_regions(self) -> None:
        if self._regions is not None:
            return
        regions: Dict[Piece, List[int]] = {Piece.WHITE: [], Piece.BLACK: []}
        visited = np.zeros(BOARD_SIZE * BOARD_SIZE, dtype=bool)
        for col in range(BOARD_SIZE):
            for row in range(BOARD_SIZE):
                start = sq(col, row)
                occupant = self._cells[start.index]
                if occupant == Piece.EMPTY or visited[start.index]:
                    continue
                regions[Piece(int(occupant))].append(self._cluster_size(start, visited))
        for sizes in regions.values():
            sizes.sort(reverse=True)
        self._regions = regions

    def _cluster_size(self, start: Square, visited: np.ndarray) -> int:
        color = self._cells[start.index]
        visited[start.index] = True
        stack = [start]
        size = 0
        while stack:
            square = stack.pop()
            size += 1
            for neighbour in square.adjacent():
                if not visited[neighbour.index] and self._cells[neighbour.index] == color:
                    visited[neighbour.index] = True
                    stack.append(neighbour)
        return size

    def region_sizes(self, color: Piece) -> List[int]:
        """Sizes of COLOR's connected clusters, largest first."""
        if color not in (Piece.WHITE, Piece.BLACK):
            raise ValueError("Region sizes are defined for WHITE and BLACK only.")
        self.compute_regions()
        return list(self._regions[color])

    def pieces_contiguous(self, color: Piece) -> bool:
        return len(self.region_sizes(color)) == 1

    # ------------------------------------------------------------------
    # Game outcome
    # ------------------------------------------------------------------
    def winner(self) -> Optional[Piece]:
        """Return the winning side, EMPTY for a tie, or None while the game
        is in progress."""
        if not self._winner_known:
            mine = self.pieces_contiguous(self._turn)
            theirs = self.pieces_contiguous(self._turn.opposite())
            if theirs:
                self._winner = self._turn.opposite()
            elif mine:
                self._winner = self._turn
            else:
                self._winner = None
            self._winner_known = self._winner is not None
        if self._winner is None and self.moves_made() >= self._move_limit:
            self._winner = Piece.EMPTY
            self._winner_known = True
        return self._winner

    def game_over(self) -> bool:
        return self.winner() is not None

    # ------------------------------------------------------------------
    # Statistics used by evaluation
    # ------------------------------------------------------------------
    def piece_count(self, color: Piece) -> int:
        return int(np.count_nonzero(self._cells == color))

    def capture_count(self, color: Piece) -> int:
        return sum(1 for move in self.legal_moves_for(color) if move.capture)

    def center_count(self, color: Piece) -> int:
        return sum(1 for square in CENTER_SQUARES if self._cells[square.index] == color)

    def density(self, color: Piece) -> int:
        sizes = self.region_sizes(color)
        return sizes[0] if sizes else 0

    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._turn == other._turn and np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash((self._cells.tobytes(), int(self._turn)))

    def __str__(self) -> str:
        lines = ["==="]
        for row in range(BOARD_SIZE - 1, -1, -1):
            cells = " ".join(Piece(int(self._cells[row * BOARD_SIZE + col])).abbrev for col in range(BOARD_SIZE))
            lines.append(f"    {cells}")
        lines.append(f"Next move: {self._turn.full_name}")
        lines.append("===")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board(turn={self._turn.name}, moves={self.moves_made()})\n{self}"


def board_from_rows(rows: Sequence[str], turn: Piece = Piece.BLACK) -> Board:
    """Build a board from eight strings of ``w``/``b``/``-`` written top row
    (row 8) first, the way :meth:`Board.__str__` prints them."""
    symbols = {"-": Piece.EMPTY, ".": Piece.EMPTY, "w": Piece.WHITE, "b": Piece.BLACK}
    if len(rows) != BOARD_SIZE:
        raise ValueError("Board contents must be 8x8.")
    contents = []
    for text in reversed(rows):
        cells = text.split() if " " in text.strip() else list(text.strip())
        try:
            contents.append([symbols[cell] for cell in cells])
        except KeyError as exc:
            raise ValueError(f"Unknown board symbol {exc.args[0]!r}.") from None
    return Board(contents, turn)
