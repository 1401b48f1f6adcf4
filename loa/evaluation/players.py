from __future__ import annotations

from typing import Optional

import numpy as np

from loa.core import Board, Move
from loa.search import AlphaBetaSearch, SearchConfig


class Player:
    """Player interface: pick one legal move for the side on move."""

    def act(self, board: Board) -> Move:
        raise NotImplementedError

    def spawn(self, seed: Optional[int] = None) -> "Player":
        """Return an independent copy of this player."""
        return self


class RandomPlayer(Player):
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def act(self, board: Board) -> Move:
        moves = board.legal_moves()
        if not moves:
            raise ValueError("No legal moves available.")
        return moves[int(self.rng.integers(len(moves)))]

    def spawn(self, seed: Optional[int] = None) -> "RandomPlayer":
        return RandomPlayer(np.random.default_rng(seed))


class MachinePlayer(Player):
    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        *,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or SearchConfig()
        self.search = AlphaBetaSearch(self.config, rng=rng)

    def act(self, board: Board) -> Move:
        return self.search.choose_move(board)

    def spawn(self, seed: Optional[int] = None) -> "MachinePlayer":
        return MachinePlayer(self.config, rng=np.random.default_rng(seed))
