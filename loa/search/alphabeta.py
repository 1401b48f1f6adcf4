from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from loa.core import Board, Move, Piece

from .heuristic import HeuristicConfig, heuristic_estimate

logger = logging.getLogger(__name__)

# Larger than any value heuristic_estimate can return.
INFTY = math.inf


@dataclass
class SearchConfig:
    depth: int = 2
    prune: bool = True
    heuristic: HeuristicConfig = field(default_factory=HeuristicConfig)


@dataclass
class SearchResult:
    move: Move
    value: float
    nodes: int


class AlphaBetaSearch:
    """Fixed-depth minimax with alpha-beta pruning.

    The search walks a private copy of the caller's board with
    make_move/retract, so memory stays at one board plus the recursion.
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        *,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or SearchConfig()
        self.rng = rng or np.random.default_rng()
        self._found_move: Optional[Move] = None
        self._nodes = 0

    # ------------------------------------------------------------------
    def choose_move(self, board: Board) -> Move:
        return self.search(board).move

    def search(self, board: Board) -> SearchResult:
        if self.config.depth < 1:
            raise ValueError("Search depth must be at least 1.")
        work = board.copy()
        if not work.legal_moves():
            raise ValueError("No legal moves to search from this position.")

        sense = 1 if work.turn == Piece.WHITE else -1
        self._found_move = None
        self._nodes = 0
        value = self.find_move(work, self.config.depth, True, sense, -INFTY, INFTY)
        if self._found_move is None:
            raise RuntimeError("Search finished without recording a move.")

        logger.debug(
            "depth %d search for %s chose %s (value=%s, nodes=%d)",
            self.config.depth,
            board.turn.full_name,
            self._found_move,
            value,
            self._nodes,
        )
        return SearchResult(move=self._found_move, value=value, nodes=self._nodes)

    def find_move(
        self,
        board: Board,
        depth: int,
        save_move: bool,
        sense: int,
        alpha: float,
        beta: float,
    ) -> float:
        """Return the minimax value of BOARD searched DEPTH plies deep.

        SENSE is 1 when the side to move maximizes, -1 when it minimizes.
        With SAVE_MOVE, the last move whose score equals the running best is
        kept as the answer. Scanning stops once ALPHA >= BETA.

        Heuristic values are integers, so with SAVE_MOVE each child is
        searched with its bound widened by one. A child cut off that way
        returns a value strictly worse than the running best and can never
        be recorded as a tying move.
        """
        self._nodes += 1
        if depth == 0:
            return self.estimate(board)

        moves = board.legal_moves()
        if not moves:
            return self.estimate(board)

        best = -INFTY if sense == 1 else INFTY
        for move in moves:
            child_alpha, child_beta = alpha, beta
            if save_move:
                if sense == 1:
                    child_alpha = alpha - 1
                else:
                    child_beta = beta + 1
            board.make_move(move)
            score = self.find_move(board, depth - 1, False, -sense, child_alpha, child_beta)
            board.retract()

            if sense == 1:
                best = max(best, score)
                alpha = max(alpha, score)
            else:
                best = min(best, score)
                beta = min(beta, score)

            if save_move and score == best:
                self._found_move = move

            if self.config.prune and alpha >= beta:
                break
        return best

    def estimate(self, board: Board) -> int:
        return heuristic_estimate(board, self.config.heuristic, rng=self.rng)
