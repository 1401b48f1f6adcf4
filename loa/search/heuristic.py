from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from loa.core import Board, Piece

# Score magnitude of a won position; WHITE positive, BLACK negative.
WINNING_VALUE = 1_000_000


@dataclass
class HeuristicConfig:
    region_weight: int = 25
    tempo_bonus: int = 10
    density_weight: int = 0
    noise: int = 0


def heuristic_estimate(
    board: Board,
    config: Optional[HeuristicConfig] = None,
    *,
    rng: Optional[np.random.Generator] = None,
) -> int:
    """Static value of BOARD from WHITE's point of view.

    A side whose pieces form a single cluster while it is on move scores
    +/-WINNING_VALUE. Otherwise the side with fewer clusters is ahead, and a
    little more so when it is also the side to move. A side with no pieces
    left, which search can reach by playing past a finished game, is lost.
    """
    config = config or HeuristicConfig()
    white_regions = len(board.region_sizes(Piece.WHITE))
    black_regions = len(board.region_sizes(Piece.BLACK))
    turn = board.turn

    if white_regions == 0:
        return -WINNING_VALUE
    if black_regions == 0:
        return WINNING_VALUE
    if white_regions == 1 and turn == Piece.WHITE:
        return WINNING_VALUE
    if black_regions == 1 and turn == Piece.BLACK:
        return -WINNING_VALUE

    score = config.region_weight * (black_regions - white_regions)
    if white_regions < black_regions and turn == Piece.WHITE:
        score += config.tempo_bonus
    elif black_regions < white_regions and turn == Piece.BLACK:
        score -= config.tempo_bonus

    if config.density_weight:
        score += config.density_weight * (board.density(Piece.WHITE) - board.density(Piece.BLACK))

    if config.noise > 0:
        rng = rng or np.random.default_rng()
        score += int(rng.integers(0, config.noise + 1)) * (1 if score >= 0 else -1)
    return score
