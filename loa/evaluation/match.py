from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from loa.core import Board, Move, Piece

from .players import Player

logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    moves: List[Move]
    winner: Optional[Piece]

    @property
    def length(self) -> int:
        return len(self.moves)


@dataclass
class EvaluationResult:
    games_played: int
    white_wins: int
    black_wins: int
    draws: int
    average_length: float

    def winrate_white(self) -> float:
        return self.white_wins / max(1, self.games_played)

    def winrate_black(self) -> float:
        return self.black_wins / max(1, self.games_played)


def play_game(
    white: Player,
    black: Player,
    *,
    board: Optional[Board] = None,
    max_moves: Optional[int] = None,
) -> GameRecord:
    """Play one game from BOARD (the standard opening by default).

    Stops when the game is over, when the side on move has no legal move, or
    after MAX_MOVES plies; the latter two leave the winner as None.
    """
    board = Board() if board is None else board.copy()
    moves: List[Move] = []

    while not board.game_over():
        if max_moves is not None and len(moves) >= max_moves:
            break
        if not board.legal_moves():
            break
        player = white if board.turn == Piece.WHITE else black
        move = player.act(board.copy())
        board.make_move(move)
        moves.append(board.last_move())

    winner = board.winner()
    logger.debug("game finished after %d moves, winner=%s", len(moves), winner)
    return GameRecord(moves=moves, winner=winner)


def evaluate_players(
    white: Player,
    black: Player,
    *,
    episodes: int,
    max_moves: Optional[int] = None,
) -> EvaluationResult:
    white_wins = 0
    black_wins = 0
    draws = 0
    total_ply = 0

    for _ in range(episodes):
        record = play_game(white, black, max_moves=max_moves)
        total_ply += record.length
        if record.winner == Piece.WHITE:
            white_wins += 1
        elif record.winner == Piece.BLACK:
            black_wins += 1
        else:
            draws += 1

    average_length = total_ply / max(1, episodes)
    return EvaluationResult(
        games_played=episodes,
        white_wins=white_wins,
        black_wins=black_wins,
        draws=draws,
        average_length=average_length,
    )
