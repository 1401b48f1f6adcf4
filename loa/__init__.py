"""Lines of Action rules engine and search player."""

from . import core, env, evaluation, features, search
from .core import Board, IllegalMoveError, Move, NotationError, Piece, Square, sq
from .env import LinesOfActionEnv
from .evaluation import (
    EvaluationResult,
    GameRecord,
    MachinePlayer,
    Player,
    RandomPlayer,
    evaluate_players,
    play_game,
)
from .search import AlphaBetaSearch, HeuristicConfig, SearchConfig, SearchResult

__all__ = [
    "core",
    "env",
    "evaluation",
    "features",
    "search",
    "Board",
    "IllegalMoveError",
    "Move",
    "NotationError",
    "Piece",
    "Square",
    "sq",
    "LinesOfActionEnv",
    "EvaluationResult",
    "GameRecord",
    "MachinePlayer",
    "Player",
    "RandomPlayer",
    "evaluate_players",
    "play_game",
    "AlphaBetaSearch",
    "HeuristicConfig",
    "SearchConfig",
    "SearchResult",
]
