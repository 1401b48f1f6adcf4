"""Players and match helpers for Lines of Action."""

from .match import EvaluationResult, GameRecord, evaluate_players, play_game
from .players import MachinePlayer, Player, RandomPlayer

__all__ = [
    "EvaluationResult",
    "GameRecord",
    "MachinePlayer",
    "Player",
    "RandomPlayer",
    "evaluate_players",
    "play_game",
]
