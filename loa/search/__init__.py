"""Game-tree search for Lines of Action."""

from .alphabeta import INFTY, AlphaBetaSearch, SearchConfig, SearchResult
from .heuristic import WINNING_VALUE, HeuristicConfig, heuristic_estimate

__all__ = [
    "INFTY",
    "WINNING_VALUE",
    "AlphaBetaSearch",
    "HeuristicConfig",
    "SearchConfig",
    "SearchResult",
    "heuristic_estimate",
]
