#!/usr/bin/env python3
"""Play the alpha-beta machine against a baseline player and report results."""

import argparse
import json
from typing import Optional

import numpy as np

from loa.evaluation import MachinePlayer, Player, RandomPlayer, evaluate_players
from loa.search import HeuristicConfig, SearchConfig


def make_player(kind: str, depth: int, noise: int, seed: Optional[int]) -> Player:
    rng = np.random.default_rng(seed)
    if kind == "random":
        return RandomPlayer(rng)
    return MachinePlayer(SearchConfig(depth=depth, heuristic=HeuristicConfig(noise=noise)), rng=rng)


def main(argv: Optional[list] = None) -> dict:
    parser = argparse.ArgumentParser()
    parser.add_argument("--white", choices=["machine", "random"], default="machine")
    parser.add_argument("--black", choices=["machine", "random"], default="random")
    parser.add_argument("--episodes", type=int, default=10)
    parser.add_argument("--depth", type=int, default=2)
    parser.add_argument("--noise", type=int, default=0, help="Heuristic jitter for machine players")
    parser.add_argument("--max-moves", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    white = make_player(args.white, args.depth, args.noise, args.seed)
    black = make_player(args.black, args.depth, args.noise, None if args.seed is None else args.seed + 1)
    result = evaluate_players(white, black, episodes=args.episodes, max_moves=args.max_moves)

    output = {
        "games": result.games_played,
        "white_wins": result.white_wins,
        "black_wins": result.black_wins,
        "draws": result.draws,
        "average_length": result.average_length,
        "white_winrate": result.winrate_white(),
        "black_winrate": result.winrate_black(),
    }
    print(json.dumps(output, indent=2))
    return output


if __name__ == "__main__":
    main()
