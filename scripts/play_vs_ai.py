#!/usr/bin/env python3
"""Play Lines of Action against the alpha-beta machine player in the console."""

import argparse
import logging
import sys
from typing import Callable, Optional

from loa import Board, MachinePlayer, Move, NotationError, Piece, SearchConfig


def parse_side(text: str) -> Piece:
    return Piece.WHITE if text.lower().startswith("w") else Piece.BLACK


def prompt_human_move(board: Board, read: Callable[[str], str] = input) -> Optional[Move]:
    """Ask for a move like "c1c3" until a legal one is given. Returns None on quit."""
    while True:
        raw = read(f"{board.turn.full_name} to move (e.g. c1c3, 'moves', q): ").strip().lower()
        if raw in {"q", "quit", "exit"}:
            return None
        if raw == "moves":
            print(" ".join(str(move) for move in board.legal_moves()))
            continue
        try:
            move = Move.parse(raw)
        except NotationError as exc:
            print(exc)
            continue
        if not board.is_legal(move) or board.get(move.from_sq) != board.turn:
            print(f"{raw} is not a legal move.")
            continue
        return move


def announce_result(board: Board) -> None:
    winner = board.winner()
    if winner == Piece.EMPTY:
        print("Tie game.")
    elif winner is not None:
        print(f"{winner.full_name} wins.")


def play_interactive(args: argparse.Namespace, read: Callable[[str], str] = input) -> Board:
    board = Board()
    if args.move_limit is not None:
        board.set_move_limit(args.move_limit)
    human = parse_side(args.human_side) if args.human_side != "none" else None
    machine = MachinePlayer(SearchConfig(depth=args.depth))

    while not board.game_over():
        print(board)
        if not board.legal_moves():
            print(f"{board.turn.full_name} has no legal moves.")
            break
        if board.turn == human:
            move = prompt_human_move(board, read)
            if move is None:
                print("Game abandoned.")
                return board
        else:
            move = machine.act(board)
            print(f"* {move}")
        board.make_move(move)

    print(board)
    announce_result(board)
    return board


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Lines of Action in the console against the machine.")
    parser.add_argument("--human-side", choices=["black", "white", "none"], default="black")
    parser.add_argument("--depth", type=int, default=2, help="Search depth of the machine player")
    parser.add_argument("--move-limit", type=int, default=None, help="Moves per side before a tie")
    parser.add_argument("--verbose", action="store_true", help="Log search details")
    return parser


def main(argv: Optional[list] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    try:
        play_interactive(args)
    except (KeyboardInterrupt, EOFError):
        print()
        sys.exit(1)


if __name__ == "__main__":
    main()
