from __future__ import annotations

import numpy as np

from loa.core import ALL_SQUARES, BOARD_SIZE, Board, Move, Piece

BOARD_CHANNELS = 3  # white, black, side to move
ACTION_VECTOR_SIZE = len(ALL_SQUARES) * len(ALL_SQUARES)


def encode_move(move: Move) -> int:
    return move.from_sq.index * len(ALL_SQUARES) + move.to_sq.index


def decode_move(index: int) -> Move:
    if not 0 <= index < ACTION_VECTOR_SIZE:
        raise ValueError("Action index out of range.")
    from_index, to_index = divmod(index, len(ALL_SQUARES))
    return Move(ALL_SQUARES[from_index], ALL_SQUARES[to_index])


def build_board_tensor(board: Board) -> np.ndarray:
    """Return board tensor with shape (3, 8, 8) channel-first, indexed [channel, row, col]."""
    cells = board.as_array()
    tensor = np.zeros((BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE), dtype=np.float32)
    tensor[0] = cells == Piece.WHITE
    tensor[1] = cells == Piece.BLACK
    if board.turn == Piece.WHITE:
        tensor[2] = 1.0
    return tensor


def legal_move_mask(board: Board) -> np.ndarray:
    mask = np.zeros(ACTION_VECTOR_SIZE, dtype=np.int8)
    for move in board.legal_moves():
        mask[encode_move(move)] = 1
    return mask
