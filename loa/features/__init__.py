"""Feature extraction helpers for Lines of Action."""

from .observation import (
    ACTION_VECTOR_SIZE,
    BOARD_CHANNELS,
    build_board_tensor,
    decode_move,
    encode_move,
    legal_move_mask,
)

__all__ = [
    "ACTION_VECTOR_SIZE",
    "BOARD_CHANNELS",
    "build_board_tensor",
    "decode_move",
    "encode_move",
    "legal_move_mask",
]
