from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from loa.core import BOARD_SIZE, Board, Piece
from loa.features import (
    ACTION_VECTOR_SIZE,
    BOARD_CHANNELS,
    build_board_tensor,
    decode_move,
    legal_move_mask,
)


class LinesOfActionEnv(gym.Env):
    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        move_limit: Optional[int] = None,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._move_limit = move_limit
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        board_shape = (BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE)
        self.observation_space = spaces.Box(low=0.0, high=1.0, shape=board_shape, dtype=np.float32)
        self.action_space = spaces.Discrete(ACTION_VECTOR_SIZE)

        self._board = self._new_board(move_limit)

    @property
    def board(self) -> Board:
        return self._board

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        move_limit = options.get("move_limit", self._move_limit) if options else self._move_limit
        self._board = self._new_board(move_limit)
        return build_board_tensor(self._board), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")
        if self._board.game_over():
            raise ValueError("Game is over; call reset() first.")

        if self._enforce_legal and not self.legal_action_mask()[action_index]:
            raise ValueError("Illegal action provided and enforce_legal_actions=True.")

        self._board.make_move(decode_move(int(action_index)))

        winner = self._board.winner()
        reward = self._compute_reward(winner)
        terminated = winner is not None
        truncated = False
        return build_board_tensor(self._board), reward, terminated, truncated, self._build_info()

    def legal_action_mask(self) -> np.ndarray:
        return legal_move_mask(self._board)

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return str(self._board)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _new_board(move_limit: Optional[int]) -> Board:
        board = Board()
        if move_limit is not None:
            board.set_move_limit(move_limit)
        return board

    def _build_info(self) -> Dict[str, np.ndarray]:
        return {"legal_action_mask": self.legal_action_mask()}

    @staticmethod
    def _compute_reward(winner: Optional[Piece]) -> float:
        if winner == Piece.WHITE:
            return 1.0
        if winner == Piece.BLACK:
            return -1.0
        return 0.0
