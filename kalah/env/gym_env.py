from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from kalah.core import (
    PITS_PER_SIDE,
    POSITION_SIZE,
    TOTAL_SEEDS,
    GameResult,
    Position,
    game_result,
    legal_move_mask,
    new_game,
    play,
)


class KalahEnv(gym.Env):
    """Two-player Kalah with actions relative to the side to move.

    Action ``k`` plays the side's ``k``-th pit from its left, i.e. hole
    ``2k + side``. The observation is the raw 15-counter position.
    """

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(self, *, max_ply: int = 400, render_mode: Optional[str] = None) -> None:
        super().__init__()
        self._max_ply = max_ply
        self.render_mode = render_mode
        self.observation_space = spaces.Box(
            low=0, high=TOTAL_SEEDS, shape=(POSITION_SIZE,), dtype=np.int16
        )
        self.action_space = spaces.Discrete(PITS_PER_SIDE)

        self._position = new_game()
        self._ply = 0

    @property
    def position(self) -> Position:
        return self._position

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        start = options.get("position") if options else None
        self._position = start if start is not None else new_game()
        self._ply = 0
        observation = self._build_observation()
        info = self._build_info()
        return observation, info

    def step(self, action: int):
        if not self.action_space.contains(action):
            raise ValueError(f"Action {action} out of bounds.")

        hole = 2 * int(action) + int(self._position.side_to_move)
        self._position = play(self._position, hole)
        self._ply += 1

        observation = self._build_observation()
        info = self._build_info()

        result = game_result(self._position)
        reward = self._compute_reward(result)
        terminated = result != GameResult.ONGOING
        truncated = not terminated and self._ply >= self._max_ply

        return observation, reward, terminated, truncated, info

    def legal_action_mask(self) -> np.ndarray:
        return legal_move_mask(self._position)

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return str(self._position)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> np.ndarray:
        return self._position.editable_counts()

    def _build_info(self) -> Dict[str, object]:
        return {
            "legal_action_mask": self.legal_action_mask(),
            "side_to_move": self._position.side_to_move,
        }

    def _compute_reward(self, result: GameResult) -> float:
        if result == GameResult.WHITE_WIN:
            return 1.0
        if result == GameResult.BLACK_WIN:
            return -1.0
        return 0.0
