from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

import numpy as np

from kalah.agents import Policy, select_action
from kalah.core import GameResult, Side, final_score, game_result
from kalah.env import KalahEnv

logger = logging.getLogger(__name__)


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


def evaluate_policies(
    policy_white: Policy,
    policy_black: Policy,
    *,
    episodes: int,
    env_factory: Optional[Callable[[], KalahEnv]] = None,
    rng: Optional[np.random.Generator] = None,
    temperature: float = 1.0,
    progress: Optional[Callable[[Iterable[int]], Iterable[int]]] = None,
) -> EvaluationResult:
    """Play ``episodes`` games between two policies, White always opening."""
    env_factory = env_factory or KalahEnv
    rng = rng or np.random.default_rng()
    episode_iter = progress(range(episodes)) if progress else range(episodes)

    white_wins = 0
    black_wins = 0
    draws = 0
    total_ply = 0

    for episode in episode_iter:
        env = env_factory()
        obs, info = env.reset()
        terminated = False
        ply = 0

        while not terminated:
            legal_mask = info["legal_action_mask"]
            policy = policy_white if info["side_to_move"] == Side.WHITE else policy_black
            probs = policy.act(env.position, legal_mask)
            if probs.sum() <= 0:
                probs = legal_mask.astype(np.float32)
                probs /= probs.sum()
            action = select_action(probs, temperature, rng)
            obs, reward, terminated, truncated, info = env.step(action)
            ply += 1
            if truncated:
                terminated = True

        total_ply += ply
        result = game_result(env.position)
        logger.debug("episode=%d result=%s score=%s ply=%d", episode, result.value, final_score(env.position), ply)
        if result == GameResult.WHITE_WIN:
            white_wins += 1
        elif result == GameResult.BLACK_WIN:
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
