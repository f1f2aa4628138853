from __future__ import annotations

from copy import deepcopy
from typing import Optional

import numpy as np

from kalah.core import PITS_PER_SIDE, Position, play
from kalah.search import MinimaxConfig, MinimaxSearcher

EXTRA_TURN_WEIGHT = 1.0


class Policy:
    """Policy interface producing probabilities over the six pits of the side to move."""

    def act(self, position: Position, legal_mask: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def spawn(self, seed: Optional[int] = None) -> "Policy":
        """Return an independent copy of this policy."""
        return self


class RandomPolicy(Policy):
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def act(self, position: Position, legal_mask: np.ndarray) -> np.ndarray:
        logits = legal_mask.astype(np.float64)
        if logits.sum() == 0:
            return logits.astype(np.float32)
        probs = logits / logits.sum()
        return probs.astype(np.float32, copy=True)

    def spawn(self, seed: Optional[int] = None) -> "RandomPolicy":
        return RandomPolicy(np.random.default_rng(seed))


class GreedyPolicy(Policy):
    """Prefers pits that fill the mover's store right away, extra turns counting a little more."""

    def act(self, position: Position, legal_mask: np.ndarray) -> np.ndarray:
        indices = np.flatnonzero(legal_mask)
        if len(indices) == 0:
            return legal_mask.astype(np.float32)

        side = position.side_to_move
        before = position.store(side)
        scores = []
        for pit in indices:
            child = play(position, 2 * int(pit) + int(side))
            gain = float(child.store(side) - before)
            if child.side_to_move == side:
                gain += EXTRA_TURN_WEIGHT
            scores.append(gain)

        scores = np.array(scores)
        scores -= scores.max()
        probs = np.exp(scores)
        probs /= probs.sum()

        result = np.zeros(PITS_PER_SIDE, dtype=np.float32)
        result[indices] = probs
        return result


class MinimaxPolicy(Policy):
    """Deterministic policy putting all mass on the minimax choice."""

    def __init__(self, config: Optional[MinimaxConfig] = None) -> None:
        self._config = deepcopy(config) if config else MinimaxConfig()
        self.searcher = MinimaxSearcher(self._config)

    def act(self, position: Position, legal_mask: np.ndarray) -> np.ndarray:
        result = np.zeros(PITS_PER_SIDE, dtype=np.float32)
        hole = self.searcher.best_move(position)
        if hole is None:
            return result
        result[hole // 2] = 1.0
        return result * legal_mask

    def spawn(self, seed: Optional[int] = None) -> "MinimaxPolicy":
        return MinimaxPolicy(self._config)


def select_action(
    probabilities: np.ndarray,
    temperature: float,
    rng: np.random.Generator,
) -> int:
    if probabilities.sum() == 0:
        raise ValueError(
            "Policy produced zero probability over legal actions."
        )
    probs = probabilities.astype(np.float64, copy=True)
    if temperature <= 1e-6:
        return int(np.argmax(probs))
    adjusted = probs ** (1.0 / temperature)
    adjusted /= adjusted.sum()
    return int(rng.choice(len(adjusted), p=adjusted))
