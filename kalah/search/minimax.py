from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from kalah.core import Position, is_white_to_play, legal_moves, play, score

logger = logging.getLogger(__name__)

SearchOutcome = Tuple[Optional[int], int]


@dataclass
class SearchStats:
    nodes: int = 0


def minimax(position: Position, depth: int, maximizing_white: bool) -> SearchOutcome:
    """Plain fixed-depth minimax.

    Leaves are scored from the point of view of whoever is to move there, not
    of ``maximizing_white``. Ties keep the first move reaching the best value.
    Returns ``(None, score)`` at a leaf.
    """
    return _minimax(position, depth, maximizing_white, SearchStats())


def alphabeta(position: Position, depth: int, maximizing_white: bool) -> SearchOutcome:
    """Minimax with alpha-beta cut-offs; same hole and value as :func:`minimax`."""
    return _alphabeta(position, depth, maximizing_white, -math.inf, math.inf, SearchStats())


def _minimax(position: Position, depth: int, maximizing_white: bool, stats: SearchStats) -> SearchOutcome:
    stats.nodes += 1
    moves = legal_moves(position)
    if depth == 0 or not moves:
        return None, score(position)

    is_max = is_white_to_play(position) == maximizing_white
    best_hole: Optional[int] = None
    best_value: Optional[int] = None
    for hole in moves:
        _, value = _minimax(play(position, hole), depth - 1, maximizing_white, stats)
        if best_value is None or (value > best_value if is_max else value < best_value):
            best_hole, best_value = hole, value
    return best_hole, best_value


def _alphabeta(
    position: Position,
    depth: int,
    maximizing_white: bool,
    alpha: float,
    beta: float,
    stats: SearchStats,
) -> SearchOutcome:
    # A cut-off child never reports a value beating the current best, so the
    # root hole matches plain minimax. Holes below the root are not meaningful.
    stats.nodes += 1
    moves = legal_moves(position)
    if depth == 0 or not moves:
        return None, score(position)

    is_max = is_white_to_play(position) == maximizing_white
    best_hole: Optional[int] = None
    best_value: Optional[int] = None
    for hole in moves:
        _, value = _alphabeta(play(position, hole), depth - 1, maximizing_white, alpha, beta, stats)
        if is_max:
            if best_value is None or value > best_value:
                best_hole, best_value = hole, value
            alpha = max(alpha, best_value)
        else:
            if best_value is None or value < best_value:
                best_hole, best_value = hole, value
            beta = min(beta, best_value)
        if alpha >= beta:
            break
    return best_hole, best_value


@dataclass
class MinimaxConfig:
    depth: int = 6
    alpha_beta: bool = True

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError("Search depth must be non-negative.")


class MinimaxSearcher:
    """Searches on behalf of the side to move and records how many nodes it visited."""

    def __init__(self, config: Optional[MinimaxConfig] = None) -> None:
        self.config = config or MinimaxConfig()
        self.stats = SearchStats()

    @property
    def nodes(self) -> int:
        return self.stats.nodes

    def search(self, position: Position) -> SearchOutcome:
        self.stats = SearchStats()
        maximizing_white = is_white_to_play(position)
        if self.config.alpha_beta:
            hole, value = _alphabeta(
                position, self.config.depth, maximizing_white, -math.inf, math.inf, self.stats
            )
        else:
            hole, value = _minimax(position, self.config.depth, maximizing_white, self.stats)
        logger.debug(
            "depth=%d alpha_beta=%s hole=%s value=%d nodes=%d",
            self.config.depth,
            self.config.alpha_beta,
            hole,
            value,
            self.stats.nodes,
        )
        return hole, value

    def best_move(self, position: Position) -> Optional[int]:
        hole, _ = self.search(position)
        return hole
