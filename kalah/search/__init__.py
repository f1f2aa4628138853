"""Fixed-depth minimax search over the Kalah rules."""

from .minimax import MinimaxConfig, MinimaxSearcher, SearchStats, alphabeta, minimax

__all__ = ["MinimaxConfig", "MinimaxSearcher", "SearchStats", "alphabeta", "minimax"]
