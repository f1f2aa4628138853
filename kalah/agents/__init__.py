"""Move-selection policies."""

from .policies import GreedyPolicy, MinimaxPolicy, Policy, RandomPolicy, select_action

__all__ = ["Policy", "RandomPolicy", "GreedyPolicy", "MinimaxPolicy", "select_action"]
