"""Kalah rules engine and minimax player."""

from . import agents, core, env, evaluation, search
from .agents import GreedyPolicy, MinimaxPolicy, Policy, RandomPolicy, select_action
from .core import (
    GameResult,
    InvalidMove,
    Position,
    Side,
    final_score,
    is_white_to_play,
    legal_moves,
    new_game,
    play,
    score,
)
from .env import KalahEnv
from .evaluation import EvaluationResult, evaluate_policies
from .search import MinimaxConfig, MinimaxSearcher, alphabeta, minimax

__all__ = [
    "agents",
    "core",
    "env",
    "evaluation",
    "search",
    "KalahEnv",
    "GameResult",
    "InvalidMove",
    "Position",
    "Side",
    "final_score",
    "is_white_to_play",
    "legal_moves",
    "new_game",
    "play",
    "score",
    "MinimaxConfig",
    "MinimaxSearcher",
    "alphabeta",
    "minimax",
    "Policy",
    "RandomPolicy",
    "GreedyPolicy",
    "MinimaxPolicy",
    "select_action",
    "EvaluationResult",
    "evaluate_policies",
]
