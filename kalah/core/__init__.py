"""Rules engine for Kalah."""

from .state import (
    BLACK_STORE,
    NUM_HOLES,
    PITS_PER_SIDE,
    POSITION_SIZE,
    TURN_INDEX,
    WHITE_STORE,
    GameResult,
    InvalidMove,
    Position,
    Side,
)
from .rules import (
    OPPOSITE,
    SEEDS_PER_HOLE,
    TOTAL_SEEDS,
    final_score,
    game_result,
    hole_for_pit,
    is_terminal,
    is_white_to_play,
    legal_move_mask,
    legal_moves,
    new_game,
    play,
    score,
    seed_total,
    side_to_move,
)

__all__ = [
    "Position",
    "Side",
    "GameResult",
    "InvalidMove",
    "BLACK_STORE",
    "NUM_HOLES",
    "PITS_PER_SIDE",
    "POSITION_SIZE",
    "TURN_INDEX",
    "WHITE_STORE",
    "OPPOSITE",
    "SEEDS_PER_HOLE",
    "TOTAL_SEEDS",
    "final_score",
    "game_result",
    "hole_for_pit",
    "is_terminal",
    "is_white_to_play",
    "legal_move_mask",
    "legal_moves",
    "new_game",
    "play",
    "score",
    "seed_total",
    "side_to_move",
]
