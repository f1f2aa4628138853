from __future__ import annotations

from typing import List, Tuple

import numpy as np

from .state import (
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

SEEDS_PER_HOLE = 4
TOTAL_SEEDS = SEEDS_PER_HOLE * NUM_HOLES
ROW_MAJORITY_BONUS = 2

# Hole facing each hole across the board: 0<->11, 2<->9, 4<->7, 6<->5, 8<->3, 10<->1.
OPPOSITE: Tuple[int, ...] = (11, 10, 9, 8, 7, 6, 5, 4, 3, 2, 1, 0)


def new_game() -> Position:
    counts = np.zeros(POSITION_SIZE, dtype=np.int16)
    counts[:NUM_HOLES] = SEEDS_PER_HOLE
    return Position(counts)


def is_white_to_play(position: Position) -> bool:
    return position.turn_flag % 2 == 0


def side_to_move(position: Position) -> Side:
    return position.side_to_move


def legal_moves(position: Position) -> List[int]:
    side = position.side_to_move
    return [hole for hole in side.holes if position.counts[hole] != 0]


def legal_move_mask(position: Position) -> np.ndarray:
    """One int8 flag per pit of the side to move, pit ``k`` being hole ``2k + side``."""
    side = position.side_to_move
    return (position.row(side) != 0).astype(np.int8)


def is_terminal(position: Position) -> bool:
    return not legal_moves(position)


def hole_for_pit(side: Side, pit: int) -> int:
    """Map a 1-6 pit number, counted from the player's left, to a hole index."""
    if not 1 <= pit <= PITS_PER_SIDE:
        raise InvalidMove(f"Pit must be between 1 and {PITS_PER_SIDE}, got {pit}.")
    return (pit - 1) * 2 + int(side)


def play(position: Position, hole: int) -> Position:
    if not 0 <= hole < NUM_HOLES:
        raise InvalidMove(f"Hole {hole} is not a playable hole.")
    if position.counts[hole] == 0:
        raise InvalidMove(f"Hole {hole} is empty.")
    if (hole % 2 == 0) != is_white_to_play(position):
        raise InvalidMove(f"Hole {hole} does not belong to the side to move.")

    counts = position.editable_counts()
    side = hole % 2
    store = WHITE_STORE + side
    remaining = int(counts[hole])
    counts[hole] = 0

    cursor = hole
    while remaining > 0:
        cursor += 2
        if cursor > store:
            # Past our own store: continue on the opponent's first hole.
            cursor = (cursor + 1) % 2
        if cursor < NUM_HOLES or cursor == store:
            counts[cursor] += 1
            remaining -= 1

    if cursor == store:
        counts[TURN_INDEX] = side
    else:
        counts[TURN_INDEX] = 1 - side

    if cursor != store and cursor % 2 == side and counts[cursor] == 1:
        opposite = OPPOSITE[cursor]
        counts[store] += 1 + counts[opposite]
        counts[cursor] = 0
        counts[opposite] = 0

    return Position(counts)


def score(position: Position) -> int:
    """Store of the side to move, plus a bonus when its row outweighs the opponent's."""
    side = position.side_to_move
    own_row = position.row_total(side)
    other_row = position.row_total(side.opponent)
    bonus = ROW_MAJORITY_BONUS if own_row > other_row else 0
    return position.store(side) + bonus


def final_score(position: Position) -> Tuple[int, int]:
    white = position.row_total(Side.WHITE) + position.store(Side.WHITE)
    black = position.row_total(Side.BLACK) + position.store(Side.BLACK)
    return white, black


def game_result(position: Position) -> GameResult:
    if not is_terminal(position):
        return GameResult.ONGOING
    white, black = final_score(position)
    if white > black:
        return GameResult.WHITE_WIN
    if black > white:
        return GameResult.BLACK_WIN
    return GameResult.DRAW


def seed_total(position: Position) -> int:
    return int(position.counts[:TURN_INDEX].sum())
