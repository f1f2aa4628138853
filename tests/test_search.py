import numpy as np
import pytest

from kalah.core import Position, is_white_to_play, legal_moves, new_game, play, score
from kalah.search import MinimaxConfig, MinimaxSearcher, alphabeta, minimax


def random_positions(rng: np.random.Generator, count: int, max_plies: int = 30):
    positions = []
    for _ in range(count):
        position = new_game()
        for _ in range(int(rng.integers(0, max_plies))):
            moves = legal_moves(position)
            if not moves:
                break
            position = play(position, int(rng.choice(moves)))
        positions.append(position)
    return positions


def test_depth_zero_returns_leaf_score() -> None:
    rng = np.random.default_rng(0)
    for position in [new_game()] + random_positions(rng, 10):
        for maximizing_white in (True, False):
            assert minimax(position, 0, maximizing_white) == (None, score(position))
            assert alphabeta(position, 0, maximizing_white) == (None, score(position))


def test_terminal_position_returns_leaf_score() -> None:
    position = Position.from_counts([0] * 12 + [20, 28, 1])
    assert minimax(position, 4, False) == (None, score(position))


def test_depth_one_scores_children_for_side_to_move_there() -> None:
    # Holes 6, 8 and 10 all hand Black the move with a larger row, worth 2 to Black.
    assert minimax(new_game(), 1, True) == (6, 2)
    # As a minimizing node White keeps the first zero-valued reply.
    assert minimax(new_game(), 1, False) == (0, 0)


def test_search_does_not_touch_position() -> None:
    position = play(new_game(), 2)
    snapshot = position.to_list()
    minimax(position, 3, is_white_to_play(position))
    assert position.to_list() == snapshot


def test_chosen_move_is_legal() -> None:
    rng = np.random.default_rng(3)
    for position in random_positions(rng, 10):
        hole, _ = minimax(position, 2, is_white_to_play(position))
        if legal_moves(position):
            assert hole in legal_moves(position)
        else:
            assert hole is None


@pytest.mark.parametrize("depth", [1, 2, 3, 4])
def test_alphabeta_matches_minimax(depth: int) -> None:
    rng = np.random.default_rng(depth)
    for position in random_positions(rng, 12):
        for maximizing_white in (True, False):
            assert alphabeta(position, depth, maximizing_white) == minimax(position, depth, maximizing_white)


def test_searcher_prunes_without_changing_choice() -> None:
    position = play(new_game(), 0)
    plain = MinimaxSearcher(MinimaxConfig(depth=4, alpha_beta=False))
    pruned = MinimaxSearcher(MinimaxConfig(depth=4, alpha_beta=True))

    assert plain.search(position) == pruned.search(position)
    assert plain.search(position) == minimax(position, 4, False)
    assert 0 < pruned.nodes <= plain.nodes


def test_searcher_best_move_for_side_to_move() -> None:
    searcher = MinimaxSearcher(MinimaxConfig(depth=1))
    assert searcher.best_move(new_game()) == 6
    assert searcher.best_move(Position.from_counts([0] * 12 + [24, 24, 0])) is None


def test_negative_depth_rejected() -> None:
    with pytest.raises(ValueError):
        MinimaxConfig(depth=-1)
