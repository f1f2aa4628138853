import numpy as np
import pytest

from kalah.agents import GreedyPolicy, MinimaxPolicy, RandomPolicy, select_action
from kalah.core import legal_move_mask, new_game, play
from kalah.search import MinimaxConfig


def test_random_policy_uniform_over_legal_pits():
    position = play(play(new_game(), 0), 1)
    mask = legal_move_mask(position)
    probs = RandomPolicy(np.random.default_rng(0)).act(position, mask)

    assert probs[0] == 0.0
    assert np.allclose(probs[1:], 0.2)
    assert np.isclose(probs.sum(), 1.0)


def test_greedy_policy_prefers_extra_turn():
    position = new_game()
    probs = GreedyPolicy().act(position, legal_move_mask(position))

    assert int(np.argmax(probs)) == 2
    assert np.all(probs >= 0)
    assert np.isclose(probs.sum(), 1.0)


def test_minimax_policy_is_one_hot_on_search_choice():
    position = new_game()
    policy = MinimaxPolicy(MinimaxConfig(depth=1))
    probs = policy.act(position, legal_move_mask(position))

    assert probs.tolist() == [0.0, 0.0, 0.0, 1.0, 0.0, 0.0]
    assert policy.spawn(1) is not policy


def test_select_action_greedy_and_sampled():
    rng = np.random.default_rng(0)
    probs = np.array([0.1, 0.0, 0.6, 0.3, 0.0, 0.0], dtype=np.float32)
    assert select_action(probs, 0.0, rng) == 2
    for _ in range(20):
        assert select_action(probs, 1.0, rng) in (0, 2, 3)


def test_select_action_rejects_empty_distribution():
    with pytest.raises(ValueError):
        select_action(np.zeros(6, dtype=np.float32), 1.0, np.random.default_rng(0))
