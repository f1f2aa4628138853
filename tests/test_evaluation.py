import numpy as np

from kalah.agents import MinimaxPolicy, RandomPolicy
from kalah.evaluation import EvaluationResult, evaluate_policies
from kalah.search import MinimaxConfig


def test_evaluate_random_vs_random_small():
    policy_white = RandomPolicy(np.random.default_rng(0))
    policy_black = RandomPolicy(np.random.default_rng(1))
    result = evaluate_policies(policy_white, policy_black, episodes=3, rng=np.random.default_rng(2))

    assert result.games_played == 3
    assert result.white_wins + result.black_wins + result.draws == 3
    assert result.average_length > 0


def test_evaluate_minimax_vs_random_with_progress_hook():
    seen = []

    def progress(episodes):
        for episode in episodes:
            seen.append(episode)
            yield episode

    result = evaluate_policies(
        MinimaxPolicy(MinimaxConfig(depth=2)),
        RandomPolicy(),
        episodes=2,
        rng=np.random.default_rng(5),
        temperature=0.0,
        progress=progress,
    )

    assert seen == [0, 1]
    assert result.games_played == 2
    assert result.white_wins + result.black_wins + result.draws == 2


def test_winrates_guard_empty_runs():
    result = EvaluationResult(games_played=0, white_wins=0, black_wins=0, draws=0, average_length=0.0)
    assert result.winrate_white() == 0.0
    assert result.winrate_black() == 0.0

    result = EvaluationResult(games_played=4, white_wins=3, black_wins=1, draws=0, average_length=30.0)
    assert result.winrate_white() == 0.75
    assert result.winrate_black() == 0.25
