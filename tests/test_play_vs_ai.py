import json
from pathlib import Path

from kalah.core import Position, Side, new_game

from scripts.play_vs_ai import prompt_human_move, replay_logged_game, report_result


def create_sample_log(path: Path) -> None:
    moves = [
        {"move_index": 0, "actor": "human", "side": "white", "hole": 0},
        {"move_index": 1, "actor": "ai", "side": "black", "hole": 1},
    ]
    log = {"metadata": {}, "moves": moves}
    path.write_text(json.dumps(log))


def test_replay_logged_game(tmp_path):
    log_path = tmp_path / "game.json"
    create_sample_log(log_path)
    summary = replay_logged_game(log_path, verbose=False)

    assert summary["moves"] == 2
    assert summary["result"] == "ongoing"
    assert summary["counts"] == [0, 0, 5, 5, 5, 5, 5, 5, 5, 5, 4, 4, 0, 0, 0]
    assert summary["final_score"] == [24, 24]


def test_prompt_reprompts_on_bad_input(monkeypatch, capsys):
    answers = iter(["x", "7", "2"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))

    hole = prompt_human_move(new_game(), Side.WHITE)

    assert hole == 2
    out = capsys.readouterr().out
    assert "between 1 and 6" in out
    assert "error:" in out


def test_prompt_rejects_empty_pit_for_black(monkeypatch, capsys):
    position = Position.from_counts([4, 0, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 0, 0, 1])
    answers = iter(["1", "3"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))

    assert prompt_human_move(position, Side.BLACK) == 5
    assert "empty" in capsys.readouterr().out


def test_report_result(capsys):
    report_result(new_game(), Side.WHITE)
    assert "draw" in capsys.readouterr().out
