#!/usr/bin/env python3
"""Play Kalah against the minimax player in the console, with optional logging & replay."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List

import yaml

from kalah.core import (
    InvalidMove,
    Position,
    Side,
    final_score,
    game_result,
    hole_for_pit,
    legal_moves,
    new_game,
    play,
)
from kalah.search import MinimaxConfig, MinimaxSearcher

logger = logging.getLogger("kalah.play")


def load_yaml_config(path_str: str) -> Dict:
    path = Path(path_str)
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def prompt_human_move(position: Position, side: Side) -> int:
    while True:
        raw = input("your move (1 to 6, q to quit): ").strip()
        if raw.lower() in {"q", "quit", "exit"}:
            print("bye.")
            sys.exit(0)
        if not raw.isdigit():
            print("... you must enter a number between 1 and 6")
            continue
        try:
            hole = hole_for_pit(side, int(raw))
            play(position, hole)
        except InvalidMove as exc:
            print(f"error: {exc}")
            continue
        return hole


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, indent=2))
    print(f"game log saved to {path}")


def report_result(position: Position, human_side: Side) -> None:
    white, black = final_score(position)
    human, ai = (white, black) if human_side == Side.WHITE else (black, white)
    if human < ai:
        print(f"sorry, you lost {human} to {ai}")
    elif ai < human:
        print(f"nice! you won {human} to {ai}")
    else:
        print("it's a draw")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    moves = data.get("moves", [])
    position = new_game()
    if verbose:
        print("replaying game log.")
        print(position)
    for entry in moves:
        position = play(position, entry["hole"])
        if verbose:
            print(f"\n{entry.get('actor', 'unknown')} ({entry.get('side', '?')}) plays hole {entry['hole']}")
            print(position)
    result = game_result(position)
    summary = {
        "result": result.value,
        "moves": len(moves),
        "counts": position.to_list(),
        "final_score": list(final_score(position)),
    }
    if verbose:
        print(f"result: {summary['result']}")
    return summary


def play_interactive(args: argparse.Namespace, cfg: Dict) -> None:
    depth = args.depth if args.depth is not None else cfg.get("depth", 6)
    alpha_beta = not args.no_alpha_beta and cfg.get("alpha_beta", True)
    human_side = Side.WHITE if args.human_side == "white" else Side.BLACK
    searcher = MinimaxSearcher(MinimaxConfig(depth=depth, alpha_beta=alpha_beta))

    position = new_game()
    log_records: List[Dict] = []
    print(position)

    while legal_moves(position):
        side = position.side_to_move
        if side == human_side:
            hole = prompt_human_move(position, side)
            actor = "human"
        else:
            print("now, it's my turn to play... let me think...")
            hole, value = searcher.search(position)
            actor = "ai"
            logger.info("ai plays hole %d (value %d, %d nodes)", hole, value, searcher.nodes)

        position = play(position, hole)
        log_records.append(
            {
                "move_index": len(log_records),
                "actor": actor,
                "side": side.name.lower(),
                "hole": int(hole),
            }
        )
        print(f"\n{position}")

    report_result(position, human_side)

    if args.log_file:
        metadata = {
            "human_side": args.human_side,
            "depth": depth,
            "alpha_beta": alpha_beta,
            "result": game_result(position).value,
            "final_score": list(final_score(position)),
        }
        save_log({"metadata": metadata, "moves": log_records}, Path(args.log_file))


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Kalah in the console against the minimax player.")
    parser.add_argument("--config", type=str, default="configs/play.yaml")
    parser.add_argument("--human-side", choices=["white", "black"], default="white")
    parser.add_argument("--depth", type=int)
    parser.add_argument("--no-alpha-beta", action="store_true")
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    if args.replay_log:
        summary = replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        if args.replay_quiet:
            print(json.dumps(summary, indent=2))
        return

    play_interactive(args, load_yaml_config(args.config))


if __name__ == "__main__":
    main()
