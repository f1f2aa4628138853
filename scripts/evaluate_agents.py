#!/usr/bin/env python3
"""Pit two policies against each other and print the results as JSON."""

import argparse
import json
import logging
from pathlib import Path
from typing import Dict

import numpy as np
import yaml
from tqdm.auto import tqdm

from kalah.agents import GreedyPolicy, MinimaxPolicy, Policy, RandomPolicy
from kalah.evaluation import evaluate_policies
from kalah.search import MinimaxConfig

POLICY_CHOICES = ["random", "greedy", "minimax"]


def load_yaml_config(path_str: str) -> Dict:
    path = Path(path_str)
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def build_policy(name: str, minimax_cfg: Dict, seed) -> Policy:
    if name == "random":
        return RandomPolicy(np.random.default_rng(seed))
    if name == "greedy":
        return GreedyPolicy()
    return MinimaxPolicy(MinimaxConfig(**minimax_cfg))


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default="configs/evaluate.yaml")
    parser.add_argument("--white", choices=POLICY_CHOICES)
    parser.add_argument("--black", choices=POLICY_CHOICES)
    parser.add_argument("--episodes", type=int)
    parser.add_argument("--depth", type=int)
    parser.add_argument("--temperature", type=float)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    cfg = load_yaml_config(args.config)
    episodes = args.episodes if args.episodes is not None else cfg.get("episodes", 20)
    temperature = args.temperature if args.temperature is not None else cfg.get("temperature", 1.0)
    seed = args.seed if args.seed is not None else cfg.get("seed")
    white = args.white or cfg.get("white", "minimax")
    black = args.black or cfg.get("black", "random")
    minimax_cfg = dict(cfg.get("minimax", {}))
    if args.depth is not None:
        minimax_cfg["depth"] = args.depth

    result = evaluate_policies(
        build_policy(white, minimax_cfg, seed),
        build_policy(black, minimax_cfg, None if seed is None else seed + 1),
        episodes=episodes,
        rng=np.random.default_rng(seed),
        temperature=temperature,
        progress=lambda episodes_range: tqdm(episodes_range, desc="Games"),
    )

    output = {
        "white": white,
        "black": black,
        "games": result.games_played,
        "white_wins": result.white_wins,
        "black_wins": result.black_wins,
        "draws": result.draws,
        "average_length": result.average_length,
        "white_winrate": result.winrate_white(),
        "black_winrate": result.winrate_black(),
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
