from __future__ import annotations

import argparse
import json

from config import load_config_from_file, setup_logging
from tictactoe.selfplay import SelfPlayRunner
from tictactoe.types import AILevel


def _level(value: str) -> AILevel:
    try:
        return AILevel[value.upper()]
    except KeyError:
        raise argparse.ArgumentTypeError(f"level must be one of easy, hard (got {value!r})")


def parse_args() -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Run AI vs AI tic-tac-toe games")
    ap.add_argument("--games", type=int, default=10, help="Number of games to play")
    ap.add_argument("--x-level", type=_level, default=AILevel.HARD, help="AI level for X (easy/hard)")
    ap.add_argument("--o-level", type=_level, default=AILevel.HARD, help="AI level for O (easy/hard)")
    ap.add_argument("--epsilon", type=float, default=0.0, help="Probability of a random move")
    ap.add_argument("--seed", type=int, default=None, help="Random seed for exploration moves")
    ap.add_argument("--config", default=None, help="JSON configuration file")
    return ap.parse_args()


def main() -> None:
    args = parse_args()
    if args.config:
        load_config_from_file(args.config)
    setup_logging()

    runner = SelfPlayRunner(args.x_level, args.o_level, epsilon=args.epsilon, seed=args.seed)
    stats = runner.run(args.games)
    print(json.dumps(stats.to_dict(), indent=2))


if __name__ == "__main__":
    main()
