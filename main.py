"""
main.py — Entry point.

Run with:
    python main.py [--difficulty easy|normal|hard] [--scores PATH] [--log-level LEVEL]

Requires:
    pip install pygame
"""

import argparse
import logging
import os

from classic_snake.config import DEFAULT_SCORES_PATH, DIFFICULTY_ORDER, SCORES_ENV_VAR
from classic_snake.controller import GameController
from classic_snake.scores import ScoreStore

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grid snake with three difficulty modes.")
    parser.add_argument(
        "--difficulty", choices=DIFFICULTY_ORDER,
        help="skip the menu and start a session at this difficulty",
    )
    parser.add_argument(
        "--scores", default=os.environ.get(SCORES_ENV_VAR, str(DEFAULT_SCORES_PATH)),
        help=f"best-score file (default: ${SCORES_ENV_VAR} or {DEFAULT_SCORES_PATH})",
    )
    parser.add_argument(
        "--log-level", default="WARNING", type=str.upper, choices=LOG_LEVELS,
        help="logging level (default: WARNING)",
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    GameController(ScoreStore(args.scores), difficulty=args.difficulty).run()


if __name__ == "__main__":
    main()
