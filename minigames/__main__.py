"""Entry point for ``python -m minigames``."""

import argparse
import logging
from typing import List, Optional

from .config import LOG_LEVEL, LOG_LEVELS
from .menu import GAMES, show_menu


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play a collection of mini-games")
    parser.add_argument(
        "--game", "-g",
        choices=list(GAMES.keys()),
        default=None,
        help="Play a single game and exit (" +
             ", ".join(f"{k}: {g.name}" for k, g in GAMES.items()) + ")",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=list(LOG_LEVELS),
        default=LOG_LEVEL,
        help=f"Logging level (default: {LOG_LEVEL})",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.game is None:
        show_menu()
        return
    try:
        GAMES[args.game].play()
    except EOFError:
        logging.getLogger(__name__).info("Input ended during %s", GAMES[args.game].name)


if __name__ == "__main__":
    main()
