"""
Command line entry point.

Usage:
    gridsnake
    gridsnake --seed 42 --mute
    gridsnake --debug --cell-size 32
"""

import argparse
import logging

from .app import run
from .constants import CELL_SIZE

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="Play snake on a 20x20 grid.")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for food placement (default: random)",
    )
    parser.add_argument(
        "--mute",
        action="store_true",
        help="Disable synthesized sound effects",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging and the on-screen debug line",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=CELL_SIZE,
        help=f"Pixel size of one grid cell (default: {CELL_SIZE})",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.cell_size < 8:
        build_parser().error("--cell-size must be at least 8")

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    logger.info("Starting game (seed=%s, sound=%s)", args.seed, not args.mute)
    run(seed=args.seed, sound=not args.mute, debug=args.debug, cell_size=args.cell_size)


if __name__ == "__main__":
    main()
