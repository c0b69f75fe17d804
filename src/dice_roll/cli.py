from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .dice import make_rng, roll_expressions
from .errors import DiceError
from .table import render_table

PROG_NAME = "roll"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=PROG_NAME, description="A simple CLI to roll dice")
    p.add_argument(
        "dice",
        nargs="+",
        metavar="DICE",
        help="dice expressions (e.g. 1d20, 4d8, 1d20a for advantage, 1d20d for disadvantage)",
    )
    p.add_argument("--seed", type=int, help="seed the random source for a reproducible roll")
    p.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        report = roll_expressions(args.dice, rng=make_rng(args.seed))
    except DiceError as e:
        logger.debug("rejected %s", args.dice)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(render_table(report))
    return 0
