"""Command-line entry point for ``rnd``.

Usage:
    rnd coin 20
    rnd choose pizza sushi tacos -w 3,1,1 -a 5 -r
    rnd random -5 5 --inclusive
    rnd --seed 42 die 20 -t 3
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

import numpy as np

from rnd import __version__
from rnd.commands import (
    AssignCommand,
    ChooseCommand,
    CoinCommand,
    Command,
    DieCommand,
    RandomCommand,
    ShuffleCommand,
    StringCommand,
    default_command,
)
from rnd.num import Num
from rnd.sampler.strings import Case

logger = logging.getLogger(__name__)

ABOUT = "rnd lets you select random data in different ways."
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ALL_HELP = (
    "Show every {noun} in order. Enabled by default for up to 10 {noun}s "
    "unless --count is given."
)


# ---------------------------------------------------------------------------
# Argument value parsers
# ---------------------------------------------------------------------------


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def _number(text: str) -> Num:
    try:
        return Num.parse(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None


def _float_list(text: str) -> list[float]:
    """Parse a comma-separated list of weights."""
    try:
        return [float(part) for part in text.split(",")]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid weight list: {text!r}") from None


def _str_list(text: str) -> list[str]:
    return text.split(",")


def _split_items(values: Sequence[str]) -> list[str]:
    """Flatten positional items, splitting comma-joined ones (`a, b c` -> a, b, c)."""
    parts = (part.strip() for value in values for part in value.split(","))
    return [part for part in parts if part]


# ---------------------------------------------------------------------------
# Parser construction
# ---------------------------------------------------------------------------


def _add_display_flags(parser: argparse.ArgumentParser, noun: str) -> None:
    parser.add_argument(
        "-c",
        "--count",
        action="store_true",
        help=f"Show the number of times each {noun} came up.",
    )
    parser.add_argument(
        "-A", "--all", dest="show_all", action="store_true", help=_ALL_HELP.format(noun=noun)
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the ``rnd`` argument parser with one subparser per command."""
    parser = argparse.ArgumentParser(prog="rnd", description=ABOUT)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--seed",
        type=_non_negative_int,
        default=None,
        help="Seed the random generator for reproducible output.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log sampling details to stderr."
    )
    sub = parser.add_subparsers(dest="command", metavar="<command>")

    coin = sub.add_parser(
        "coin", aliases=["toss", "flip"], help="Flip a coin `amount` times."
    )
    coin.add_argument(
        "amount", nargs="?", type=_non_negative_int, default=1, help="Number of flips."
    )
    _add_display_flags(coin, "flip")
    coin.set_defaults(factory=_coin_command)

    choose = sub.add_parser(
        "choose",
        aliases=["select"],
        help="Choose `amount` elements from a list of items.",
        description="Choose items, optionally weighted and with or without repetition.",
    )
    choose.add_argument("items", nargs="*", help="The items to choose from.")
    choose.add_argument(
        "-a", "-n", "--amount", type=_non_negative_int, default=1, help="Number of items to choose."
    )
    choose.add_argument(
        "-w",
        "--weights",
        type=_float_list,
        action="extend",
        default=None,
        help="Comma-separated weights, one per item.",
    )
    _add_display_flags(choose, "choice")
    choose.add_argument(
        "-r", "--repetition", action="store_true", help="Choose items with repetition."
    )
    choose.set_defaults(factory=_choose_command)

    shuffle = sub.add_parser("shuffle", aliases=["shfl"], help="Shuffle a list of items.")
    shuffle.add_argument("items", nargs="*", help="The items to shuffle.")
    shuffle.set_defaults(factory=_shuffle_command)

    random = sub.add_parser(
        "random",
        aliases=["rand"],
        help="Print a random number between 0.0 and 1.0 (not inclusive).",
        description=(
            "Print a random number. A single bound is paired with 0; two integer "
            "bounds give an integer."
        ),
    )
    random.add_argument("start", nargs="?", type=_number, help="The lower bound.")
    random.add_argument("end", nargs="?", type=_number, help="The upper bound.")
    random.add_argument(
        "-i", "--inclusive", action="store_true", help="Include the upper bound."
    )
    random.add_argument(
        "-p",
        "--precision",
        type=_non_negative_int,
        default=6,
        help="Decimals printed for floating point numbers (default: 6).",
    )
    random.set_defaults(factory=_random_command)

    string = sub.add_parser(
        "string", aliases=["str"], help="Generate a random alphanumeric string."
    )
    string.add_argument(
        "-l", "-n", "--length", type=_non_negative_int, default=10, help="Length (default: 10)."
    )
    string.add_argument(
        "-c",
        "--case",
        type=str.lower,
        choices=[c.value for c in Case],
        default=Case.LOWER.value,
        help="Case of the string (default: lower).",
    )
    string.set_defaults(factory=_string_command)

    die = sub.add_parser("die", aliases=["dice"], help="Roll an n-sided die.")
    die.add_argument(
        "sides", nargs="?", type=_non_negative_int, default=6, help="Number of sides (default: 6)."
    )
    die.add_argument(
        "-t", "-n", "--times", type=_non_negative_int, default=1, help="Number of rolls."
    )
    _add_display_flags(die, "roll")
    die.set_defaults(factory=_die_command)

    assign = sub.add_parser(
        "assign",
        aliases=["assn"],
        help="Assign items from one list to another randomly.",
        description=(
            "Assign items from one list to another randomly. Both lists must be of equal length."
        ),
    )
    assign.add_argument(
        "-l", "--left", type=_str_list, action="extend", default=None, help="Left-hand items."
    )
    assign.add_argument(
        "-r", "--right", type=_str_list, action="extend", default=None, help="Right-hand items."
    )
    assign.set_defaults(factory=_assign_command)

    return parser


# ---------------------------------------------------------------------------
# Namespace -> Command
# ---------------------------------------------------------------------------


def _coin_command(args: argparse.Namespace) -> Command:
    return CoinCommand(amount=args.amount, count=args.count, show_all=args.show_all)


def _choose_command(args: argparse.Namespace) -> Command:
    return ChooseCommand(
        items=_split_items(args.items),
        amount=args.amount,
        weights=args.weights or [],
        count=args.count,
        show_all=args.show_all,
        repetition=args.repetition,
    )


def _shuffle_command(args: argparse.Namespace) -> Command:
    return ShuffleCommand(items=list(args.items))


def _random_command(args: argparse.Namespace) -> Command:
    return RandomCommand(
        start=args.start, end=args.end, inclusive=args.inclusive, precision=args.precision
    )


def _string_command(args: argparse.Namespace) -> Command:
    return StringCommand(length=args.length, case=Case(args.case))


def _die_command(args: argparse.Namespace) -> Command:
    return DieCommand(
        sides=args.sides, times=args.times, count=args.count, show_all=args.show_all
    )


def _assign_command(args: argparse.Namespace) -> Command:
    return AssignCommand(left=args.left or [], right=args.right or [])


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``rnd`` and return the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    command = args.factory(args) if args.command else default_command()
    logger.debug("Running %s (seed=%s)", command, args.seed)
    rng = np.random.default_rng(args.seed)

    try:
        output = command.run(rng)
    except ValueError as e:
        logger.debug("%s failed", type(command).__name__, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
