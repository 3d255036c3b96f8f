"""Command-line entry point that runs the judge problems on standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from judgekit.maxheap import process_commands
from judgekit.primes import goldbach_partition
from judgekit.sequences import best_five

BEST_FIVE_SCORES = 8


class InputError(ValueError):
    """Raised when the input does not follow the expected format."""


def _read_ints(stream: TextIO) -> list[int]:
    tokens = stream.read().split()
    try:
        return [int(token) for token in tokens]
    except ValueError as exc:
        raise InputError(f"expected integers only: {exc}") from None


def _counted(values: list[int]) -> list[int]:
    """Take a leading count followed by that many values."""
    if not values:
        raise InputError("missing count")
    count, rest = values[0], values[1:]
    if count < 0:
        raise InputError("count must not be negative")
    if len(rest) < count:
        raise InputError(f"expected {count} values, got {len(rest)}")
    return rest[:count]


def _run_maxheap(values: list[int]) -> list[str]:
    return [str(value) for value in process_commands(_counted(values))]


def _run_goldbach(values: list[int]) -> list[str]:
    lines = []
    for number in _counted(values):
        small, large = goldbach_partition(number)
        lines.append(f"{small} {large}")
    return lines


def _run_best_five(values: list[int]) -> list[str]:
    if len(values) < BEST_FIVE_SCORES:
        raise InputError(f"expected {BEST_FIVE_SCORES} scores, got {len(values)}")
    total, problems = best_five(values[:BEST_FIVE_SCORES])
    return [str(total), " ".join(str(problem) for problem in problems)]


_COMMANDS: dict[str, tuple[Callable[[list[int]], list[str]], str]] = {
    "maxheap": (
        _run_maxheap,
        "run heap commands: a count, then numbers; 0 pops the largest value",
    ),
    "goldbach": (
        _run_goldbach,
        "print the closest Goldbach partition of each even number after a count",
    ),
    "best-five": (
        _run_best_five,
        "print the total of the five best of eight scores and their problem numbers",
    ),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="judgekit",
        description="Solve a judge problem reading whitespace-separated input from stdin.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        subparsers.add_parser(name, help=help_text, description=help_text)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen problem on standard input and print its answer."""
    args = _build_parser().parse_args(argv)
    solve, _ = _COMMANDS[args.command]
    try:
        lines = solve(_read_ints(sys.stdin))
    except ValueError as exc:
        print(f"judgekit {args.command}: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())