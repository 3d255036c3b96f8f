"""Greedy and sorting based solutions to classic counting problems."""

from __future__ import annotations

import re
from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import accumulate


def min_product_sum(a: Sequence[int], b: Sequence[int]) -> int:
    """Smallest possible sum of ``a[i] * b[i]`` when ``a`` may be rearranged."""
    if len(a) != len(b):
        raise ValueError("sequences must have the same length")
    return sum(x * y for x, y in zip(sorted(a), sorted(b, reverse=True)))


def membership(cards: Iterable[int], queries: Iterable[int]) -> list[int]:
    """For each query, 1 if it is among ``cards`` and 0 otherwise."""
    owned = sorted(cards)

    def found(value: int) -> int:
        index = bisect_left(owned, value)
        return int(index < len(owned) and owned[index] == value)

    return [found(query) for query in queries]


def min_coin_count(coins: Sequence[int], amount: int) -> int:
    """Number of coins needed to pay ``amount`` taking the largest coin first.

    ``coins`` are the available denominations in ascending order.
    """
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    count = 0
    for coin in reversed(coins):
        used, amount = divmod(amount, coin)
        count += used
    if amount:
        raise ValueError("amount cannot be paid with these coins")
    return count


def total_wait_time(times: Iterable[int]) -> int:
    """Least total time spent by everyone in a single queue at an ATM."""
    return sum(accumulate(sorted(times)))


_OPERATOR_SPLIT = re.compile(r"([+-])")


def min_expression_value(expression: str) -> int:
    """Smallest value of a ``+``/``-`` expression after adding parentheses.

    Every term after the first minus sign is subtracted.
    """
    parts = _OPERATOR_SPLIT.split(expression.strip())
    operands = parts[0::2]
    operators = parts[1::2]
    if any(not operand.isdigit() for operand in operands):
        raise ValueError(f"malformed expression: {expression!r}")
    result = int(operands[0])
    negative = False
    for operator, operand in zip(operators, operands[1:]):
        negative = negative or operator == "-"
        result += -int(operand) if negative else int(operand)
    return result


def sick_knight_visits(rows: int, cols: int) -> int:
    """Most squares a knight moving only rightwards can visit on the board."""
    if rows == 1:
        return 1
    if rows == 2:
        return min(4, (cols + 1) // 2)
    if cols < 7:
        return min(4, cols)
    return cols - 2


def max_meetings(meetings: Iterable[tuple[int, int]]) -> int:
    """Largest number of non-overlapping ``(start, end)`` meetings."""
    count = 0
    free_at = 0
    for end, start in sorted((end, start) for start, end in meetings):
        if free_at <= start:
            free_at = end
            count += 1
    return count


def max_rope_weight(ropes: Iterable[int]) -> int:
    """Heaviest weight that some subset of the ropes can lift together."""
    ordered = sorted(ropes)
    total = len(ordered)
    return max(
        ((total - index) * strength for index, strength in enumerate(ordered)),
        default=0,
    )