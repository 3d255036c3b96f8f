"""Problems over lists of numbers, orders and small graphs."""

from __future__ import annotations

import heapq
from collections import defaultdict, deque
from collections.abc import Iterable, Sequence


def count_overtakers(entry: Sequence[str], exit: Sequence[str]) -> int:
    """Cars that left a tunnel ahead of some car that entered before them."""
    position = {car: index for index, car in enumerate(entry)}
    if len(position) != len(entry) or sorted(entry) != sorted(exit):
        raise ValueError("entry and exit must list the same distinct cars")
    overtakers = 0
    earliest_behind = len(entry)
    for index in reversed([position[car] for car in exit]):
        if earliest_behind < index:
            overtakers += 1
        earliest_behind = min(earliest_behind, index)
    return overtakers


def infected_count(computers: int, links: Iterable[tuple[int, int]]) -> int:
    """Computers infected through the network by computer 1, not counting it."""
    if computers < 1:
        raise ValueError("there must be at least one computer")
    neighbours: defaultdict[int, set[int]] = defaultdict(set)
    for first, second in links:
        if not (1 <= first <= computers and 1 <= second <= computers):
            raise ValueError(f"link ({first}, {second}) names an unknown computer")
        neighbours[first].add(second)
        neighbours[second].add(first)
    infected = {1}
    queue = deque([1])
    while queue:
        for other in neighbours[queue.popleft()]:
            if other not in infected:
                infected.add(other)
                queue.append(other)
    return len(infected) - 1


def _wood_above(heights: Sequence[int], cut: int) -> int:
    return sum(height - cut for height in heights if height > cut)


def max_cut_height(trees: Iterable[int], needed: int) -> int:
    """Highest saw setting that still yields at least ``needed`` wood."""
    heights = list(trees)
    if needed < 1:
        raise ValueError("needed must be positive")
    if sum(heights) < needed:
        raise ValueError("the trees cannot supply that much wood")
    low, high = 0, max(heights)
    best = 0
    while low <= high:
        mid = (low + high) // 2
        if _wood_above(heights, mid) >= needed:
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


def nth_largest(n: int, values: Sequence[int]) -> int:
    """The ``n``-th largest of the ``n * n`` values given."""
    if n < 1:
        raise ValueError("n must be positive")
    if len(values) != n * n:
        raise ValueError("exactly n * n values are required")
    return heapq.nlargest(n, values)[-1]


def third_largest(values: Sequence[int]) -> int:
    """Third largest of the values, counting repeats."""
    if len(values) < 3:
        raise ValueError("at least three values are required")
    return heapq.nlargest(3, values)[-1]


def best_five(scores: Sequence[int]) -> tuple[int, list[int]]:
    """Total of the five highest scores and their 1-based problem numbers, ascending."""
    if len(scores) < 5:
        raise ValueError("at least five scores are required")
    chosen = sorted(range(len(scores)), key=lambda index: scores[index], reverse=True)[:5]
    return sum(scores[index] for index in chosen), sorted(index + 1 for index in chosen)


def cheapest_strings(needed: int, offers: Iterable[tuple[int, int]]) -> int:
    """Least cost of at least ``needed`` guitar strings.

    Each offer is ``(price of a six-string set, price of one string)``.
    """
    offers = list(offers)
    if not offers:
        raise ValueError("at least one offer is required")
    if needed < 0:
        raise ValueError("needed must not be negative")
    set_price = min(price for price, _ in offers)
    piece_price = min(price for _, price in offers)
    sets, rest = divmod(needed, 6)
    only_sets = (sets + 1) * set_price
    mixed = sets * set_price + rest * piece_price
    only_pieces = needed * piece_price
    return min(only_sets, mixed, only_pieces)