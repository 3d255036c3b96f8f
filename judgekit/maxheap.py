"""A max-priority queue of integers and a command processor built on it."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


class MaxHeap:
    """Priority queue that always yields its largest value first.

    Popping from an empty heap yields ``0`` rather than raising.
    """

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Add ``value`` to the heap."""
        heapq.heappush(self._items, -value)

    def pop(self) -> int:
        """Remove and return the largest value, or ``0`` if the heap is empty."""
        if not self._items:
            return 0
        return -heapq.heappop(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


def process_commands(commands: Iterable[int]) -> list[int]:
    """Run a stream of heap commands and collect the popped values.

    A non-zero command pushes that number; a zero pops the largest
    value (``0`` when the heap is empty) and records it.
    """
    heap = MaxHeap()
    popped: list[int] = []
    for command in commands:
        if command:
            heap.push(command)
        else:
            popped.append(heap.pop())
    return popped