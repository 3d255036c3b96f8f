"""String puzzles: patterns, palindromes, word ordering and tallies."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def common_pattern(names: Sequence[str]) -> str:
    """Pattern matching every name, with ``?`` wherever the names disagree.

    All names must have the same length.
    """
    if not names:
        raise ValueError("at least one name is required")
    length = len(names[0])
    if any(len(name) != length for name in names):
        raise ValueError("all names must have the same length")
    return "".join(
        chars[0] if all(char == chars[0] for char in chars) else "?"
        for chars in zip(*names)
    )


def is_palindrome(text: str) -> bool:
    """Whether ``text`` reads the same forwards and backwards."""
    return text == text[::-1]


def sort_words(words: Iterable[str]) -> list[str]:
    """Distinct words ordered by length, then alphabetically."""
    return sorted(set(words), key=lambda word: (len(word), word))


def sort_digits_desc(text: str) -> str:
    """Characters of ``text`` rearranged in descending order."""
    return "".join(sorted(text, reverse=True))


def best_seller(titles: Iterable[str]) -> str:
    """Most frequent title; ties go to the alphabetically first one."""
    counts = Counter(titles)
    if not counts:
        raise ValueError("at least one title is required")
    return min(counts, key=lambda title: (-counts[title], title))


def _reverse_three_digits(value: int) -> int:
    if not 0 <= value <= 999:
        raise ValueError("numbers must have at most three digits")
    hundreds, tens, ones = value // 100, value // 10 % 10, value % 10
    return ones * 100 + tens * 10 + hundreds


def reversed_max(a: int, b: int) -> int:
    """Larger of two three-digit numbers after reversing each one's digits."""
    return max(_reverse_three_digits(a), _reverse_three_digits(b))