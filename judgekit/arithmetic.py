"""Small number-theory and arithmetic puzzles."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import chain, count, islice, repeat
from math import gcd, isqrt


def trailing_factorial_zeros(n: int) -> int:
    """Number of trailing zeros in ``n!``."""
    if n < 0:
        raise ValueError("n must not be negative")
    zeros = 0
    power = 5
    while power <= n:
        zeros += n // power
        power *= 5
    return zeros


def _require_positive(*values: int) -> None:
    if any(value <= 0 for value in values):
        raise ValueError("values must be positive")


def reduce_ratio(m: int, n: int) -> tuple[int, int]:
    """The ratio ``m:n`` in lowest terms."""
    _require_positive(m, n)
    divisor = gcd(m, n)
    return m // divisor, n // divisor


def gcd_lcm(m: int, n: int) -> tuple[int, int]:
    """Greatest common divisor and least common multiple of ``m`` and ``n``."""
    _require_positive(m, n)
    divisor = gcd(m, n)
    return divisor, m * n // divisor


def repunit_length(n: int) -> int:
    """Length of the shortest number made only of ones that ``n`` divides."""
    if n < 1 or gcd(n, 10) != 1:
        raise ValueError("n must be positive and coprime with 10")
    remainder = 1 % n
    length = 1
    while remainder:
        remainder = (remainder * 10 + 1) % n
        length += 1
    return length


def warp_operations(x: int, y: int) -> int:
    """Fewest warp jumps from ``x`` to ``y`` when each jump differs from the last by at most one
    and both the first and last jump are of length one."""
    distance = y - x
    if distance < 1:
        raise ValueError("y must be greater than x")
    root = isqrt(distance - 1)
    steps = 2 * root
    if distance > root * root + root:
        steps += 1
    return steps


def snail_days(up: int, down: int, height: int) -> int:
    """Days a snail climbing ``up`` by day and sliding ``down`` by night needs to reach ``height``."""
    if up <= down:
        raise ValueError("the snail must climb more than it slides")
    days, rest = divmod(height - down, up - down)
    return days if rest == 0 else days + 1


def break_even_point(fixed: int, variable: int, price: int) -> int:
    """Smallest sale count at which income exceeds cost, or ``-1`` if it never does."""
    if variable >= price:
        return -1
    return fixed // (price - variable) + 1


def almost_common_multiple(numbers: Sequence[int]) -> int:
    """Smallest positive integer divisible by at least three of ``numbers``."""
    if len(numbers) < 3:
        raise ValueError("at least three numbers are required")
    _require_positive(*numbers)
    for candidate in count(1):
        if sum(candidate % number == 0 for number in numbers) >= 3:
            return candidate
    raise AssertionError("unreachable")


def _digit_sum(value: int) -> int:
    return sum(int(digit) for digit in str(value))


def smallest_generator(n: int) -> int:
    """Smallest ``m`` with ``m`` plus its digit sum equal to ``n``, or ``0`` if none exists."""
    return next((m for m in range(1, n) if m + _digit_sum(m) == n), 0)


def max_distinct_summands(total: int) -> int:
    """Most distinct positive integers that add up to ``total``."""
    if total < 1:
        raise ValueError("total must be positive")
    summands = 0
    term = 1
    while True:
        total -= term
        term += 1
        summands += 1
        if total < term:
            return summands


def number_from_divisors(divisors: Sequence[int]) -> int:
    """The number whose proper divisors other than one are ``divisors``."""
    if not divisors:
        raise ValueError("at least one divisor is required")
    return min(divisors) * max(divisors)


def stick_count(x: int) -> int:
    """Sticks needed to build length ``x`` from halved 64-unit sticks."""
    if x < 0:
        raise ValueError("x must not be negative")
    return x.bit_count()


def count_zero_digits(start: int, end: int) -> int:
    """Total count of ``0`` digits written out across ``start..end`` inclusive."""
    return sum(str(value).count("0") for value in range(start, end + 1))


def sequence_range_sum(a: int, b: int) -> int:
    """Sum of positions ``a..b`` (1-based) of the sequence 1, 2, 2, 3, 3, 3, ..."""
    if a < 1 or b < a:
        raise ValueError("positions must satisfy 1 <= a <= b")
    values = chain.from_iterable(repeat(i, i) for i in count(1))
    return sum(islice(values, a - 1, b))


def verification_digit(digits: Sequence[int]) -> int:
    """Last digit of the sum of the squares of ``digits``."""
    return sum(digit * digit for digit in digits) % 10


def complement_fraction(a: int, b: int) -> tuple[int, int]:
    """Numerator and denominator of ``1 - a/b``."""
    return b - a, b


def next_in_sequence(first: int, second: int) -> int:
    """Next term of the arithmetic progression starting ``first, second``."""
    return 2 * second - first


def cantor_fraction(n: int) -> tuple[int, int]:
    """The ``n``-th fraction in the zigzag enumeration as ``(numerator, denominator)``."""
    if n < 1:
        raise ValueError("n must be positive")
    diagonal = 1
    while diagonal * (diagonal + 1) // 2 < n:
        diagonal += 1
    position = n - diagonal * (diagonal - 1) // 2
    if diagonal % 2 == 0:
        return position, diagonal + 1 - position
    return diagonal + 1 - position, position