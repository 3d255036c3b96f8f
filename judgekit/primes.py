"""Prime sieves, factorisation and related counting problems."""

from __future__ import annotations

from collections.abc import Iterable
from math import isqrt


def sieve(limit: int) -> list[bool]:
    """Primality flags for every integer from ``0`` to ``limit`` inclusive."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    flags = [True] * (limit + 1)
    flags[0] = False
    if limit >= 1:
        flags[1] = False
    for i in range(2, isqrt(limit) + 1):
        if flags[i]:
            flags[i * i :: i] = [False] * len(range(i * i, limit + 1, i))
    return flags


def _is_prime(value: int) -> bool:
    return value >= 2 and all(value % d for d in range(2, isqrt(value) + 1))


def goldbach_partition(n: int) -> tuple[int, int]:
    """Two primes ``(p, q)`` with ``p <= q``, ``p + q == n`` and ``q - p`` smallest."""
    if n < 4 or n % 2:
        raise ValueError("n must be an even number of at least 4")
    flags = sieve(n)
    for p in range(n // 2, 1, -1):
        if flags[p] and flags[n - p]:
            return p, n - p
    raise ValueError(f"{n} has no Goldbach partition")


def count_primes_between(n: int) -> int:
    """Number of primes ``p`` with ``n < p <= 2 * n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return sum(sieve(2 * n)[n + 1 :])


def factorize(n: int) -> list[tuple[int, int]]:
    """Prime factorisation of ``n`` as ``(prime, exponent)`` pairs in ascending order."""
    if n < 2:
        raise ValueError("n must be at least 2")
    factors: list[tuple[int, int]] = []
    divisor = 2
    while divisor * divisor <= n:
        exponent = 0
        while n % divisor == 0:
            n //= divisor
            exponent += 1
        if exponent:
            factors.append((divisor, exponent))
        divisor += 1
    if n > 1:
        factors.append((n, 1))
    return factors


def count_primes(numbers: Iterable[int]) -> int:
    """How many of ``numbers`` are prime."""
    return sum(1 for number in numbers if _is_prime(number))


def nth_erased(n: int, k: int) -> int:
    """The ``k``-th number crossed out by the sieve of Eratosthenes over ``2..n``."""
    if n < 2:
        raise ValueError("n must be at least 2")
    if not 1 <= k <= n - 1:
        raise ValueError("k must lie between 1 and n - 1")
    erased = [False] * (n + 1)
    count = 0
    for base in range(2, n + 1):
        if erased[base]:
            continue
        for multiple in range(base, n + 1, base):
            if not erased[multiple]:
                erased[multiple] = True
                count += 1
                if count == k:
                    return multiple
    raise ValueError("k exceeds the numbers available")