import math

import pytest

from judgekit.arithmetic import (
    almost_common_multiple,
    break_even_point,
    cantor_fraction,
    complement_fraction,
    count_zero_digits,
    gcd_lcm,
    max_distinct_summands,
    next_in_sequence,
    number_from_divisors,
    reduce_ratio,
    repunit_length,
    sequence_range_sum,
    smallest_generator,
    snail_days,
    stick_count,
    trailing_factorial_zeros,
    verification_digit,
    warp_operations,
)


def _digit_sum(value):
    return sum(int(d) for d in str(value))


@pytest.mark.parametrize("n", range(0, 200))
def test_trailing_zeros_match_factorial(n):
    text = str(math.factorial(n))
    assert trailing_factorial_zeros(n) == len(text) - len(text.rstrip("0"))


def test_trailing_zeros_rejects_negative():
    with pytest.raises(ValueError):
        trailing_factorial_zeros(-1)


@pytest.mark.parametrize("m, n", [(4, 6), (100, 25), (7, 13), (36, 48), (9, 9)])
def test_reduce_ratio_is_lowest_terms(m, n):
    a, b = reduce_ratio(m, n)
    assert math.gcd(a, b) == 1
    assert a * n == b * m


def test_reduce_ratio_rejects_zero():
    with pytest.raises(ValueError):
        reduce_ratio(0, 5)


@pytest.mark.parametrize("m, n", [(24, 18), (7, 5), (12, 12), (1, 100), (81, 27)])
def test_gcd_lcm_relations(m, n):
    g, lcm = gcd_lcm(m, n)
    assert g == math.gcd(m, n)
    assert g * lcm == m * n
    assert lcm % m == 0 and lcm % n == 0


@pytest.mark.parametrize("n", [1, 3, 7, 9, 11, 13, 21, 27, 37, 81, 99])
def test_repunit_length_is_minimal(n):
    length = repunit_length(n)
    assert int("1" * length) % n == 0
    assert all(int("1" * j) % n for j in range(1, length))


@pytest.mark.parametrize("n", [2, 5, 10, 0])
def test_repunit_length_rejects_non_coprime(n):
    with pytest.raises(ValueError):
        repunit_length(n)


def test_warp_operations_perfect_squares():
    for k in range(1, 60):
        assert warp_operations(0, k * k) == 2 * k - 1


def test_warp_operations_monotone_and_shift_invariant():
    results = [warp_operations(0, d) for d in range(1, 500)]
    assert all(0 <= b - a <= 1 for a, b in zip(results, results[1:]))
    assert all(warp_operations(5, 5 + d) == r for d, r in zip(range(1, 500), results))


def test_warp_operations_rejects_non_forward():
    with pytest.raises(ValueError):
        warp_operations(3, 3)


def test_snail_days_example():
    assert snail_days(2, 1, 5) == 4


@pytest.mark.parametrize(
    "up, down, height", [(2, 1, 5), (5, 1, 6), (100, 99, 1000000000), (3, 2, 3), (10, 3, 45)]
)
def test_snail_days_reaches_top_first_on_that_day(up, down, height):
    days = snail_days(up, down, height)
    assert (days - 1) * (up - down) + up >= height
    if days > 1:
        assert (days - 2) * (up - down) + up < height


def test_snail_days_rejects_no_progress():
    with pytest.raises(ValueError):
        snail_days(2, 2, 10)


def test_break_even_example():
    assert break_even_point(1000, 70, 170) == 11


def test_break_even_never():
    assert break_even_point(3, 2, 1) == -1
    assert break_even_point(3, 2, 2) == -1


@pytest.mark.parametrize("fixed, variable, price", [(0, 1, 2), (1000, 70, 170), (50, 3, 8)])
def test_break_even_is_first_profitable_count(fixed, variable, price):
    p = break_even_point(fixed, variable, price)
    assert fixed + variable * p < price * p
    assert fixed + variable * (p - 1) >= price * (p - 1)


@pytest.mark.parametrize("numbers", [[30, 42, 70, 35, 90], [1, 2, 3, 4, 5], [7, 11, 13, 17, 19]])
def test_almost_common_multiple_is_minimal(numbers):
    result = almost_common_multiple(numbers)
    assert sum(result % x == 0 for x in numbers) >= 3
    assert all(sum(m % x == 0 for x in numbers) < 3 for m in range(1, result))


def test_almost_common_multiple_needs_three_numbers():
    with pytest.raises(ValueError):
        almost_common_multiple([2, 3])


def test_smallest_generator_example():
    assert smallest_generator(216) == 198


def test_smallest_generator_properties():
    for n in range(1, 400):
        result = smallest_generator(n)
        candidates = [m for m in range(1, n) if m + _digit_sum(m) == n]
        if result:
            assert result + _digit_sum(result) == n
            assert result == min(candidates)
        else:
            assert candidates == []


@pytest.mark.parametrize("total", range(1, 300))
def test_max_distinct_summands_bounds(total):
    k = max_distinct_summands(total)
    used = k * (k + 1) // 2
    assert used <= total
    assert total - used < k + 1


def test_max_distinct_summands_rejects_zero():
    with pytest.raises(ValueError):
        max_distinct_summands(0)


@pytest.mark.parametrize("n", [4, 6, 12, 49, 60, 97 * 89])
def test_number_from_divisors_rebuilds(n):
    divisors = [d for d in range(2, n) if n % d == 0]
    assert number_from_divisors(divisors) == n


def test_number_from_divisors_rejects_empty():
    with pytest.raises(ValueError):
        number_from_divisors([])


@pytest.mark.parametrize("k", range(0, 7))
def test_stick_count_powers(k):
    assert stick_count(2**k) == 1
    assert stick_count(2**k - 1) == k


def test_stick_count_rejects_negative():
    with pytest.raises(ValueError):
        stick_count(-1)


def test_count_zero_digits_additive():
    for a, b, c in [(0, 10, 100), (1, 50, 1000), (95, 105, 2000)]:
        assert count_zero_digits(a, c) == count_zero_digits(a, b) + count_zero_digits(b + 1, c)


@pytest.mark.parametrize("n", [0, 7, 10, 100, 1005, 90909])
def test_count_zero_digits_single(n):
    assert count_zero_digits(n, n) == str(n).count("0")


@pytest.mark.parametrize("k", range(1, 30))
def test_sequence_range_sum_full_blocks(k):
    assert sequence_range_sum(1, k * (k + 1) // 2) == sum(i * i for i in range(1, k + 1))


def test_sequence_range_sum_additive():
    assert sequence_range_sum(3, 900) == sequence_range_sum(3, 400) + sequence_range_sum(401, 900)


def test_sequence_range_sum_rejects_bad_range():
    with pytest.raises(ValueError):
        sequence_range_sum(5, 4)


@pytest.mark.parametrize("digits", [[0, 5, 4, 9, 1], [9, 9, 9, 9, 9], [1, 2, 3, 4, 5]])
def test_verification_digit_invariants(digits):
    result = verification_digit(digits)
    assert result in range(10)
    assert verification_digit([d + 10 for d in digits]) == result
    assert verification_digit(digits + [0]) == result


@pytest.mark.parametrize("a, b", [(1, 2), (3, 7), (10, 10)])
def test_complement_fraction(a, b):
    numerator, denominator = complement_fraction(a, b)
    assert numerator + a == b
    assert denominator == b


@pytest.mark.parametrize("first, second", [(4, 12), (-3, 7), (5, 5)])
def test_next_in_sequence(first, second):
    assert next_in_sequence(first, second) - second == second - first


def test_cantor_fraction_covers_diagonals():
    depth = 12
    terms = [cantor_fraction(n) for n in range(1, depth * (depth + 1) // 2 + 1)]
    expected = {(p, q) for p in range(1, depth + 1) for q in range(1, depth + 1) if p + q <= depth + 1}
    assert set(terms) == expected
    assert len(set(terms)) == len(terms)
    sums = [p + q for p, q in terms]
    assert sums == sorted(sums)
    for (p1, q1), (p2, q2) in zip(terms, terms[1:]):
        if p1 + q1 == p2 + q2:
            assert abs(p1 - p2) == abs(q1 - q2) == 1


def test_cantor_fraction_zigzags():
    assert cantor_fraction(2) == cantor_fraction(3)[::-1]


def test_cantor_fraction_rejects_zero():
    with pytest.raises(ValueError):
        cantor_fraction(0)