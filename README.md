# judgekit

A small library of solutions to well-known online-judge exercises, written as
plain Python functions that take Python values and return Python values.
Invalid input raises `ValueError`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `judgekit.greedy` – greedy problems: `min_product_sum`, `membership`,
  `min_coin_count`, `total_wait_time`, `min_expression_value`,
  `sick_knight_visits`, `max_meetings`, `max_rope_weight`.
- `judgekit.maxheap` – `MaxHeap` with `push`, `pop` and `len()`, plus
  `process_commands`, which pushes every non-zero number and pops on each zero,
  returning the popped values. Popping an empty heap gives `0`.
- `judgekit.primes` – `sieve`, `goldbach_partition`, `count_primes_between`,
  `factorize`, `count_primes`, `nth_erased`.
- `judgekit.arithmetic` – number puzzles: `trailing_factorial_zeros`,
  `reduce_ratio`, `gcd_lcm`, `repunit_length`, `warp_operations`,
  `snail_days`, `break_even_point`, `almost_common_multiple`,
  `smallest_generator`, `max_distinct_summands`, `number_from_divisors`,
  `stick_count`, `count_zero_digits`, `sequence_range_sum`,
  `verification_digit`, `complement_fraction`, `next_in_sequence`,
  `cantor_fraction`.
- `judgekit.text` – `common_pattern`, `is_palindrome`, `sort_words`,
  `sort_digits_desc`, `best_seller`, `reversed_max`.
- `judgekit.sequences` – `count_overtakers`, `infected_count`,
  `max_cut_height`, `nth_largest`, `third_largest`, `best_five`,
  `cheapest_strings`.

## Example

```python
from judgekit.greedy import min_product_sum
from judgekit.maxheap import MaxHeap

print(min_product_sum([1, 1, 1, 6, 0], [2, 7, 8, 3, 1]))  # 18

heap = MaxHeap()
for value in (3, 9, 4):
    heap.push(value)
print(heap.pop(), len(heap))  # 9 2
```

## Command line

The package installs a `judgekit` command that reads whitespace-separated
integers from standard input and prints the answer:

```
judgekit --help
```

Subcommands:

- `judgekit maxheap` – a count, then that many numbers; each non-zero number is
  pushed and each zero pops and prints the largest value (`0` if empty).
- `judgekit goldbach` – a count, then that many even numbers; prints the
  Goldbach partition with the closest primes for each, smaller prime first.
- `judgekit best-five` – eight scores; prints the total of the five best and,
  on the next line, their problem numbers in ascending order.

For example:

```
printf '5 3 0 7 0 0\n' | judgekit maxheap
```

prints `3`, `7` and `0` on separate lines. Malformed input is reported on
standard error and the command exits with status 1.

The other problems are available only as library functions; the command line
covers just the three subcommands above.