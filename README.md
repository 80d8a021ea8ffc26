# patsolve

A library of worked solutions to classic programming-contest exercises:
number formatting and radix puzzles, polynomial arithmetic, shortest paths,
graph connectivity, tree reconstruction, queue simulations, rankings and
more. Each exercise is a plain Python function (or a small class) that
takes ordinary Python values and returns a result, so the logic can be
reused, tested and explored without parsing contest-style input.

## Installation

```
pip install .
pip install ".[test]"   # adds pytest for running the tests
```

Python 3.10 or later is required; the only dependency is `sortedcontainers`.

## Modules

| Module | What it covers |
| --- | --- |
| `patsolve.numbers` | `format_sum`, `spell_digit_sum`, `find_radix`, `is_prime`, `is_reversible_prime`, `base_digits`, `palindrome_in_base`, `double_number`, `palindromic_steps`, `mars_color`, `shuffle_cards`, `count_ones`, `Money`, `prime_factors`, `format_factorization` |
| `patsolve.polynomials` | `add_polynomials`, `multiply_polynomials`, `format_polynomial` over `{exponent: coefficient}` dicts |
| `patsolve.roster` | `first_and_last`, `modify_password`, `modified_accounts_report`, `boys_vs_girls` |
| `patsolve.sequences` | `max_subsequence`, `elevator_time`, `world_cup_betting`, `median_of_two`, `magic_coupon`, `first_unique`, `shopping_in_mars`, `favorite_color_stripe`, `exit_distances`, `find_coins`, `dominant_color`, `mouse_ranks` |
| `patsolve.strings` | `u_shape`, `smallest_number`, `longest_palindrome`, `subtract_chars` |
| `patsolve.shortest_paths` | `emergency`, `bike_management`, `travel_plan` |
| `patsolve.connectivity` | `roads_to_repair`, `deepest_roots`, `find_gangs`, `DisconnectedGraphError` |
| `patsolve.trees` | `leaves_by_level`, `level_order`, `bst_postorder`, `paths_with_weight` |
| `patsolve.linked` | `common_suffix`, `is_pop_sequence`, `sort_linked_list`, `MedianStack` |
| `patsolve.bank` | `waiting_in_line`, `average_waiting_minutes` |
| `patsolve.table_tennis` | `simulate_tables`, returning `Serving` records and per-table counts |
| `patsolve.gas_station` | `cheapest_trip` |
| `patsolve.ranking` | `best_ranks`, `pat_ranking`, `sort_records`, `richest` |
| `patsolve.billing` | `call_charge`, `phone_bills`, `format_bills`, with `Call` and `Bill` |
| `patsolve.catalog` | `Book`, `Library` (`add`, `query`), `course_lists` |

## Examples

```python
from patsolve.numbers import Money, format_sum, mars_color, prime_factors
from patsolve.linked import MedianStack

format_sum(-1000000, 9)          # '-999,991'
mars_color(15, 43, 71)           # colour in base-13 "Mars" notation
prime_factors(97532468)          # list of (prime, exponent) pairs

total = Money.parse("3.2.1") + Money.parse("10.16.27")
print(total)                     # Galleon.Sickle.Knut

stack = MedianStack()
for n in (3, 1, 4, 1, 5):
    stack.push(n)
stack.peek_median()              # the ((N+1)//2)-th smallest value
stack.pop()                      # 5
len(stack)                       # 4
```

Graph and simulation exercises take their data as Python collections:

```python
from patsolve.shortest_paths import emergency

teams = [1, 2, 1, 5, 3]
roads = [(0, 1, 1), (0, 2, 2), (0, 3, 1), (1, 2, 1), (2, 4, 1), (3, 4, 1)]
emergency(teams, roads, 0, 2)    # (number of shortest routes, most teams gathered)
```

## When there is no answer

Some exercises have a natural "no answer" result, and those functions
return `None`: `find_radix`, `first_unique`, `find_coins`,
`common_suffix` and `bst_postorder`. Invalid input, such as an
out-of-range city or a malformed time, raises `ValueError`.
`patsolve.connectivity.deepest_roots` raises `DisconnectedGraphError`
(a `ValueError`) when the graph is not a single tree; its message reads
`Error: N components`. `MedianStack.pop` and `MedianStack.peek_median`
raise `IndexError` on an empty stack.

## What this package does not do

It has no command-line program and does not read or print contest-style
text input. Every exercise is a function to call from Python code; turning
standard input into arguments and results into output lines is left to the
caller (a few helpers, such as `format_polynomial`, `format_bills` and
`format_factorization`, produce the printable text).