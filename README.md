# judgekit

Solutions to classic online-judge problems as plain Python functions. Every
function takes ordinary Python values and returns its answer instead of
printing it; bad input raises `ValueError`, `IndexError` or `KeyError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `judgekit.mathematics` | `fizzbuzz_next`, `order_supplies` (returns a `SupplyOrder`), `nth_apocalypse_number`, `factorial_trailing_zeros`, `primes_between`, `sugar_bags` (returns `None` when no bag combination fits), `minimize_expression`, `trimmed_mean` |
| `judgekit.dynamic` | `fibonacci_calls`, `tilings_2xn`, `tilings_2xn_with_squares`, `min_operations_to_one`, `min_square_terms`, `count_sums_123`, `padovan`, `range_sums` |
| `judgekit.divide` | `z_order_index`, `count_paper_colors`, `min_chessboard_repaint` |
| `judgekit.graphs` | `count_worm_groups`, `count_components`, `dfs_order`, `bfs_order`, `hide_and_seek`, `infected_count` |
| `judgekit.sorting` | `sort_members` (returns `Member` tuples), `total_wait_time`, `sort_points_xy`, `sort_points_yx`, `sort_numbers`, `compress_coordinates`, `bulk_ranks`, `card_counts`, `membership`, `unheard_unseen` |
| `judgekit.searching` | `max_cable_length`, `max_cutter_height`, `flatten_ground` (returns a `Flattening` of time and height) |
| `judgekit.structures` | `zero_sum`, `josephus`, `last_card`, `min_heap_run`, `printer_queue_position`, `SmallSet` (a set of the integers 1 to 20), `is_balanced`, `is_vps` |
| `judgekit.lookups` | `Pokedex` (name-to-number and number-to-name lookup), `password_lookup`, `outfit_count` |

## Examples

```python
from judgekit.mathematics import factorial_trailing_zeros, sugar_bags
from judgekit.dynamic import min_operations_to_one, padovan
from judgekit.divide import z_order_index
from judgekit.structures import SmallSet, is_vps

factorial_trailing_zeros(10)   # 2
sugar_bags(18)                 # 4
min_operations_to_one(10)      # 3
padovan(12)                    # 16
z_order_index(2, 3, 1)         # 11
is_vps("(())())")              # False

s = SmallSet()
s.apply("add", 3)
s.apply("check", 3)            # True
s.apply("toggle", 3)
s.apply("check", 3)            # False
```

## Command line

Installing the package also installs a `judgekit` command. It takes the name
of a problem, reads whitespace-separated input from standard input and prints
the answer:

```
echo "7 3" | judgekit josephus
```

prints `<3, 6, 2, 7, 5, 1, 4>`.

| Problem | Input | Output |
| --- | --- | --- |
| `fizzbuzz` | three consecutive FizzBuzz words | the next word |
| `heap` | a count, then that many values | one line per popped minimum (0 when empty) |
| `josephus` | `n k` | the removal order as `<a, b, ...>` |
| `last-card` | `n` | the card left at the end |
| `parentheses` | a count, then that many strings | `YES` or `NO` per string |
| `primes` | `low high` | the primes in that range, one per line |
| `sums-123` | a count, then that many values of n | the number of ways for each |
| `zero-sum` | a count, then that many numbers | the final sum |

Malformed input prints a message starting with `judgekit:` on standard error
and exits with status 1.

## Limits

Only the problems listed above are available from the command line; every
other solution is reachable only by calling its function from Python.