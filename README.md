# problemset

Solutions to a collection of short programming exercises: string puzzles,
text-art patterns, number puzzles, list statistics and small simulations.
Each exercise is available as a plain Python function, and every exercise
can also be run from the command line on input in that exercise's format.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Command line

The `problemset` command takes an exercise number, reads that exercise's
input from standard input and prints the answer in the format the exercise
expects:

```
echo "3 15 7 9" | problemset 1098
```

prints

```
FizzBuzz
7
Fizz
```

An exercise number that is not known is rejected by the argument parser.
Input that runs out early or holds a non-number where a number is expected
is reported on standard error, and the command exits with status 1.

The known exercise numbers are returned by `problemset.cli.problem_ids()`:
1001, 1016, 1040, 1043, 1054, 1084, 1085, 1088, 1089, 1098, 1106, 1116,
1156, 1158, 1163, 1164, 1175, 1193, 1194, 1195, 1201, 1207, 1208, 1209,
1228, 1230, 1231, 1236, 1237, 1253, 1262, 1275, 1287, 1292, 1303, 1311,
1348, 1363, 1408, 1423, 1425, 1432, 1437, 1439, 1440, 1452, 1453 and 1454.
Exercises 1423 and 1432 share the same solution.

## Library use

The functions are grouped by theme.

- `problemset.text`: `strip_char`, `brackets_balanced`, `swap_pair`,
  `ip_to_binary`, `is_palindrome_in_some_base`, `grid_contains_word`,
  `score_sentence`, `grade` and `toggle_case`.
- `problemset.patterns`: `secret_map`, `hollow_box`, `zigzag_frame`,
  `butterfly`, `letter_pyramid`, `cup`, `star_arrow` and `letter_tent`.
  Each returns the pattern as a list of lines without newlines.
- `problemset.arith`: `speed_report`, `shift_left`, `fizzbuzz`,
  `sum_multiples_of_seven`, `classify_quadratic`, `triangle_area`,
  `solve_quadratic`, `range_sum`, `is_finite_decimal`, `collatz_steps`,
  `collatz_length`, `collatz_range_extremes`, `collatz_range_max`,
  `prime_sieve`, `sexy_prime_triplets` and `swap_bits`.
- `problemset.sequences`: `spread_verdict`, `sum_verdict`, `count_signs`,
  `score_verdict`, `extremes`, `largest_triangle_perimeter`,
  `distinct_sorted`, `count_above_average`, `count_fixed_positions` and
  `is_consecutive`.
- `problemset.simulations`: the `IntStack` class (`push`, `pop`, `size`,
  `clear`), `run_stack_commands`, `weeks_to_afford`, `days_to_save`,
  `days_to_afford`, `cooking_schedule`, `bus_plan` and `bingo_lines`.

Invalid arguments raise `ValueError` (for example `collatz_steps(0)`,
`is_finite_decimal(1, 0)` or a board that is not 5 by 5 in `bingo_lines`);
popping an empty `IntStack` raises `IndexError`.

```python
from problemset.arith import fizzbuzz, sexy_prime_triplets
from problemset.patterns import star_arrow
from problemset.text import brackets_balanced

fizzbuzz(15)               # "FizzBuzz"
brackets_balanced("([])")  # True
star_arrow(2)              # ["*", "**", "*"]
sexy_prime_triplets(1, 30) # [(5, 11, 17), (7, 13, 19), (11, 17, 23), (17, 23, 29)]
```

Some functions keep the exact quirks of their exercise: `brackets_balanced`
treats any character that is not a closing bracket as an opener,
`solve_quadratic` computes each root as `(-b ± sqrt(d)) / 2 * a`, and
`bingo_lines` judges the main diagonal on its first four cells only.

To run a whole exercise on its input text from Python, use
`problemset.cli.solve(problem, text)`, which returns the printed output as a
string and raises `ValueError` for an unknown exercise or malformed input.

## Tests

```
pip install .[test]
pytest
```