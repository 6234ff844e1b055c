# sonarsweep

Solvers for the first twelve puzzles of a 2021 programming advent calendar.
Each day is a module under `sonarsweep` with plain functions you can call
from Python, and a command that reads a puzzle input on standard input and
prints the answers.

The package uses only the standard library.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

Every day has a command named `sonarsweep-day01` through `sonarsweep-day12`.
Pipe your puzzle input into it:

```
sonarsweep-day01 < input.txt
sonarsweep-day06 < input.txt
sonarsweep-day12 < input.txt
```

Each command prints the answer to the first part of the puzzle on one line
and the answer to the second part on the next. The exception is
`sonarsweep-day06`, which prints a single line: the number of lanternfish
after 256 days.

The commands take no options besides `--help`. When the input is malformed,
a command prints the error to standard error and exits with status 1.

## Library

| Module  | Puzzle                  | Main functions                                                    |
|---------|-------------------------|-------------------------------------------------------------------|
| `day01` | Sonar sweep             | `count_increases`, `measurement_windows`, `count_window_increases` |
| `day02` | Dive                    | `Position`, `parse_instructions`, `parse_aimed_instructions`       |
| `day03` | Binary diagnostic       | `BitCount`, `most_common_bit`, `least_common_bit`, `parse_report`, `calculate_rate`, `calculate_rating` |
| `day04` | Giant squid bingo       | `Cell`, `Board`, `parse_input`, `first_winning_score`, `last_winning_score` |
| `day05` | Hydrothermal venture    | `Line`, `parse_line`, `count_overlaps`                             |
| `day06` | Lanternfish             | `simulate_school`, `count_fish`                                    |
| `day07` | Treachery of whales     | `cheapest_linear_cost`, `cheapest_triangular_cost`                 |
| `day08` | Seven-segment search    | `count_unique_digits`, `decode_entry`, `decode_total`              |
| `day09` | Smoke basin             | `parse_grid`, `low_points`, `risk_sum`, `basin_sizes`              |
| `day10` | Syntax scoring          | `first_illegal_character`, `completion_score`, `syntax_error_score`, `middle_completion_score` |
| `day11` | Dumbo octopus           | `step`, `count_flashes`, `first_synchronised_step`                 |
| `day12` | Passage pathing         | `is_small`, `parse_caves`, `find_paths`, `find_paths_revisiting`   |

A short example:

```python
from sonarsweep.day01 import count_increases
from sonarsweep.day06 import count_fish
from sonarsweep.day10 import first_illegal_character

count_increases([199, 200, 208, 210, 200, 207, 240, 269, 260, 263])  # 7
count_fish([3, 4, 3, 1, 2], 256)  # 26984457539
first_illegal_character("[[<[([]))<([[{}[[()]]]")  # ")"
```

Some functions change their arguments in place:

- `first_winning_score` and `last_winning_score` in `day04` mark the boards
  they are given; parse the input again before scoring a second time.
- `step`, `count_flashes` and `first_synchronised_step` in `day11` update the
  grid they are given; pass a copy if you need the original.

`first_illegal_character` returns `None` for a line that is not corrupted.
`find_paths` and `find_paths_revisiting` return every path as a list of cave
names, starting at `start` and ending at `end`.

Malformed input raises `ValueError`.