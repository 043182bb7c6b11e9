# algosolve

Solutions to well-known algorithm exercises, each written as a plain Python
function that takes ordinary data (lists, tuples, strings, dicts) and returns
the answer.

## Modules

| Module | Functions |
| --- | --- |
| `algosolve.grid_regions` | `count_color_regions`, `count_cabbage_patches`, `house_complexes`, `count_paper_squares` |
| `algosolve.grid_paths` | `count_reachable_people`, `distances_to_target`, `shortest_maze_path`, `shortest_path_breaking_wall`, `rescue_time` |
| `algosolve.moves` | `robot_min_commands`, `knight_moves`, `hide_and_seek`, `hide_and_seek_weighted`, `snakes_and_ladders` |
| `algosolve.ripening` | `ripening_days`, `ripening_days_3d` |
| `algosolve.graphs` | `count_components`, `kevin_bacon`, `dfs_order` |
| `algosolve.searching` | `membership`, `count_in_ranges`, `max_cut_height`, `closest_to_zero_pair`, `compress_coordinates`, `merge_sorted`, `longest_two_kind_run` |
| `algosolve.structures` | `run_queue_commands`, `absolute_heap`, `max_heap`, `print_order`, `run_set_commands`, `count_buildings`, `pokedex_answers`, `lookup_passwords`, `outfit_combinations` |
| `algosolve.dynamic` | `tiling_count`, `min_square_terms`, `max_stair_score`, `padovan`, `max_adjacent_difference`, `min_team_gap` |
| `algosolve.greedy` | `min_coins`, `max_grouped_sum`, `min_level_decreases`, `latest_start`, `flatten_land`, `calendar_area` |
| `algosolve.numbers` | `trimmed_mean`, `statistics` (returns a `Statistics` dataclass), `primes_between`, `self_numbers` |
| `algosolve.passwords` | `has_vowel`, `has_no_triple`, `has_no_double`, `is_acceptable`, `verdict` |

## Conventions

- Grids are sequences of rows. Where cells are digits, rows may be given as
  strings such as `"0110"` or as lists of integers.
- Graph functions take the number of vertices (numbered from 1) and a list of
  `(u, v)` edges; `dfs_order` takes a mapping from vertex to neighbours.
- Where a target can turn out to be unreachable, the function returns `None`
  (for example `shortest_path_breaking_wall`, `rescue_time`, `knight_moves`,
  `ripening_days`, `latest_start`).
- Malformed input, such as ragged grids, positions off the board or unknown
  commands, raises `ValueError` (or `KeyError`/`IndexError` for missing
  lookups).

## Examples

```python
from algosolve.dynamic import padovan, tiling_count
from algosolve.greedy import min_coins
from algosolve.passwords import is_acceptable, verdict
from algosolve.structures import run_queue_commands

tiling_count(2)        # 3 ways to tile a 2x2 board
padovan(6)             # 3
min_coins([1, 5, 10, 50, 100, 500, 1000, 5000, 10000, 50000], 4200)  # 6
is_acceptable("a")     # True
verdict("a")           # '<a> is acceptable.'
run_queue_commands(["push 1", "push 2", "front", "back", "size", "pop"])  # [1, 2, 2, 1]
```

## What it does not do

There is no command-line program: nothing reads problem input from standard
input or prints answers. Each exercise is available only as a function to be
called with already-parsed data.

## Requirements

Python 3.10 or later. The package uses only the standard library; the test
suite uses pytest (`pip install algosolve[test]`).