# gridsearch

Search on small grids and boards, a few backtracking puzzles, and a handful
of recursive and combinatorial helpers. Pure Python, no dependencies beyond
the standard library.

## Modules

- `gridsearch.pathfinding`
  - `astar_search(grid, start, goal)`: eight-way A* search (straight steps
    cost 1, diagonal steps 1.414). Returns the list of cells from start to
    goal inclusive, `[start]` when start and goal are the same cell, or
    `None` when the goal cannot be reached.
  - `longest_path_length(grid, start, end)`: length of the longest simple
    four-way route. Returns `-1` for an empty grid or a blocked endpoint and
    `0` when the end cannot be reached.
  - `count_unique_paths(maze, start, end)`: number of simple four-way routes;
    `0` for an empty maze or a blocked endpoint.
  - `rat_in_maze(maze)`: every route from the top-left to the bottom-right
    corner of a square maze, as sorted strings of `D`, `L`, `R` and `U`.
  - `PathfindingError` (a `ValueError`) is raised when an endpoint lies
    outside the grid, and by `astar_search` also when an endpoint is blocked.
- `gridsearch.battleship`
  - `Ship(row_attack, column_attack, diagonal_attack)`: how far a ship reaches
    along its row, column and diagonals.
  - `BattleshipPlacement(rows, cols, ships)`: `solve()` returns one
    `(row, col)` per ship, in ship order, such that no ship attacks another,
    or `None`; `render(placement)` draws the board with `.` for empty cells
    and 1-based ship numbers.
- `gridsearch.magnets`
  - `solve_magnets(board, top, bottom, left, right)`: yields every filling of
    a board of dominoes (`L`/`R` horizontal, `T`/`B` vertical) with `+-`,
    `-+` or `xx` that meets the edge counts. `top`/`bottom` count `+`/`-` per
    column, `left`/`right` count `+`/`-` per row; `-1` or `None` leaves a
    count free. Malformed boards raise `ValueError`.
  - `check_constraints(board, top, bottom, left, right)`: checks a filled
    board against the counts.
  - `format_magnets(solution)`: renders a solution as bracketed rows of
    quoted cells.
- `gridsearch.queens`
  - `n_queens(n)`: every N-Queens solution, each listing, column by column,
    the 1-based row of its queen.
- `gridsearch.combinatorics`
  - `coin_change_count(coins, total)`, `is_subset_sum(values, target)`,
    `triplets_with_sum_limit(values, limit)` and `combine(n, k)`.
- `gridsearch.recursion`
  - `reverse_number`, `power`, `reverse_exponentiation`, `count_up`,
    `array_sum`, `evenly_divides`, `factorial`, `pivot_index`,
    `remove_consecutive_duplicates` and `tower_of_hanoi_moves`.

## Installation

```
pip install .
```

## Using it from Python

```python
from gridsearch.queens import n_queens
from gridsearch.combinatorics import coin_change_count, combine
from gridsearch.recursion import factorial

n_queens(4)                       # [[2, 4, 1, 3], [3, 1, 4, 2]]
coin_change_count([1, 2, 3], 4)   # 4
combine(4, 2)                     # [[1, 2], [1, 3], [1, 4], [2, 3], [2, 4], [3, 4]]
factorial(5)                      # 120
```

Grids are lists of lists in which `1` marks an open cell and `0` a wall;
cells are `(row, column)` pairs:

```python
from gridsearch.pathfinding import count_unique_paths

maze = [
    [1, 1, 1, 1],
    [1, 1, 0, 1],
    [0, 1, 0, 1],
    [1, 1, 1, 1],
]
count_unique_paths(maze, (0, 0), (3, 3))
```

## Command line

Installing the package provides a `gridsearch` command with three
subcommands:

```
gridsearch astar [--start ROW COL] [--goal ROW COL]
gridsearch battleship
gridsearch queens [N]
```

- `astar` runs A* search on a built-in 9×10 grid (default start `8 0`, goal
  `0 0`) and prints the path; it exits with status 1 for an invalid or
  blocked endpoint or when no path exists.
- `battleship` runs four built-in ship placement cases and prints each
  placement and board.
- `queens` prints every solution for an `N`×`N` board (default 4).

See `gridsearch --help` for details.

## Limits

The command line only covers the three demonstrations above. The `astar`
command always searches its built-in grid; there is no way to load a grid
from a file. Magnets, mazes, the combinatorial and the recursive routines are
available from Python only.

## Running the tests

```
pip install ".[test]"
pytest
```