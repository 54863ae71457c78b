"""Path searches over grids of open (1) and blocked (0) cells."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence

Grid = Sequence[Sequence[int]]
Cell = tuple[int, int]

# (row delta, column delta, step cost): four straight moves, then four diagonals.
_ASTAR_MOVES: tuple[tuple[int, int, float], ...] = (
    (-1, 0, 1.0),
    (1, 0, 1.0),
    (0, 1, 1.0),
    (0, -1, 1.0),
    (-1, 1, 1.414),
    (-1, -1, 1.414),
    (1, 1, 1.414),
    (1, -1, 1.414),
)

# Down, right, up, left.
_ROUTE_MOVES: tuple[Cell, ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))

# Down, up, right, left.
_COUNT_MOVES: tuple[Cell, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))

# Letters in the order the maze walker tries them.
_RAT_MOVES: tuple[tuple[str, int, int], ...] = (
    ("D", 1, 0),
    ("L", 0, -1),
    ("R", 0, 1),
    ("U", -1, 0),
)


class PathfindingError(ValueError):
    """Raised when a search is asked for with an unusable start or goal."""


def _shape(grid: Grid) -> tuple[int, int]:
    rows = len(grid)
    return rows, (len(grid[0]) if rows else 0)


def _inside(cell: Cell, rows: int, cols: int) -> bool:
    row, col = cell
    return 0 <= row < rows and 0 <= col < cols


def _open(grid: Grid, cell: Cell) -> bool:
    return grid[cell[0]][cell[1]] == 1


def _require_inside(cell: Cell, rows: int, cols: int, what: str) -> None:
    if not _inside(cell, rows, cols):
        raise PathfindingError(f"invalid {what} position {cell}")


def _heuristic(cell: Cell, goal: Cell) -> float:
    return math.hypot(cell[0] - goal[0], cell[1] - goal[1])


def _trace(parents: dict[Cell, Cell], goal: Cell) -> list[Cell]:
    path = [goal]
    cell = goal
    while parents[cell] != cell:
        cell = parents[cell]
        path.append(cell)
    path.reverse()
    return path


def astar_search(grid: Grid, start: Cell, goal: Cell) -> list[Cell] | None:
    """Find a path from start to goal with eight-way A* search.

    Returns the cells of the path from start to goal inclusive, or None when
    the goal cannot be reached. Raises PathfindingError when start or goal lie
    outside the grid or on a blocked cell.
    """
    start, goal = tuple(start), tuple(goal)
    rows, cols = _shape(grid)
    _require_inside(start, rows, cols, "start")
    _require_inside(goal, rows, cols, "goal")
    if not _open(grid, start) or not _open(grid, goal):
        raise PathfindingError("start or goal is blocked")
    if start == goal:
        return [start]

    g_cost: dict[Cell, float] = {start: 0.0}
    f_cost: dict[Cell, float] = {start: 0.0}
    parents: dict[Cell, Cell] = {start: start}
    visited: set[Cell] = set()

    open_heap: list[tuple[float, Cell]] = [(0.0, start)]
    queued: set[tuple[float, Cell]] = {(0.0, start)}

    while open_heap:
        entry = heapq.heappop(open_heap)
        queued.discard(entry)
        _, current = entry
        visited.add(current)
        row, col = current

        for d_row, d_col, step in _ASTAR_MOVES:
            neighbour = (row + d_row, col + d_col)
            if not _inside(neighbour, rows, cols):
                continue
            if neighbour == goal:
                parents[neighbour] = current
                return _trace(parents, goal)
            if neighbour in visited or not _open(grid, neighbour):
                continue
            new_g = g_cost[current] + step
            new_f = new_g + _heuristic(neighbour, goal)
            if new_f < f_cost.get(neighbour, math.inf):
                candidate = (new_f, neighbour)
                if candidate not in queued:
                    heapq.heappush(open_heap, candidate)
                    queued.add(candidate)
                f_cost[neighbour] = new_f
                g_cost[neighbour] = new_g
                parents[neighbour] = current

    return None


def longest_path_length(grid: Grid, start: Cell, end: Cell) -> int:
    """Length of the longest simple four-way route from start to end.

    Returns -1 when the grid is empty or either endpoint is blocked, and 0 when
    the end cannot be reached (or equals the start).
    """
    if not grid:
        return -1
    start, end = tuple(start), tuple(end)
    rows, cols = _shape(grid)
    _require_inside(start, rows, cols, "start")
    _require_inside(end, rows, cols, "end")
    if not _open(grid, start) or not _open(grid, end):
        return -1

    visited: set[Cell] = set()
    best = 0

    def explore(cell: Cell, distance: int) -> None:
        nonlocal best
        if cell == end:
            best = max(best, distance)
            return
        visited.add(cell)
        row, col = cell
        for d_row, d_col in _ROUTE_MOVES:
            neighbour = (row + d_row, col + d_col)
            if (
                _inside(neighbour, rows, cols)
                and _open(grid, neighbour)
                and neighbour not in visited
            ):
                explore(neighbour, distance + 1)
        visited.discard(cell)

    explore(start, 0)
    return best


def count_unique_paths(maze: Grid, start: Cell, end: Cell) -> int:
    """Count the simple four-way routes from start to end through open cells."""
    if not maze:
        return 0
    start, end = tuple(start), tuple(end)
    rows, cols = _shape(maze)
    _require_inside(start, rows, cols, "start")
    _require_inside(end, rows, cols, "end")
    if not _open(maze, start) or not _open(maze, end):
        return 0

    visited: set[Cell] = set()

    def explore(cell: Cell) -> int:
        if cell == end:
            return 1
        visited.add(cell)
        row, col = cell
        total = 0
        for d_row, d_col in _COUNT_MOVES:
            neighbour = (row + d_row, col + d_col)
            if (
                _inside(neighbour, rows, cols)
                and neighbour not in visited
                and _open(maze, neighbour)
            ):
                total += explore(neighbour)
        visited.discard(cell)
        return total

    return explore(start)


def rat_in_maze(maze: Grid) -> list[str]:
    """All routes from the top-left to the bottom-right of a square maze.

    Each route is a string of moves D, L, R and U; the list is sorted.
    """
    n = len(maze)
    if n == 0 or maze[0][0] == 0 or maze[n - 1][n - 1] == 0:
        return []

    target = (n - 1, n - 1)
    visited: set[Cell] = set()
    routes: list[str] = []

    def walk(cell: Cell, moves: str) -> None:
        if cell == target:
            routes.append(moves)
            return
        visited.add(cell)
        row, col = cell
        for letter, d_row, d_col in _RAT_MOVES:
            neighbour = (row + d_row, col + d_col)
            if (
                _inside(neighbour, n, n)
                and _open(maze, neighbour)
                and neighbour not in visited
            ):
                walk(neighbour, moves + letter)
        visited.discard(cell)

    walk((0, 0), "")
    return sorted(routes)