"""Magnet puzzle: fill dominoes with +/- poles or blanks to meet row and column counts."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

Board = list[list[str]]

_PATTERNS = ("+-", "-+", "xx")


def _unconstrained(value: int | None) -> bool:
    return value is None or value == -1


def check_constraints(
    board: Sequence[Sequence[str]],
    top: Sequence[int | None],
    bottom: Sequence[int | None],
    left: Sequence[int | None],
    right: Sequence[int | None],
) -> bool:
    """Check pole counts against the puzzle's edges.

    ``top`` and ``bottom`` give the number of '+' and '-' cells per column,
    ``left`` and ``right`` the number of '+' and '-' cells per row; -1 or None
    leaves a count free.
    """
    if not board:
        raise ValueError("board must not be empty")
    columns = list(zip(*board))
    if len(left) != len(board) or len(right) != len(board):
        raise ValueError("left and right need one entry per row")
    if len(top) != len(columns) or len(bottom) != len(columns):
        raise ValueError("top and bottom need one entry per column")

    for row, plus, minus in zip(board, left, right):
        if not _unconstrained(plus) and row.count("+") != plus:
            return False
        if not _unconstrained(minus) and row.count("-") != minus:
            return False
    for column, plus, minus in zip(columns, top, bottom):
        if not _unconstrained(plus) and column.count("+") != plus:
            return False
        if not _unconstrained(minus) and column.count("-") != minus:
            return False
    return True


def _fits_horizontal(grid: Board, i: int, j: int, pattern: str) -> bool:
    first, second = pattern
    cols = len(grid[0])
    if j > 0 and grid[i][j - 1] == first:
        return False
    if i > 0 and grid[i - 1][j] == first:
        return False
    if i > 0 and grid[i - 1][j + 1] == second:
        return False
    return not (j + 2 < cols and grid[i][j + 2] == second)


def _fits_vertical(grid: Board, i: int, j: int, pattern: str) -> bool:
    first = pattern[0]
    cols = len(grid[0])
    if j > 0 and grid[i][j - 1] == first:
        return False
    if i > 0 and grid[i - 1][j] == first:
        return False
    return not (j + 1 < cols and grid[i][j + 1] == first)


def _validate(board: Sequence[Sequence[str]]) -> Board:
    grid = [list(row) for row in board]
    if not grid or not grid[0]:
        raise ValueError("board must not be empty")
    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("board rows must all be the same length")
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == "L" and (j + 1 >= cols or row[j + 1] != "R"):
                raise ValueError(f"'L' at {(i, j)} has no 'R' to its right")
            if cell == "T" and (i + 1 >= len(grid) or grid[i + 1][j] != "B"):
                raise ValueError(f"'T' at {(i, j)} has no 'B' below it")
    return grid


def solve_magnets(
    board: Sequence[Sequence[str]],
    top: Sequence[int | None],
    bottom: Sequence[int | None],
    left: Sequence[int | None],
    right: Sequence[int | None],
) -> Iterator[Board]:
    """Yield every filling of the board that meets the edge counts.

    The board marks horizontal dominoes with 'L' and 'R' and vertical ones with
    'T' and 'B'. Each domino becomes '+-', '-+' or 'xx'; the input is not changed.
    """
    grid = _validate(board)
    check_constraints(grid, top, bottom, left, right)
    rows, cols = len(grid), len(grid[0])

    def place(i: int, j: int) -> Iterator[Board]:
        if i == rows:
            if check_constraints(grid, top, bottom, left, right):
                yield [list(row) for row in grid]
            return
        if j >= cols:
            yield from place(i + 1, 0)
            return
        cell = grid[i][j]
        if cell == "L":
            for pattern in _PATTERNS:
                if pattern == "xx" or _fits_horizontal(grid, i, j, pattern):
                    grid[i][j], grid[i][j + 1] = pattern
                    yield from place(i, j + 2)
                    grid[i][j], grid[i][j + 1] = "L", "R"
        elif cell == "T":
            for pattern in _PATTERNS:
                if pattern == "xx" or _fits_vertical(grid, i, j, pattern):
                    grid[i][j], grid[i + 1][j] = pattern
                    yield from place(i, j + 1)
                    grid[i][j], grid[i + 1][j] = "T", "B"
        else:
            yield from place(i, j + 1)

    return place(0, 0)


def format_magnets(solution: Sequence[Sequence[str]]) -> str:
    """Render a solution as nested bracketed rows of quoted cells."""
    rows = "".join(
        "[" + "".join(f"'{cell}', " for cell in row) + "]" for row in solution
    )
    return f"[{rows}]"