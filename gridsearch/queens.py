"""All placements of n non-attacking queens on an n-by-n board."""

from __future__ import annotations


def n_queens(n: int) -> list[list[int]]:
    """Return every solution as the 1-based queen row for each column, in order."""
    if n < 0:
        raise ValueError("board size must not be negative")

    solutions: list[list[int]] = []
    board: list[int] = []
    used_rows: set[int] = set()
    rising: set[int] = set()
    falling: set[int] = set()

    def place(col: int) -> None:
        if col > n:
            solutions.append(list(board))
            return
        for row in range(1, n + 1):
            if row in used_rows or row + col in rising or row - col in falling:
                continue
            used_rows.add(row)
            rising.add(row + col)
            falling.add(row - col)
            board.append(row)
            place(col + 1)
            board.pop()
            used_rows.discard(row)
            rising.discard(row + col)
            falling.discard(row - col)

    place(1)
    return solutions