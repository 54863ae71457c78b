"""Place ships with row, column and diagonal attack ranges so none can hit another."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

Cell = tuple[int, int]

NO_PLACEMENT = "No valid placement found!"


@dataclass(frozen=True)
class Ship:
    """A ship and how far it reaches along its row, its column and its diagonals."""

    row_attack: int = 0
    column_attack: int = 0
    diagonal_attack: int = 0

    def _attacks(self, origin: Cell, target: Cell) -> bool:
        row, col = origin
        other_row, other_col = target
        if origin == target:
            return True
        row_diff = abs(row - other_row)
        col_diff = abs(col - other_col)
        if row == other_row and col_diff <= self.row_attack:
            return True
        if col == other_col and row_diff <= self.column_attack:
            return True
        return row_diff == col_diff and row_diff <= self.diagonal_attack


class BattleshipPlacement:
    """Backtracking search for a board position for every ship."""

    def __init__(self, rows: int, cols: int, ships: Iterable[Ship]) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("board dimensions must not be negative")
        self.rows = rows
        self.cols = cols
        self.ships: tuple[Ship, ...] = tuple(ships)

    def _is_safe(self, ship: Ship, cell: Cell, placed: Sequence[Cell]) -> bool:
        return not any(
            ship._attacks(cell, other) or self.ships[index]._attacks(other, cell)
            for index, other in enumerate(placed)
        )

    def solve(self) -> list[Cell] | None:
        """Return one position per ship, in ship order, or None if none exists.

        Cells are tried row by row, left to right, so the first placement found
        in that order is the one returned.
        """
        placed: list[Cell] = []
        cells = [(row, col) for row in range(self.rows) for col in range(self.cols)]

        def place(index: int) -> bool:
            if index == len(self.ships):
                return True
            ship = self.ships[index]
            for cell in cells:
                if self._is_safe(ship, cell, placed):
                    placed.append(cell)
                    if place(index + 1):
                        return True
                    placed.pop()
            return False

        return list(placed) if place(0) else None

    def render(self, placement: Sequence[Cell] | None) -> str:
        """Draw the board: '.' for empty cells, the 1-based ship number otherwise."""
        if not placement:
            return NO_PLACEMENT
        board = [["."] * self.cols for _ in range(self.rows)]
        for number, (row, col) in enumerate(placement, start=1):
            if not (0 <= row < self.rows and 0 <= col < self.cols):
                raise ValueError(f"position {(row, col)} lies outside the board")
            board[row][col] = str(number)
        return "\n".join(" ".join(line) for line in board)