"""Grid pathfinding, backtracking puzzles and small recursive and combinatorial helpers."""

__version__ = "0.1.0"