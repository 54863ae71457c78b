"""Command line front end for the grid searches."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from gridsearch.battleship import BattleshipPlacement, Ship
from gridsearch.pathfinding import PathfindingError, astar_search
from gridsearch.queens import n_queens

DEMO_GRID: tuple[tuple[int, ...], ...] = (
    (1, 0, 1, 1, 1, 1, 0, 1, 1, 1),
    (1, 1, 1, 0, 1, 1, 1, 0, 1, 1),
    (1, 1, 1, 0, 1, 1, 0, 1, 0, 1),
    (0, 0, 1, 0, 1, 0, 0, 0, 0, 1),
    (1, 1, 1, 0, 1, 1, 1, 0, 1, 0),
    (1, 0, 1, 1, 1, 1, 0, 1, 0, 0),
    (1, 0, 0, 0, 0, 1, 0, 0, 0, 1),
    (1, 0, 1, 1, 1, 1, 0, 1, 1, 1),
    (1, 1, 1, 0, 0, 0, 1, 0, 0, 1),
)

_BATTLESHIP_CASES = (
    ("Test Case 1", 5, 5, [Ship(1, 1, 1), Ship(1, 1, 1)], "Cannot place all ships!"),
    (
        "Test Case 2",
        4,
        4,
        [Ship(2, 1, 1), Ship(1, 2, 1), Ship(1, 1, 2)],
        "Cannot place all ships!",
    ),
    (
        "Test Case 3: Impossible case",
        3,
        3,
        [Ship(5, 5, 5)] * 3,
        "Cannot place all ships! (Attack ranges too large)",
    ),
    (
        "Test Case 4: Example from problem",
        10,
        10,
        [Ship(3, 3, 2), Ship(2, 2, 2)],
        "Cannot place all ships!",
    ),
)


def _run_astar(args: argparse.Namespace) -> int:
    start, goal = tuple(args.start), tuple(args.goal)
    try:
        path = astar_search(DEMO_GRID, start, goal)
    except PathfindingError as error:
        print(error)
        return 1
    if path is None:
        print("No path found to the goal")
        return 1
    if len(path) == 1:
        print("Already at the goal")
        return 0
    print("Goal reached!")
    print()
    print("Shortest Path: " + " ".join(f"-> ({r},{c})" for r, c in path))
    return 0


def _run_battleship(_: argparse.Namespace) -> int:
    for number, (title, rows, cols, ships, failure) in enumerate(_BATTLESHIP_CASES):
        if number:
            print()
        print(f"=== {title} ===")
        solver = BattleshipPlacement(rows, cols, ships)
        placement = solver.solve()
        if placement is None:
            print(failure)
            continue
        print("Valid placement found:")
        for index, (row, col) in enumerate(placement, start=1):
            print(f"Ship {index} at position ({row}, {col})")
        print()
        print("Board visualization:")
        print(solver.render(placement))
    return 0


def _run_queens(args: argparse.Namespace) -> int:
    if args.n < 0:
        print("board size must not be negative")
        return 1
    for solution in n_queens(args.n):
        print("[" + " ".join(map(str, solution)) + "]")
    return 0


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridsearch", description="Grid search puzzles."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    astar = commands.add_parser("astar", help="A* search on the built-in grid")
    astar.add_argument("--start", nargs=2, type=int, default=[8, 0],
                       metavar=("ROW", "COL"))
    astar.add_argument("--goal", nargs=2, type=int, default=[0, 0],
                       metavar=("ROW", "COL"))
    astar.set_defaults(handler=_run_astar)

    battle = commands.add_parser("battleship", help="run the ship placement cases")
    battle.set_defaults(handler=_run_battleship)

    queens = commands.add_parser("queens", help="list all n-queens solutions")
    queens.add_argument("n", nargs="?", type=int, default=4)
    queens.set_defaults(handler=_run_queens)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named in ``argv`` and return its exit status."""
    args = _parser().parse_args(argv)
    return args.handler(args)