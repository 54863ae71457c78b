import pytest

from gridsearch.cli import main
from gridsearch.queens import n_queens


def test_astar_default_route(capsys):
    assert main(["astar"]) == 0
    out = capsys.readouterr().out
    assert "Goal reached!" in out
    path_line = next(line for line in out.splitlines() if line.startswith("Shortest Path:"))
    steps = path_line.removeprefix("Shortest Path: ").split(" ")
    assert steps[1] == "(8,0)"
    assert steps[-1] == "(0,0)"


def test_astar_blocked_start(capsys):
    assert main(["astar", "--start", "0", "1"]) == 1
    assert "blocked" in capsys.readouterr().out


def test_astar_outside_grid(capsys):
    assert main(["astar", "--goal", "20", "0"]) == 1
    assert "invalid goal position" in capsys.readouterr().out


def test_astar_already_at_goal(capsys):
    assert main(["astar", "--start", "0", "0"]) == 0
    assert "Already at the goal" in capsys.readouterr().out


@pytest.mark.parametrize("n", [4, 5, 6])
def test_queens_prints_every_solution(capsys, n):
    assert main(["queens", str(n)]) == 0
    lines = capsys.readouterr().out.splitlines()
    solutions = n_queens(n)
    assert len(lines) == len(solutions)
    parsed = [[int(x) for x in line.strip("[]").split()] for line in lines]
    assert parsed == solutions


def test_queens_negative(capsys):
    assert main(["queens", "-3"]) == 1


def test_battleship_cases(capsys):
    assert main(["battleship"]) == 0
    out = capsys.readouterr().out
    assert "=== Test Case 1 ===" in out
    assert "=== Test Case 3: Impossible case ===" in out
    assert "Cannot place all ships! (Attack ranges too large)" in out
    assert out.count("Valid placement found:") == 3


def test_missing_command():
    with pytest.raises(SystemExit):
        main([])