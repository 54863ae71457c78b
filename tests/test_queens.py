import itertools

import pytest

from gridsearch.queens import n_queens


def _no_clash(solution):
    for (c1, r1), (c2, r2) in itertools.combinations(enumerate(solution, 1), 2):
        if r1 == r2 or abs(r1 - r2) == abs(c1 - c2):
            return False
    return True


def test_four_queens():
    assert n_queens(4) == [[2, 4, 1, 3], [3, 1, 4, 2]]


def test_eight_queens_count():
    assert len(n_queens(8)) == 92


def test_single_queen():
    assert n_queens(1) == [[1]]


@pytest.mark.parametrize("n", [2, 3])
def test_unsolvable_sizes(n):
    assert n_queens(n) == []


@pytest.mark.parametrize("n", [4, 5, 6, 7])
def test_solutions_are_valid_and_sorted(n):
    solutions = n_queens(n)
    assert solutions == sorted(solutions)
    assert len({tuple(s) for s in solutions}) == len(solutions)
    for solution in solutions:
        assert sorted(solution) == list(range(1, n + 1))
        assert _no_clash(solution)


def test_mirror_of_solution_is_solution():
    solutions = {tuple(s) for s in n_queens(6)}
    assert solutions
    for solution in solutions:
        assert tuple(reversed(solution)) in solutions


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        n_queens(-1)