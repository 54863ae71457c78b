import pytest

from gridsearch.recursion import (
    array_sum,
    count_up,
    evenly_divides,
    factorial,
    pivot_index,
    power,
    remove_consecutive_duplicates,
    reverse_exponentiation,
    reverse_number,
    tower_of_hanoi_moves,
)


def test_reverse_number_value():
    assert reverse_number(123) == 321


@pytest.mark.parametrize("n", [1, 7, 12, 98765, 1002003])
def test_reverse_number_round_trip(n):
    assert reverse_number(reverse_number(n)) == n


def test_reverse_number_non_positive():
    assert reverse_number(0) == 0
    assert reverse_number(-45) == 0


@pytest.mark.parametrize("base,exp", [(2, 10), (3, 0), (-3, 5), (7, 13), (0, 4)])
def test_power_matches_builtin(base, exp):
    assert power(base, exp) == base**exp


def test_power_negative_exponent():
    with pytest.raises(ValueError):
        power(2, -1)


@pytest.mark.parametrize("n", [2, 12, 21])
def test_reverse_exponentiation(n):
    assert reverse_exponentiation(n) == n ** reverse_number(n)


def test_count_up():
    assert count_up(5) == list(range(1, 6))
    with pytest.raises(ValueError):
        count_up(0)


def test_array_sum():
    values = [4, -2, 9]
    assert array_sum(values) == sum(values)
    assert array_sum([]) == 0


def test_evenly_divides_value():
    assert evenly_divides(12) == 2


def test_evenly_divides_bounds():
    for n in (1012, 2446, 23, 9, 100):
        assert 0 <= evenly_divides(n) <= len(str(n))
    assert evenly_divides(0) == 0
    assert evenly_divides(111) == len("111")


def test_factorial_recurrence():
    assert factorial(0) == 1
    assert factorial(1) == 1
    for n in range(2, 15):
        assert factorial(n) == n * factorial(n - 1)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-3)


def test_pivot_index_property():
    values = [1, 7, 3, 6, 5, 6]
    index = pivot_index(values)
    assert index >= 0
    assert sum(values[:index]) == sum(values[index + 1 :])


def test_pivot_index_none():
    assert pivot_index([1, 2, 3]) == -1


def test_remove_consecutive_duplicates():
    assert remove_consecutive_duplicates("aabbbcc") == "abc"
    assert remove_consecutive_duplicates("") == ""


def test_remove_consecutive_duplicates_invariants():
    result = remove_consecutive_duplicates("xxyzzzyyxa")
    assert all(a != b for a, b in zip(result, result[1:]))
    assert remove_consecutive_duplicates(result) == result


def test_tower_of_hanoi_recurrence():
    assert tower_of_hanoi_moves(1) == 1
    for n in range(2, 12):
        assert tower_of_hanoi_moves(n) == 2 * tower_of_hanoi_moves(n - 1) + 1


def test_tower_of_hanoi_no_discs():
    with pytest.raises(ValueError):
        tower_of_hanoi_moves(0)