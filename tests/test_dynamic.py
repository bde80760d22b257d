import pytest

from judgekit.dynamic import (
    count_sums_123,
    fibonacci_calls,
    min_operations_to_one,
    min_square_terms,
    padovan,
    range_sums,
    tilings_2xn,
    tilings_2xn_with_squares,
)


def test_fibonacci_calls_base_cases():
    assert fibonacci_calls(0) == (1, 0)
    assert fibonacci_calls(1) == (0, 1)


@pytest.mark.parametrize("n", range(2, 41))
def test_fibonacci_calls_recurrence(n):
    zeros, ones = fibonacci_calls(n)
    previous = fibonacci_calls(n - 1)
    before = fibonacci_calls(n - 2)
    assert zeros == previous[0] + before[0]
    assert ones == previous[1] + before[1]
    assert zeros == previous[1]


def test_fibonacci_calls_limits():
    with pytest.raises(ValueError):
        fibonacci_calls(41)
    with pytest.raises(ValueError):
        fibonacci_calls(-1)


def test_tilings_2xn_base_values():
    assert [tilings_2xn(n) for n in (0, 1, 2)] == [0, 1, 2]


@pytest.mark.parametrize("n", [3, 10, 100, 999, 1000])
def test_tilings_2xn_recurrence(n):
    value = tilings_2xn(n)
    assert 0 <= value < 10007
    assert value == (tilings_2xn(n - 1) + tilings_2xn(n - 2)) % 10007


def test_tilings_2xn_with_squares_base_values():
    assert [tilings_2xn_with_squares(n) for n in (0, 1, 2)] == [0, 1, 3]


@pytest.mark.parametrize("n", [3, 12, 500, 1000])
def test_tilings_2xn_with_squares_recurrence(n):
    value = tilings_2xn_with_squares(n)
    assert 0 <= value < 10007
    expected = (tilings_2xn_with_squares(n - 1) + 2 * tilings_2xn_with_squares(n - 2)) % 10007
    assert value == expected


def test_tilings_limits():
    with pytest.raises(ValueError):
        tilings_2xn(1001)
    with pytest.raises(ValueError):
        tilings_2xn_with_squares(-1)


def test_min_operations_small_values():
    assert [min_operations_to_one(n) for n in (1, 2, 3)] == [0, 1, 1]


@pytest.mark.parametrize("k", range(1, 10))
def test_min_operations_powers_of_three(k):
    assert min_operations_to_one(3**k) == k


def test_min_operations_never_worse_than_decrement():
    for n in range(2, 200):
        assert min_operations_to_one(n) <= min_operations_to_one(n - 1) + 1


def test_min_operations_rejects_zero():
    with pytest.raises(ValueError):
        min_operations_to_one(0)


@pytest.mark.parametrize("root", [1, 2, 7, 100, 223])
def test_min_square_terms_perfect_squares(root):
    assert min_square_terms(root * root) == 1


def test_min_square_terms_within_four():
    assert all(1 <= min_square_terms(n) <= 4 for n in range(1, 300))
    assert min_square_terms(0) == 0


def test_min_square_terms_limit():
    with pytest.raises(ValueError):
        min_square_terms(50001)


def test_count_sums_123_base_values():
    assert [count_sums_123(n) for n in (0, 1, 2, 3)] == [0, 1, 2, 4]


@pytest.mark.parametrize("n", range(4, 12))
def test_count_sums_123_recurrence(n):
    expected = count_sums_123(n - 1) + count_sums_123(n - 2) + count_sums_123(n - 3)
    assert count_sums_123(n) == expected


def test_count_sums_123_limit():
    with pytest.raises(ValueError):
        count_sums_123(12)


def test_padovan_start():
    assert [padovan(n) for n in range(1, 6)] == [1, 1, 1, 2, 2]


@pytest.mark.parametrize("n", [6, 20, 60, 100])
def test_padovan_recurrence(n):
    assert padovan(n) == padovan(n - 1) + padovan(n - 5)


def test_padovan_limit():
    with pytest.raises(ValueError):
        padovan(101)


def test_range_sums_match_slices():
    values = [5, 4, 3, 2, 1, 1000, -7]
    queries = [(i, j) for i in range(1, 8) for j in range(i, 8)]
    assert range_sums(values, queries) == [sum(values[i - 1 : j]) for i, j in queries]


def test_range_sums_out_of_range():
    with pytest.raises(IndexError):
        range_sums([1, 2, 3], [(1, 4)])
    with pytest.raises(IndexError):
        range_sums([1, 2, 3], [(0, 2)])