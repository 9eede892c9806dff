import pytest

from dpkit.digits import count_interesting, count_no_equal_adjacent


def test_interesting_single_digits_all_count():
    assert count_interesting(1, 9) == 9


def test_interesting_worked_examples():
    assert count_interesting(91, 99) == 0
    assert count_interesting(451, 460) == 5


@pytest.mark.parametrize("a,mid,b", [(1, 50, 120), (10, 333, 1000), (7, 8, 9)])
def test_interesting_is_additive(a, mid, b):
    assert count_interesting(a, b) == count_interesting(a, mid) + count_interesting(
        mid + 1, b
    )


def test_interesting_zero_is_not_counted():
    assert count_interesting(0, 9) == count_interesting(1, 9)


@pytest.mark.parametrize("n", [10, 20, 100, 1000])
def test_interesting_numbers_with_zero_digit(n):
    assert count_interesting(n, n) == 1


def test_interesting_bounded_by_range_size():
    result = count_interesting(100, 999)
    assert 0 <= result <= 900


@pytest.mark.parametrize("a,b", [(-1, 5), (10, 3)])
def test_interesting_rejects_bad_range(a, b):
    with pytest.raises(ValueError):
        count_interesting(a, b)


def test_no_equal_adjacent_worked_example():
    assert count_no_equal_adjacent(123, 321) == 171


def test_no_equal_adjacent_single_digits():
    assert count_no_equal_adjacent(0, 9) == 10


@pytest.mark.parametrize("n", [11, 100, 1223, 5500])
def test_no_equal_adjacent_rejects_repeat(n):
    assert count_no_equal_adjacent(n, n) == 0


@pytest.mark.parametrize("n", [12, 101, 1212, 98765])
def test_no_equal_adjacent_accepts_alternating(n):
    assert count_no_equal_adjacent(n, n) == 1


@pytest.mark.parametrize("a,mid,b", [(0, 99, 1000), (123, 200, 321), (5, 5, 6)])
def test_no_equal_adjacent_is_additive(a, mid, b):
    assert count_no_equal_adjacent(a, b) == count_no_equal_adjacent(
        a, mid
    ) + count_no_equal_adjacent(mid + 1, b)


def test_no_equal_adjacent_two_digit_block():
    assert count_no_equal_adjacent(10, 99) == 90 - 9


def test_no_equal_adjacent_large_range_is_bounded():
    result = count_no_equal_adjacent(0, 10**18)
    assert 0 < result < 10**18


@pytest.mark.parametrize("a,b", [(-3, 4), (9, 2)])
def test_no_equal_adjacent_rejects_bad_range(a, b):
    with pytest.raises(ValueError):
        count_no_equal_adjacent(a, b)