import pytest
from hypothesis import given, strategies as st

from cpalgos.digit_dp import count_windy, count_windy_between, count_windy_recursive


def test_first_ten():
    assert count_windy_between(1, 10) == 9


def test_twenty_five_to_fifty():
    assert count_windy_between(25, 50) == 20


def test_single_digits_all_windy():
    assert count_windy(9) == 9
    assert count_windy_recursive(9) == 9


@pytest.mark.parametrize("limit", [0, -1, -100])
def test_non_positive_limit(limit):
    assert count_windy(limit) == 0
    assert count_windy_recursive(limit) == 0


def test_between_rejects_reversed_range():
    with pytest.raises(ValueError):
        count_windy_between(10, 1)


@given(st.integers(min_value=0, max_value=10**15))
def test_both_methods_agree(limit):
    assert count_windy(limit) == count_windy_recursive(limit)


@given(st.integers(min_value=1, max_value=10**9))
def test_monotone(limit):
    assert count_windy(limit) >= count_windy(limit - 1)
    assert count_windy(limit) - count_windy(limit - 1) in (0, 1)


@given(st.integers(min_value=1, max_value=10**6), st.integers(min_value=0, max_value=10**6))
def test_between_splits(low, extra):
    high = low + extra
    mid = low + extra // 2
    assert count_windy_between(low, high) == (
        count_windy_between(low, mid) + (count_windy_between(mid + 1, high) if mid < high else 0)
    )