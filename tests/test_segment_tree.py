import pytest
from hypothesis import given, strategies as st

from cpalgos.segment_tree import AlternatingRunTree, RangeAddSumTree


def test_range_add_example():
    tree = RangeAddSumTree([1, 5, 4, 2, 3])
    assert tree.sum(1, 4) == 11
    tree.add(1, 3, 2)
    assert tree.sum(2, 4) == 8
    tree.add(0, 5, 1)
    assert tree.sum(0, 4) == 20


def test_empty_range_sums_to_zero():
    tree = RangeAddSumTree([3, 4])
    assert tree.sum(1, 1) == 0


def test_out_of_bounds():
    tree = RangeAddSumTree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.sum(0, 4)
    with pytest.raises(IndexError):
        tree.add(2, 1, 5)


ops = st.lists(
    st.tuples(st.integers(0, 20), st.integers(0, 20), st.integers(-50, 50)), max_size=25
)


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=20), ops)
def test_matches_plain_list(values, operations):
    tree = RangeAddSumTree(values)
    model = list(values)
    n = len(values)
    for a, b, delta in operations:
        lo, hi = sorted((a % (n + 1), b % (n + 1)))
        tree.add(lo, hi, delta)
        for i in range(lo, hi):
            model[i] += delta
        assert tree.sum(lo, hi) == sum(model[lo:hi])
    assert tree.sum(0, n) == sum(model)


def test_initial_longest_is_one():
    assert AlternatingRunTree(6).longest() == 1


def test_alternating_pattern_spans_everything():
    tree = AlternatingRunTree(7)
    for i in range(1, 7, 2):
        tree.toggle(i)
    assert tree.longest() == 7


def test_toggle_out_of_range():
    tree = AlternatingRunTree(3)
    with pytest.raises(IndexError):
        tree.toggle(3)


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        AlternatingRunTree(0)


@given(st.integers(1, 30), st.lists(st.integers(0, 1000), max_size=30))
def test_bounds_and_undo(size, flips):
    tree = AlternatingRunTree(size)
    indices = [f % size for f in flips]
    for i in indices:
        tree.toggle(i)
        assert 1 <= tree.longest() <= size
    for i in reversed(indices):
        tree.toggle(i)
    assert tree.longest() == 1


@given(st.integers(2, 30))
def test_single_flip_in_zeros(size):
    tree = AlternatingRunTree(size)
    tree.toggle(size // 2)
    expected_span = min(3, size)
    if size // 2 == size - 1:
        expected_span = 2
    assert tree.longest() == expected_span