import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpalgos.heap import MinHeap


@given(st.lists(st.integers()))
def test_pops_in_sorted_order(values):
    heap = MinHeap()
    for v in values:
        heap.push(v)
    assert len(heap) == len(values)
    popped = [heap.pop() for _ in range(len(values))]
    assert popped == sorted(values)
    assert len(heap) == 0


@given(st.lists(st.integers(), min_size=1))
def test_top_is_minimum(values):
    heap = MinHeap()
    for v in values:
        heap.push(v)
        assert heap.top() == min(values[: values.index(v) + 1]) or heap.top() <= v
    assert heap.top() == min(values)
    assert len(heap) == len(values)


def test_interleaved_operations():
    heap = MinHeap()
    heap.push(5)
    heap.push(3)
    assert heap.pop() == 3
    heap.push(4)
    heap.push(1)
    assert heap.top() == 1
    assert [heap.pop() for _ in range(3)] == [1, 4, 5]


def test_empty_heap_errors():
    heap = MinHeap()
    with pytest.raises(IndexError):
        heap.top()
    with pytest.raises(IndexError):
        heap.pop()