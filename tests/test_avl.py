from bisect import bisect_left, bisect_right, insort

import pytest
from hypothesis import given, strategies as st

from cpalgos.avl import AVLTree


def _height_checked(node):
    if node is None:
        return 0
    lh = _height_checked(node.left)
    rh = _height_checked(node.right)
    assert abs(lh - rh) <= 1
    return max(lh, rh) + 1


def test_sample_session():
    tree = AVLTree()
    tree.insert(106465)
    assert tree.kth(1) == 106465
    for key in (317721, 460929, 644985, 84185, 89851):
        tree.insert(key)
    assert tree.successor(81968) == 84185
    tree.insert(492737)
    assert tree.predecessor(493598) == 492737


def test_duplicates_and_absent_removal():
    tree = AVLTree()
    tree.insert(5)
    tree.insert(5)
    assert len(tree) == 2
    assert tree.remove(5) is True
    assert tree.remove(2) is False
    assert list(tree) == [5]


@pytest.mark.parametrize(("keys", "k"), [([], 1), ([3], 0), ([3], 2)])
def test_kth_out_of_range(keys, k):
    tree = AVLTree()
    for key in keys:
        tree.insert(key)
    with pytest.raises(IndexError):
        tree.kth(k)


def test_single_key_has_no_neighbours():
    tree = AVLTree()
    tree.insert(10)
    assert (tree.predecessor(10), tree.successor(10)) == (None, None)


def test_sorted_inserts_stay_balanced():
    tree = AVLTree()
    for key in range(500):
        tree.insert(key)
    assert _height_checked(tree._root) <= 12
    assert list(tree) == list(range(500))


@given(
    st.lists(st.tuples(st.booleans(), st.integers(-20, 20)), max_size=200),
    st.lists(st.integers(-22, 22), max_size=10),
)
def test_matches_sorted_model(ops, queries):
    tree = AVLTree()
    model = []
    for is_insert, key in ops:
        if is_insert:
            tree.insert(key)
            insort(model, key)
        else:
            assert tree.remove(key) is (key in model)
            if key in model:
                model.remove(key)
    _height_checked(tree._root)
    assert list(tree) == model
    assert len(tree) == len(model)
    assert [tree.kth(k) for k in range(1, len(model) + 1)] == model
    for key in queries:
        i, j = bisect_left(model, key), bisect_right(model, key)
        assert tree.rank(key) == i + 1
        assert tree.predecessor(key) == (model[i - 1] if i else None)
        assert tree.successor(key) == (model[j] if j < len(model) else None)